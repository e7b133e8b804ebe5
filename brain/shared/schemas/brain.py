"""
Shared brain (share link) schemas.
"""

from typing import List, Optional

from pydantic import BaseModel, StrictBool

from brain.shared.schemas.content import ContentResponse


class ShareRequest(BaseModel):
    """Enable (true) or disable (false) the public share link."""

    share: StrictBool


class ShareResponse(BaseModel):
    """
    Result of toggling sharing.

    Exactly one of token / disabled is set.
    """

    success: bool = True
    token: Optional[str] = None
    disabled: Optional[bool] = None


class SharedBrainResponse(BaseModel):
    """What an anonymous visitor sees for a share link."""

    success: bool = True
    username: str
    contents: List[ContentResponse]
