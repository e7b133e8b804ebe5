"""
Content-related Pydantic schemas.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, HttpUrl, TypeAdapter, ValidationError, field_validator

from brain.shared.models.content import Content
from brain.shared.models.enums import ContentType
from brain.shared.schemas.common import BaseSchema


_http_url = TypeAdapter(HttpUrl)


class CreateContentRequest(BaseModel):
    """
    Request to save new content.

    The owner is never part of the body; it comes from the auth token.
    Unknown fields (e.g. a forged "user_id") are ignored.
    """

    link: str = Field(description="http(s) URL to save, stored as sent")
    type: ContentType
    title: str = Field(min_length=1, max_length=500)
    tags: List[str] = Field(default_factory=list, description="Tag titles")

    @field_validator("link")
    @classmethod
    def check_link(cls, link: str) -> str:
        """Accept only absolute http(s) URLs. The original text is kept."""
        link = link.strip()
        try:
            _http_url.validate_python(link)
        except ValidationError:
            raise ValueError("link must be an http or https URL") from None
        return link

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, tags: List[str]) -> List[str]:
        """Strip whitespace, drop blanks, de-duplicate keeping first-seen order."""
        seen: dict[str, None] = {}
        for tag in tags:
            title = tag.strip()
            if not title:
                continue
            if len(title) > 100:
                raise ValueError("tag titles are limited to 100 characters")
            seen.setdefault(title, None)
        return list(seen)


class ContentResponse(BaseSchema):
    """One saved content item."""

    id: str
    title: str
    type: ContentType
    link: str
    tags: List[str]
    user_id: str
    created_at: datetime

    @classmethod
    def from_model(cls, content: Content) -> "ContentResponse":
        return cls(
            id=str(content.id),
            title=content.title,
            type=content.type,
            link=content.link,
            tags=content.tag_titles,
            user_id=str(content.user_id),
            created_at=content.created_at,
        )


class CreateContentResponse(BaseModel):
    """Response after saving content."""

    success: bool = True
    message: str = "Content added"
    content: ContentResponse


class ContentListResponse(BaseModel):
    """All content of the authenticated user."""

    success: bool = True
    message: str = "Contents retrieved successfully"
    contents: List[ContentResponse]
