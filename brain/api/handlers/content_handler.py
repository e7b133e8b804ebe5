"""
Content Handler

Handles saving, listing and deleting the authenticated user's content.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Every route here requires a token (CurrentUser). The owner passed to the
service is always current_user.user_id.
"""

from fastapi import APIRouter, Depends

from brain.shared.schemas.common import MessageResponse
from brain.shared.schemas.content import (
    ContentListResponse,
    ContentResponse,
    CreateContentRequest,
    CreateContentResponse,
)
from brain.shared.services.content_service import ContentService
from brain.api.dependencies import CurrentUser
from brain.api.dependencies.services import get_content_service


router = APIRouter()


@router.post("/content", response_model=CreateContentResponse)
async def create_content(
    request: CreateContentRequest,
    current_user: CurrentUser,
    content_service: ContentService = Depends(get_content_service),
):
    """
    Save new content for the authenticated user.
    """
    content = await content_service.create_content(
        current_user.user_id,
        link=request.link,
        type=request.type,
        title=request.title,
        tags=request.tags,
    )
    return CreateContentResponse(content=ContentResponse.from_model(content))


@router.get("/contents", response_model=ContentListResponse)
async def list_contents(
    current_user: CurrentUser,
    content_service: ContentService = Depends(get_content_service),
):
    """
    List all of the user's saved content, newest first.
    """
    contents = await content_service.list_own(current_user.user_id)
    return ContentListResponse(
        contents=[ContentResponse.from_model(content) for content in contents],
    )


@router.delete("/delete-content/{content_id}", response_model=MessageResponse)
async def delete_content(
    content_id: str,
    current_user: CurrentUser,
    content_service: ContentService = Depends(get_content_service),
):
    """
    Delete one of the user's content items.

    Raises:
        403: Content belongs to another user
        404: Content not found
    """
    await content_service.delete_own(current_user.user_id, content_id)
    return MessageResponse(message="Content deleted successfully")
