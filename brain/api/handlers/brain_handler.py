"""
Brain Handler

Share link endpoints.

    POST /brain/share        (token)   {"share": true}  → {"token": "..."}
                                       {"share": false} → {"disabled": true}
    GET  /brain/{share_link} (public)  → {"username": ..., "contents": [...]}
"""

from fastapi import APIRouter, Depends

from brain.shared.schemas.brain import SharedBrainResponse, ShareRequest, ShareResponse
from brain.shared.schemas.content import ContentResponse
from brain.shared.services.share_link_service import ShareLinkService
from brain.api.dependencies import CurrentUser
from brain.api.dependencies.services import get_share_link_service


router = APIRouter()


@router.post(
    "/brain/share",
    response_model=ShareResponse,
    response_model_exclude_none=True,
)
async def share_brain(
    request: ShareRequest,
    current_user: CurrentUser,
    share_service: ShareLinkService = Depends(get_share_link_service),
):
    """
    Enable or disable the public link to the user's brain.

    Enabling twice returns the same token. Disabling when nothing is
    shared still succeeds.
    """
    token = await share_service.set_sharing(current_user.user_id, request.share)
    if token is None:
        return ShareResponse(disabled=True)
    return ShareResponse(token=token)


@router.get("/brain/{share_link}", response_model=SharedBrainResponse)
async def get_shared_brain(
    share_link: str,
    share_service: ShareLinkService = Depends(get_share_link_service),
):
    """
    Public, read-only view of a shared brain. No token required.

    Raises:
        404: Unknown share link
    """
    shared = await share_service.resolve(share_link)
    return SharedBrainResponse(
        username=shared.username,
        contents=[ContentResponse.from_model(content) for content in shared.contents],
    )
