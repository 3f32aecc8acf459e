"""
Profile router for the signed-in user's profile document.

This router contains endpoints for:
- /profile - Get or overwrite the profile (users/{userId})
- /profile/image - Upload a profile image and store its URL on the profile
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from api.deps import get_current_user, get_media_repo, get_profile_repo
from api.errors import http_error
from application.exceptions import PushPullRunError
from application.ports import MediaRepository, ProfileRepository, profile_image_key
from domain.models import UserProfile

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Profile"],
)


@router.get("/profile")
async def get_profile_endpoint(
    user_id: str = Depends(get_current_user),
    profile_repo: ProfileRepository = Depends(get_profile_repo),
):
    """Get the profile of the authenticated user."""
    try:
        profile = await profile_repo.fetch_profile(user_id)
    except PushPullRunError as e:
        raise http_error(e) from e

    return {
        "success": True,
        "profile": profile.to_document(),
    }


@router.put("/profile")
async def save_profile_endpoint(
    profile: UserProfile,
    user_id: str = Depends(get_current_user),
    profile_repo: ProfileRepository = Depends(get_profile_repo),
):
    """Overwrite the profile of the authenticated user with the request body."""
    try:
        await profile_repo.save_profile(profile, user_id)
    except PushPullRunError as e:
        raise http_error(e) from e

    return {
        "success": True,
        "profile": profile.to_document(),
        "message": "Profile saved successfully",
    }


@router.post("/profile/image")
async def upload_profile_image_endpoint(
    request: Request,
    user_id: str = Depends(get_current_user),
    profile_repo: ProfileRepository = Depends(get_profile_repo),
    media_repo: MediaRepository = Depends(get_media_repo),
):
    """
    Upload a profile image.

    The request body is the raw image. It is re-encoded as JPEG, stored at
    profile_images/{userId}.jpg and its URL is written to the profile.
    """
    data = await request.body()
    if not data:
        raise HTTPException(status_code=400, detail="Request body must contain image data")

    try:
        profile = await profile_repo.fetch_profile(user_id)
        url = await media_repo.upload_image(data, profile_image_key(user_id))
        updated = profile.model_copy(update={"profile_image": url})
        await profile_repo.save_profile(updated, user_id)
    except PushPullRunError as e:
        raise http_error(e) from e

    logger.info(f"Profile image updated for user {user_id}")
    return {
        "success": True,
        "url": url,
        "profile": updated.to_document(),
    }
