"""
Exercises router for the shared exercise library.

The library lives in a single top-level collection (exercises/{exerciseId})
that every authenticated user can read and write.

This router contains endpoints for:
- /exercises - List the library, optionally filtered by name
- /exercises/{exercise_id} - Create/overwrite or delete an exercise
- /exercises/{exercise_id}/image - Upload a demonstration image
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from api.deps import get_current_user, get_exercise_repo, get_media_repo
from api.errors import http_error
from application.exceptions import NotFoundError, PushPullRunError
from application.ports import ExerciseRepository, MediaRepository, exercise_image_key
from domain.models import Exercise

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


@router.get("")
async def list_exercises_endpoint(
    search: Optional[str] = Query(None, description="Case-insensitive name filter"),
    user_id: str = Depends(get_current_user),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
):
    """List all exercises in the library."""
    try:
        exercises = await exercise_repo.fetch_all_exercises()
    except PushPullRunError as e:
        raise http_error(e) from e

    if search:
        exercises = [e for e in exercises if e.matches(search)]

    return {
        "success": True,
        "exercises": [e.to_document() for e in exercises],
        "count": len(exercises),
    }


@router.put("/{exercise_id}")
async def save_exercise_endpoint(
    exercise_id: UUID,
    exercise: Exercise,
    user_id: str = Depends(get_current_user),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
):
    """Create or overwrite an exercise. The body id must match the path."""
    if exercise.id != exercise_id:
        raise HTTPException(
            status_code=400,
            detail=f"Exercise id {exercise.id} does not match path id {exercise_id}",
        )

    try:
        await exercise_repo.save_exercise(exercise)
    except PushPullRunError as e:
        raise http_error(e) from e

    return {
        "success": True,
        "exercise": exercise.to_document(),
        "message": "Exercise saved successfully",
    }


@router.delete("/{exercise_id}")
async def delete_exercise_endpoint(
    exercise_id: UUID,
    user_id: str = Depends(get_current_user),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
):
    """Delete an exercise. Deleting a missing exercise succeeds."""
    try:
        await exercise_repo.delete_exercise(exercise_id)
    except PushPullRunError as e:
        raise http_error(e) from e

    return {
        "success": True,
        "message": "Exercise deleted successfully",
    }


@router.post("/{exercise_id}/image")
async def upload_exercise_image_endpoint(
    exercise_id: UUID,
    request: Request,
    user_id: str = Depends(get_current_user),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    media_repo: MediaRepository = Depends(get_media_repo),
):
    """
    Upload a demonstration image for an exercise.

    The request body is the raw image. Its URL is appended to the
    exercise's image names.
    """
    data = await request.body()
    if not data:
        raise HTTPException(status_code=400, detail="Request body must contain image data")

    try:
        exercises = await exercise_repo.fetch_all_exercises()
        exercise = next((e for e in exercises if e.id == exercise_id), None)
        if exercise is None:
            raise NotFoundError("Exercise not found", path=f"exercises/{exercise_id}")

        url = await media_repo.upload_image(data, exercise_image_key(exercise_id))
        image_names = list(exercise.image_names)
        if url not in image_names:
            image_names.append(url)
        updated = exercise.model_copy(update={"image_names": image_names})
        await exercise_repo.save_exercise(updated)
    except PushPullRunError as e:
        raise http_error(e) from e

    return {
        "success": True,
        "url": url,
        "exercise": updated.to_document(),
    }
