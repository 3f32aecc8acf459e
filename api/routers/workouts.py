"""
Workouts router for the authenticated user's workout history.

Workouts are stored at users/{userId}/workouts/{workoutId}; the user id is
always taken from the access token, never from the request.

This router contains endpoints for:
- /workouts - List workouts, newest first
- /workouts/{workout_id} - Create/overwrite or delete a workout
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_current_user, get_workout_repo
from api.errors import http_error
from application.exceptions import PushPullRunError
from application.ports import WorkoutRepository
from domain.models import Workout

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


@router.get("")
async def list_workouts_endpoint(
    user_id: str = Depends(get_current_user),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """List the user's workouts ordered by date, newest first."""
    try:
        workouts = await workout_repo.fetch_workouts(user_id)
    except PushPullRunError as e:
        raise http_error(e) from e

    return {
        "success": True,
        "workouts": [w.to_document() for w in workouts],
        "count": len(workouts),
    }


@router.put("/{workout_id}")
async def save_workout_endpoint(
    workout_id: UUID,
    workout: Workout,
    user_id: str = Depends(get_current_user),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """Create or overwrite a workout. The body id must match the path."""
    if workout.id != workout_id:
        raise HTTPException(
            status_code=400,
            detail=f"Workout id {workout.id} does not match path id {workout_id}",
        )

    try:
        await workout_repo.save_workout(workout, user_id)
    except PushPullRunError as e:
        raise http_error(e) from e

    return {
        "success": True,
        "workout": workout.to_document(),
        "message": "Workout saved successfully",
    }


@router.delete("/{workout_id}")
async def delete_workout_endpoint(
    workout_id: UUID,
    user_id: str = Depends(get_current_user),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """Delete a workout. Deleting a missing workout succeeds."""
    try:
        await workout_repo.delete_workout(workout_id, user_id)
    except PushPullRunError as e:
        raise http_error(e) from e

    return {
        "success": True,
        "message": "Workout deleted successfully",
    }
