"""
Router package for the PushPullRun API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- profile: The signed-in user's profile and profile image
- exercises: Shared exercise library
- workouts: The signed-in user's workout history
"""

from api.routers.health import router as health_router
from api.routers.profile import router as profile_router
from api.routers.exercises import router as exercises_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "health_router",
    "profile_router",
    "exercises_router",
    "workouts_router",
]
