"""
Translation of Supabase client failures into the application taxonomy.
"""
import logging

from application.exceptions import StoreError

logger = logging.getLogger(__name__)


def store_error(action: str, error: Exception) -> StoreError:
    """
    Build a StoreError for a failed store call and log it.

    Args:
        action: What was being attempted (e.g. "save workout at users/u1/workouts/w1")
        error: The exception raised by the Supabase client

    Returns:
        StoreError carrying the client's message verbatim
    """
    error_msg = str(error) or error.__class__.__name__
    logger.error(f"Failed to {action}: {error_msg}")
    lowered = error_msg.lower()
    if "pgrst" in lowered or "permission" in lowered or "row-level security" in lowered:
        logger.error(
            "RLS/Permissions error: check the row-level security policies for this "
            "table or use SUPABASE_SERVICE_ROLE_KEY for backend access"
        )
    return StoreError(error_msg)
