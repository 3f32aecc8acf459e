"""
Application state controller.

Holds the state a presentation layer renders (auth status, current user,
loading/error flags, cached exercises and workouts) and turns user actions
into calls on the auth session manager and repositories.

Actions are fire-and-forget: each one schedules an asyncio task on the
running loop and returns it, but callers should observe outcomes through the
published state. Every task resolves to an OperationResult that is applied to
state exactly once, on the loop thread. Concurrent actions are not
coordinated; whichever result is applied last wins. The controller keeps
its pending tasks alive, and wait_idle() waits for all of them.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, List, Optional, Set
from uuid import UUID

from application.auth_session import AuthSessionManager
from application.ports import (
    ExerciseRepository,
    MediaRepository,
    WorkoutRepository,
    profile_image_key,
)
from application.results import OperationResult, capture
from domain.models import Exercise, UserProfile, Workout
from domain.sample_data import sample_exercises

logger = logging.getLogger(__name__)

Subscriber = Callable[["AppStateController"], None]


class AuthPhase(str, Enum):
    """Authentication state machine."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"


@dataclass
class AppState:
    """Published application state."""

    phase: AuthPhase = AuthPhase.UNAUTHENTICATED
    current_user: Optional[UserProfile] = None
    is_loading: bool = False
    error_message: Optional[str] = None
    exercises: List[Exercise] = field(default_factory=list)
    workouts: List[Workout] = field(default_factory=list)

    @property
    def is_authenticated(self) -> bool:
        return self.phase == AuthPhase.AUTHENTICATED


def _newest_first(workouts: List[Workout]) -> List[Workout]:
    return sorted(workouts, key=lambda w: w.date, reverse=True)


class AppStateController:
    """
    Binds the data layer to a presentation collaborator.

    Dependencies are injected via constructor so tests can pass in-memory
    fakes.

    Usage:
        >>> controller = AppStateController(auth=manager, exercises=ex_repo, workouts=w_repo)
        >>> controller.subscribe(lambda c: render(c.state))
        >>> controller.login("ana@example.com", "secret")
    """

    def __init__(
        self,
        auth: AuthSessionManager,
        exercises: ExerciseRepository,
        workouts: WorkoutRepository,
        media: Optional[MediaRepository] = None,
    ) -> None:
        self._auth = auth
        self._exercise_repo = exercises
        self._workout_repo = workouts
        self._media = media
        self.state = AppState()
        self._subscribers: List[Subscriber] = []
        self._tasks: Set["asyncio.Task[OperationResult]"] = set()

    # -------------------------------------------------------------------------
    # Published state
    # -------------------------------------------------------------------------

    @property
    def is_authenticated(self) -> bool:
        return self.state.is_authenticated

    @property
    def current_user(self) -> Optional[UserProfile]:
        return self.state.current_user

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    @property
    def error_message(self) -> Optional[str]:
        return self.state.error_message

    @property
    def exercises(self) -> List[Exercise]:
        return self.state.exercises

    @property
    def workouts(self) -> List[Workout]:
        return self.state.workouts

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked after every state change.

        Returns:
            Callable that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self) -> None:
        for callback in list(self._subscribers):
            callback(self)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def _dispatch(
        self,
        operation: Awaitable[Any],
        description: str,
        on_success: Callable[[Any], None],
        on_failure: Optional[Callable[[OperationResult], None]] = None,
    ) -> "asyncio.Task[OperationResult]":
        """
        Schedule `operation` and apply its result to state when it resolves.

        Must be called from the event loop thread.
        """
        self.state.is_loading = True
        self.state.error_message = None
        self._publish()

        async def run() -> OperationResult:
            result = await capture(operation, description)
            self.state.is_loading = False
            if result.success:
                on_success(result.value)
            else:
                self.state.error_message = result.error_message
                if on_failure is not None:
                    on_failure(result)
            self._publish()
            return result

        task = asyncio.get_running_loop().create_task(run())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_idle(self) -> None:
        """Wait until every dispatched action has been applied to state."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _fail_fast(self, message: str) -> None:
        self.state.error_message = message
        self._publish()

    def _require_user_id(self, message: str) -> Optional[str]:
        user_id = self._auth.current_user_id()
        if user_id is None:
            self._fail_fast(message)
        return user_id

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------

    def _signed_in(self, profile: UserProfile) -> None:
        self.state.current_user = profile
        self.state.phase = AuthPhase.AUTHENTICATED

    def _authentication_failed(self, result: OperationResult) -> None:
        if self.state.current_user is None:
            self.state.phase = AuthPhase.UNAUTHENTICATED
        else:
            self.state.phase = AuthPhase.AUTHENTICATED

    def login(self, email: str, password: str) -> "asyncio.Task[OperationResult]":
        self.state.phase = AuthPhase.AUTHENTICATING
        return self._dispatch(
            self._auth.sign_in(email, password),
            "sign in",
            self._signed_in,
            self._authentication_failed,
        )

    def register(
        self, username: str, email: str, password: str
    ) -> "asyncio.Task[OperationResult]":
        self.state.phase = AuthPhase.AUTHENTICATING
        return self._dispatch(
            self._auth.sign_up(email, password, username),
            "sign up",
            self._signed_in,
            self._authentication_failed,
        )

    def restore_session(self) -> "asyncio.Task[OperationResult]":
        """Resume a persisted session, e.g. at application start."""
        self.state.phase = AuthPhase.AUTHENTICATING

        def restored(profile: Optional[UserProfile]) -> None:
            if profile is None:
                self.state.phase = AuthPhase.UNAUTHENTICATED
            else:
                self._signed_in(profile)

        return self._dispatch(
            self._auth.restore_session(),
            "restore session",
            restored,
            self._authentication_failed,
        )

    def logout(self) -> "asyncio.Task[OperationResult]":
        def signed_out(_: None) -> None:
            self.state.current_user = None
            self.state.workouts = []
            self.state.phase = AuthPhase.UNAUTHENTICATED

        return self._dispatch(self._auth.sign_out(), "sign out", signed_out)

    def reset_password(
        self,
        email: str,
        on_complete: Optional[Callable[[bool], None]] = None,
    ) -> "asyncio.Task[OperationResult]":
        """
        Request a password reset email.

        Args:
            email: Account email
            on_complete: Optional callback told whether the request was accepted
        """

        def accepted(_: None) -> None:
            if on_complete is not None:
                on_complete(True)

        def rejected(_: OperationResult) -> None:
            if on_complete is not None:
                on_complete(False)

        return self._dispatch(
            self._auth.reset_password(email), "reset password", accepted, rejected
        )

    # -------------------------------------------------------------------------
    # Profile
    # -------------------------------------------------------------------------

    def update_profile(
        self,
        height: Optional[float],
        weight: Optional[float],
        goals: List[str],
    ) -> Optional["asyncio.Task[OperationResult]"]:
        current = self.state.current_user
        if current is None or self._auth.current_user_id() is None:
            self._fail_fast("No user logged in")
            return None

        try:
            updated = current.with_measurements(height, weight, goals)
        except ValueError as e:
            self._fail_fast(str(e))
            return None

        def saved(profile: UserProfile) -> None:
            self.state.current_user = profile

        return self._dispatch(self._auth.update_profile(updated), "update profile", saved)

    def upload_profile_image(self, data: bytes) -> Optional["asyncio.Task[OperationResult]"]:
        """Upload a new profile image and store its URL on the profile."""
        current = self.state.current_user
        user_id = self._auth.current_user_id()
        if current is None or user_id is None:
            self._fail_fast("No user logged in")
            return None
        if self._media is None:
            self._fail_fast("Image uploads are not configured")
            return None

        media = self._media

        async def upload() -> UserProfile:
            url = await media.upload_image(data, profile_image_key(user_id))
            updated = current.model_copy(update={"profile_image": url})
            return await self._auth.update_profile(updated)

        def saved(profile: UserProfile) -> None:
            self.state.current_user = profile

        return self._dispatch(upload(), "upload profile image", saved)

    # -------------------------------------------------------------------------
    # Exercise library
    # -------------------------------------------------------------------------

    def load_exercises(self) -> "asyncio.Task[OperationResult]":
        """
        Load the exercise library.

        An empty library is replaced by the sample exercises, which are also
        written to the store. If the fetch fails the sample exercises are
        shown alongside the error.
        """

        async def load() -> List[Exercise]:
            fetched = await self._exercise_repo.fetch_all_exercises()
            if fetched:
                return fetched
            samples = sample_exercises()
            await self._seed_library(samples)
            return samples

        def loaded(exercises: List[Exercise]) -> None:
            self.state.exercises = exercises

        def fall_back(_: OperationResult) -> None:
            self.state.exercises = sample_exercises()

        return self._dispatch(load(), "load exercises", loaded, fall_back)

    async def _seed_library(self, exercises: List[Exercise]) -> None:
        for exercise in exercises:
            try:
                await self._exercise_repo.save_exercise(exercise)
            except Exception as e:
                logger.warning(f"Failed to seed exercise '{exercise.name}': {e}")

    def search_exercises(self, search_text: str) -> List[Exercise]:
        """Filter the cached library by name (case-insensitive)."""
        return [e for e in self.state.exercises if e.matches(search_text)]

    # -------------------------------------------------------------------------
    # Workouts
    # -------------------------------------------------------------------------

    def load_workouts(self) -> Optional["asyncio.Task[OperationResult]"]:
        user_id = self._require_user_id("You must be logged in to view workouts")
        if user_id is None:
            return None

        def loaded(workouts: List[Workout]) -> None:
            self.state.workouts = workouts

        return self._dispatch(
            self._workout_repo.fetch_workouts(user_id), "load workouts", loaded
        )

    def save_workout(self, workout: Workout) -> Optional["asyncio.Task[OperationResult]"]:
        user_id = self._require_user_id("You must be logged in to save workouts")
        if user_id is None:
            return None

        def saved(_: None) -> None:
            others = [w for w in self.state.workouts if w.id != workout.id]
            self.state.workouts = _newest_first([*others, workout])

        return self._dispatch(
            self._workout_repo.save_workout(workout, user_id), "save workout", saved
        )

    def delete_workout(self, workout_id: UUID) -> Optional["asyncio.Task[OperationResult]"]:
        """
        Delete a workout.

        The workout leaves the cached list immediately. If the remote delete
        fails only the error is published; reload to resynchronise.
        """
        user_id = self._require_user_id("You must be logged in to delete workouts")
        if user_id is None:
            return None

        self.state.workouts = [w for w in self.state.workouts if w.id != workout_id]

        def deleted(_: None) -> None:
            logger.debug(f"Workout {workout_id} deleted")

        return self._dispatch(
            self._workout_repo.delete_workout(workout_id, user_id),
            "delete workout",
            deleted,
        )
