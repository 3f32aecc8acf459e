"""
Tests for the in-memory fakes in tests/fakes.

The fakes back most unit tests, so they must behave like the Supabase
repositories: whole-document overwrites, newest-first workouts, per-user
scoping and idempotent deletes.
"""
import uuid
from datetime import datetime, timezone

import pytest

from application.exceptions import AuthError, NotFoundError, StoreError
from domain.models import UserProfile, Workout
from domain.sample_data import sample_exercises
from tests.fakes import (
    FakeExerciseRepository,
    FakeIdentityProvider,
    FakeProfileRepository,
    FakeWorkoutRepository,
    InMemoryDocumentStore,
    create_fake_services,
    create_workouts,
)

pytestmark = pytest.mark.unit


class TestInMemoryDocumentStore:

    def test_children_are_direct_only(self):
        store = InMemoryDocumentStore()
        store.put("users/u1", {"a": 1})
        store.put("users/u1/workouts/w1", {"b": 2})
        store.put("users/u2/workouts/w2", {"c": 3})

        assert list(store.children("users/u1/workouts")) == ["users/u1/workouts/w1"]
        assert list(store.children("users")) == ["users/u1"]

    def test_documents_are_copied(self):
        store = InMemoryDocumentStore()
        document = {"goals": ["run"]}
        store.put("users/u1", document)
        document["goals"].append("lift")

        assert store.get("users/u1") == {"goals": ["run"]}

    def test_failure_injection(self):
        store = InMemoryDocumentStore()
        store.fail_on("op", StoreError("boom"))
        with pytest.raises(StoreError):
            store.check("op")
        store.clear_failure("op")
        store.check("op")
        assert store.calls == ["op", "op"]


class TestFakeProfileRepository:

    @pytest.mark.asyncio
    async def test_missing_profile(self):
        with pytest.raises(NotFoundError):
            await FakeProfileRepository().fetch_profile("u1")

    @pytest.mark.asyncio
    async def test_save_overwrites(self):
        repo = FakeProfileRepository()
        profile = UserProfile(username="ana", email="ana@example.com")

        await repo.save_profile(profile, "u1")
        await repo.save_profile(profile.with_measurements(170.0, None, []), "u1")

        assert len(repo.store) == 1
        assert (await repo.fetch_profile("u1")).height == 170.0

    def test_reset(self):
        repo = FakeProfileRepository()
        repo.seed("u1", UserProfile(username="ana", email="ana@example.com"))
        repo.reset()
        assert repo.get("u1") is None


class TestFakeExerciseRepository:

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await FakeExerciseRepository().fetch_all_exercises() == []

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self):
        repo = FakeExerciseRepository()
        repo.seed(sample_exercises())
        await repo.delete_exercise(uuid.uuid4())
        assert len(await repo.fetch_all_exercises()) == 3


class TestFakeWorkoutRepository:

    @pytest.mark.asyncio
    async def test_newest_first_regardless_of_insertion(self):
        repo = FakeWorkoutRepository()
        first, second, third = create_workouts(num_workouts=3)
        for workout in (second, third, first):
            await repo.save_workout(workout, "u1")

        fetched = await repo.fetch_workouts("u1")

        assert [w.id for w in fetched] == [third.id, second.id, first.id]

    @pytest.mark.asyncio
    async def test_deleted_workout_absent(self):
        repo = FakeWorkoutRepository()
        workouts = create_workouts(num_workouts=2)
        repo.seed("u1", workouts)

        await repo.delete_workout(workouts[0].id, "u1")

        assert [w.id for w in await repo.fetch_workouts("u1")] == [workouts[1].id]

    @pytest.mark.asyncio
    async def test_timezones_compare_by_instant(self):
        repo = FakeWorkoutRepository()
        utc = Workout(name="UTC", date=datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc))
        naive = Workout(name="Naive", date=datetime(2025, 1, 1, 13, 0))
        repo.seed("u1", [naive, utc])

        assert [w.name for w in await repo.fetch_workouts("u1")] == ["Naive", "UTC"]


class TestFakeIdentityProvider:

    @pytest.mark.asyncio
    async def test_duplicate_email(self):
        provider = FakeIdentityProvider()
        await provider.create_identity("ana@example.com", "secret1")
        with pytest.raises(AuthError):
            await provider.create_identity("ana@example.com", "secret1")

    @pytest.mark.asyncio
    async def test_short_password(self):
        with pytest.raises(AuthError):
            await FakeIdentityProvider().create_identity("ana@example.com", "123")


class TestFakeServices:

    def test_fakes_share_one_store(self):
        services = create_fake_services()
        assert services.profiles.store is services.store
        assert services.workouts.store is services.store
        assert services.identity.store is services.store
