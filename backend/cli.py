import argparse
import asyncio
import logging
import sys

from application.exceptions import PushPullRunError
from backend.container import build_services, create_client_from_settings
from backend.settings import get_settings
from domain.sample_data import sample_exercises

logger = logging.getLogger(__name__)


async def seed_exercises(force: bool = False) -> int:
    """
    Write the sample exercise library to the store.

    Skips seeding when the library already has exercises unless `force` is set.

    Returns:
        Number of exercises written
    """
    settings = get_settings()
    client = await create_client_from_settings(settings)
    services = build_services(client, settings)

    existing = await services.exercises.fetch_all_exercises()
    if existing and not force:
        logger.info(f"Exercise library already has {len(existing)} exercises, skipping")
        return 0

    written = 0
    for exercise in sample_exercises():
        await services.exercises.save_exercise(exercise)
        written += 1
    return written


def main():
    parser = argparse.ArgumentParser(description="PushPullRun data layer utilities")
    subparsers = parser.add_subparsers(dest="command", required=True)

    seed = subparsers.add_parser("seed-exercises", help="Load the sample exercise library")
    seed.add_argument(
        "--force",
        action="store_true",
        help="Write the sample exercises even if the library is not empty",
    )

    args = parser.parse_args()
    logging.basicConfig(level=get_settings().log_level)

    try:
        if args.command == "seed-exercises":
            written = asyncio.run(seed_exercises(force=args.force))
            print(f"Seeded {written} exercises")
    except PushPullRunError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
