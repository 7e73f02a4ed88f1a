import argparse
import asyncio
import sys

from movie_catalog.applications.interfaces.dtos.seed import SeedStatus
from movie_catalog.infrastructure.config.settings import OmdbSettings, SeedSettings
from movie_catalog.infrastructure.logging.logger import setup_logging
from movie_catalog.infrastructure.persistence.database import create_tables, dispose_engine, get_engine
from movie_catalog.infrastructure.seeding.runner import run_catalog_seeding


async def seed(args: argparse.Namespace) -> int:
    omdb_settings = OmdbSettings()
    if args.api_key is not None:
        omdb_settings = omdb_settings.model_copy(update={"api_key": args.api_key})

    seed_settings = SeedSettings()
    overrides = {}
    if args.target_total is not None:
        overrides["target_total"] = args.target_total
    if args.max_api_calls is not None:
        overrides["max_api_calls"] = args.max_api_calls
    seed_settings = seed_settings.model_copy(update=overrides)

    engine = get_engine()
    try:
        await create_tables(engine)
        result = await run_catalog_seeding(engine, omdb_settings=omdb_settings, seed_settings=seed_settings)
    finally:
        await dispose_engine()

    print(result.model_dump_json(indent=2))
    return 1 if result.status == SeedStatus.FAILED else 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the movie catalog from the OMDb API")
    parser.add_argument("--api_key", type=str, default=None, help="overrides OMDB_API_KEY")
    parser.add_argument("--target_total", type=int, default=None, help="overrides SEED_TARGET_TOTAL")
    parser.add_argument("--max_api_calls", type=int, default=None, help="overrides SEED_MAX_API_CALLS")
    args = parser.parse_args()

    setup_logging()
    sys.exit(asyncio.run(seed(args)))


if __name__ == "__main__":
    main()
