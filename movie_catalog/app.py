import asyncio
from contextlib import asynccontextmanager, suppress
from http import HTTPStatus

from fastapi import FastAPI

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.infrastructure.config.dependencies import get_omdb_settings, get_seed_settings
from movie_catalog.infrastructure.logging.logger import Logger, setup_logging
from movie_catalog.infrastructure.persistence.database import create_tables, dispose_engine, get_engine, set_engine
from movie_catalog.infrastructure.seeding.runner import run_catalog_seeding
from movie_catalog.presentation.routers import movies

setup_logging()

logger = Logger.get_logger(__name__)


def _log_seed_outcome(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.error("Catalog seeding crashed", exc_info=error)
        return
    result = task.result()
    logger.info(f"Catalog seeding finished with status '{result.status.value}' ({result.imported} imported)")


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    set_engine(engine)
    await create_tables(engine)

    seed_task = None
    seed_settings = get_seed_settings()
    if seed_settings.on_startup:
        seed_task = asyncio.create_task(
            run_catalog_seeding(engine, omdb_settings=get_omdb_settings(), seed_settings=seed_settings),
            name="catalog-seeding",
        )
        seed_task.add_done_callback(_log_seed_outcome)
    app.state.seed_task = seed_task

    try:
        yield
    finally:
        if seed_task is not None and not seed_task.done():
            logger.info("Shutting down while catalog seeding is still running; cancelling it")
            seed_task.cancel()
            with suppress(asyncio.CancelledError):
                await seed_task
        await dispose_engine()


app = FastAPI(title="Filmes", lifespan=lifespan)

app.include_router(movies.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Olá Mundo!"}
