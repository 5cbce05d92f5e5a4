import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from petclinic import __version__
from petclinic.api import owners, pets, visits
from petclinic.config import settings
from petclinic.constants import Views
from petclinic.init_db import init_database
from petclinic.utils.logging_config import configure_logging
from petclinic.web import ViewResult

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_dir, settings.log_level)
    init_database(seed=settings.seed_pet_types)
    logger.info(f"Pet clinic {__version__} started")
    yield
    logger.info("Pet clinic stopped")


def create_app() -> FastAPI:
    app = FastAPI(title="Pet Clinic", version=__version__, lifespan=lifespan)

    app.include_router(owners.router)
    app.include_router(pets.router)
    app.include_router(visits.router)

    @app.get("/")
    def welcome():
        return ViewResult(Views.WELCOME).to_dict()

    @app.get("/health")
    def health():
        return {"status": "ok", "version": __version__}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("petclinic.main:app", host="127.0.0.1", port=8080)
