import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.core.config import Settings, settings as default_settings
from api.core.logging_config import setup_logging
from api.errors import register_exception_handlers
from api.routers.application_router import router as application_router
from api.routers.visa_router import visa_router
from dbase.collections.ApplicationCollection import ApplicationCollection
from dbase.collections.VisaCollection import VisaCollection
from dbase.driver import DbaseDriver

logger = logging.getLogger(__name__)


def build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        driver = DbaseDriver(settings.mongodb_uri, timeout_ms=settings.mongodb_timeout_ms)
        driver.ping()
        app.state.visas_db = VisaCollection(driver.get_collection(settings.visa_db, settings.visa_collection))
        app.state.applications_db = ApplicationCollection(
            driver.get_collection(settings.application_db, settings.application_collection)
        )
        try:
            yield
        finally:
            driver.close()
            logger.info("MongoDB client closed")

    return lifespan


def create_app(settings: Optional[Settings] = None, with_store: bool = True) -> FastAPI:
    """
    Build the API. `with_store=False` skips the MongoDB lifespan so callers can
    put their own collections on `app.state`.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.project_name, lifespan=build_lifespan(settings) if with_store else None)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(visa_router)
    app.include_router(application_router)

    @app.get("/")
    def root():
        return {"message": "Visa Navigator API is running"}

    return app


app = create_app()
