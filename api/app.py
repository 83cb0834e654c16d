import logging

from fastapi import FastAPI

from api.core.config import Settings, get_settings
from api.core.logging_config import setup_logging
from api.error_handlers import register_error_handlers
from api.repositories.json_storage import JsonRecordStore
from api.routers import records as records_router
from api.services.record_service import RecordService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the records API.

    ``settings`` defaults to the environment; tests pass their own to point
    the store at a temporary file or use another shared secret.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    application = FastAPI(
        title="Person Records API",
        redirect_slashes=False,
        docs_url=None if settings.app_env == "prod" else "/docs",
        redoc_url=None,
        openapi_url=None if settings.app_env == "prod" else "/openapi.json",
    )
    application.state.settings = settings
    application.state.record_service = RecordService(JsonRecordStore(settings.records_file))

    register_error_handlers(application)
    application.include_router(records_router.router)

    logger.info("Records API ready (store=%s, env=%s)", settings.records_file, settings.app_env)
    return application


app = create_app()
