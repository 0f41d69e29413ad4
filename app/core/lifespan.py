from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.core.config import settings
from app.core.logging import get_logger, setup_logging
from app.services.change_enablement.policy.loader import (
    get_default_policy,
    get_workflows,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """
    Lifespan function for the FastAPI application.
    Handles startup and shutdown events for application services.
    """
    # 1. Configure logging
    setup_logging(settings.LOG_LEVEL)

    # 2. Load and validate the change policy (fail fast on a broken file)
    policy = get_default_policy()
    logger.info(
        "%s started with %d approval workflows",
        settings.PROJECT_NAME,
        len(get_workflows(policy)),
    )

    yield

    logger.info("%s stopped", settings.PROJECT_NAME)
