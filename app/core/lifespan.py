from contextlib import asynccontextmanager
import logging

from fastapi import Request

from app.ai.factory import get_ai_client
from app.ai.types import ModelClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    app.state.model_client = get_ai_client()
    logger.info("model_client_ready configured=%s", app.state.model_client is not None)
    yield
    app.state.model_client = None


def get_model_client(request: Request) -> ModelClient | None:
    """Process-wide model client, built on first use when lifespan did not run."""
    state = request.app.state
    client = getattr(state, "model_client", None)
    if client is None:
        client = get_ai_client()
        state.model_client = client
    return client
