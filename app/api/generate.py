import logging

from fastapi import APIRouter, Depends, Request

from app.ai.types import ModelClient
from app.core.config import settings
from app.core.errors import GenerationError
from app.core.lifespan import get_model_client
from app.core.rate_limit import rate_limit
from app.schemas.analysis import GenerateRequest
from app.services.dispatcher import dispatch

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/generate",
    summary="Run an analysis",
    description="Route a recruiter analysis, preliminary decision, interview consistency check or resume rewrite to the model.",
)
@rate_limit()
async def generate(
    request: Request,
    body: GenerateRequest,
    client: ModelClient | None = Depends(get_model_client),
):
    _ = request
    try:
        return await dispatch(
            body.type,
            body.payload,
            client=client,
            validation=settings.schema_validation,
        )
    except GenerationError as exc:
        logger.warning("generate_failed type=%s code=%s: %s", body.type, exc.code, exc)
        raise
