from fastapi import APIRouter

from app.ai.config import load_ai_config

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report liveness and whether a model key is configured.")
async def health_check():
    cfg = load_ai_config()
    return {
        "status": "healthy",
        "provider": cfg.provider,
        "model_configured": cfg.api_key is not None,
    }
