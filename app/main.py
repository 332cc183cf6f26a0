import logging

from fastapi import FastAPI

from app.api import ingredients
from app.services.recognition_service import recognition_service

logger = logging.getLogger(__name__)

app = FastAPI(title="Ingredient Recognition", version="0.1.0")

# Include routers
app.include_router(ingredients.router)


@app.get("/health")
async def health_check():
    """Liveness plus the vision service probe result."""
    vision_ok = await recognition_service.health()
    if not vision_ok:
        logger.warning("Health check: vision service unavailable")
    return {"status": "healthy", "vision_service": vision_ok}
