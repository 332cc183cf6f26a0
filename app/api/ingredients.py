"""API endpoints for ingredient recognition."""

from fastapi import APIRouter, File, HTTPException, UploadFile

from app.services.file_service import file_service
from app.services.ingredient_schemas import RecognitionOutcome
from app.services.recognition_service import recognition_service

router = APIRouter(prefix="/ingredients", tags=["ingredients"])


@router.post("/recognize", response_model=RecognitionOutcome)
async def recognize_ingredients(image: UploadFile = File(...)):
    """
    Recognize ingredients in an uploaded photo.

    Returns: {"status": ..., "ingredients": [...], "failure": ...}
    """
    try:
        image_path = await file_service.save_upload(image)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        return await recognition_service.recognize(image_path)
    finally:
        file_service.delete_file(image_path)
