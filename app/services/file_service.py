"""Staging of uploaded images before ingredient recognition."""
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path

from fastapi import UploadFile
from PIL import Image

from app.config import settings


logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = ["image/jpeg", "image/jpg", "image/png", "image/webp"]


class FileService:
    """Writes uploads to a local directory so the vision client can read them."""

    def __init__(self, upload_dir: str = settings.upload_dir):
        self.upload_dir = Path(upload_dir)
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    async def save_upload(self, file: UploadFile) -> str:
        """
        Save an uploaded image to the staging directory.

        Args:
            file: Uploaded file from FastAPI

        Returns:
            Path to the staged file

        Raises:
            ValueError: If file type is invalid
        """
        if file.content_type not in ALLOWED_CONTENT_TYPES:
            raise ValueError(
                f"Invalid file type: {file.content_type}. Allowed: {ALLOWED_CONTENT_TYPES}"
            )

        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        unique_id = uuid.uuid4().hex[:8]
        extension = Path(file.filename or "").suffix.lower() or ".jpg"
        file_path = self.upload_dir / f"{timestamp}_{unique_id}{extension}"

        contents = await file.read()
        with open(file_path, "wb") as f:
            f.write(contents)

        self._downscale_image(file_path)

        return str(file_path)

    def _downscale_image(self, file_path: Path, max_width: int = 1920):
        """
        Shrink oversized photos before upload to the vision service.

        Args:
            file_path: Path to image file
            max_width: Maximum width in pixels
        """
        try:
            with Image.open(file_path) as img:
                if img.width <= max_width:
                    return
                ratio = max_width / img.width
                resized = img.resize(
                    (max_width, int(img.height * ratio)), Image.Resampling.LANCZOS
                )
                if resized.mode == "RGBA" and file_path.suffix in (".jpg", ".jpeg"):
                    resized = resized.convert("RGB")
            resized.save(file_path, optimize=True, quality=85)
        except Exception as e:
            # Keep the original if it can't be decoded
            logger.warning("Could not downscale image %s: %s", file_path, e)

    def delete_file(self, file_path: str) -> bool:
        """
        Delete a staged file.

        Returns:
            True if deleted, False if file not found or not removable
        """
        try:
            path = Path(file_path)
            if path.exists():
                path.unlink()
                return True
            return False
        except OSError as e:
            logger.error("Error deleting file %s: %s", file_path, e)
            return False


# Singleton instance
file_service = FileService()
