"""
Test configuration and fixtures for the ingredient recognition service.

- Temporary image files for the vision client and CLI
- MockVisionClient-backed recognition service for orchestrator tests
- httpx.MockTransport helpers standing in for the tagging service
- TestClient for the HTTP surface
"""

from pathlib import Path
from typing import Callable, Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.recognition_service import IngredientRecognitionService
from app.services.vision_client import VisionClient
from tests.fixtures.mocks import MockVisionClient


VISION_URL = "http://vision.test"


# =============================================================================
# Image Fixtures
# =============================================================================


@pytest.fixture
def sample_image_file(tmp_path: Path) -> str:
    """Create a temporary image file for testing."""
    path = tmp_path / "fridge.jpg"
    # Minimal JPEG header
    path.write_bytes(b"\xff\xd8\xff\xe0\x00\x10JFIF\x00")
    return str(path)


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def mock_vision_client() -> MockVisionClient:
    """Provide a fresh MockVisionClient."""
    return MockVisionClient()


@pytest.fixture
def recognition_service(mock_vision_client) -> IngredientRecognitionService:
    """Recognition service wired to the mock vision client."""
    return IngredientRecognitionService(vision_client=mock_vision_client)


@pytest.fixture
def make_vision_client() -> Callable[..., VisionClient]:
    """
    Build a real VisionClient whose HTTP traffic goes to a handler function.

    Usage:
        client = make_vision_client(lambda request: httpx.Response(200, json={...}))
    """

    def _make(handler, **kwargs) -> VisionClient:
        return VisionClient(
            base_url=VISION_URL, transport=httpx.MockTransport(handler), **kwargs
        )

    return _make


# =============================================================================
# HTTP Client Fixtures
# =============================================================================


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """TestClient for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client
