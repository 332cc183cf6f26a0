"""Test fixtures for the ingredient recognition service."""

from tests.fixtures.mocks import (
    MockVisionClient,
    create_mock_with_failure,
    create_mock_with_labels,
    vision_handler,
)

__all__ = [
    "MockVisionClient",
    "create_mock_with_failure",
    "create_mock_with_labels",
    "vision_handler",
]
