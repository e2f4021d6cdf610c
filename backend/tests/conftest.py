"""
Test configuration and fixtures for SkinTone Styler tests.
"""
import io

import pytest
from fastapi.testclient import TestClient
from loguru import logger
from PIL import Image

from app.utils.logging import configure_logging

# Import the main app
from main import app


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def make_png():
    """Factory for in-memory PNG photos with optional per-pixel overrides."""
    def _make(width=4, height=3, fill=(255, 0, 0), pixels=None, mode="RGB"):
        image = Image.new(mode, (width, height), fill)
        for (x, y), color in (pixels or {}).items():
            image.putpixel((x, y), color)
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()
    return _make


@pytest.fixture
def skin_photo(make_png):
    """4x3 photo, mostly red, with a skin tone pixel at (1, 2)."""
    return make_png(pixels={(1, 2): (198, 134, 66)})


@pytest.fixture
def log_records():
    """Capture loguru records emitted during a test."""
    configure_logging()
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
