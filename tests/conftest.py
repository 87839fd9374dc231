"""Pytest configuration and shared option fixtures."""

import pytest

from seo_json_ld.config import settings


@pytest.fixture(autouse=True)
def lenient_mode(monkeypatch):
    """Run every test in the default (non-strict) mode unless it opts in."""
    monkeypatch.setattr(settings, "strict", False)


@pytest.fixture
def strict_mode(monkeypatch):
    monkeypatch.setattr(settings, "strict", True)


@pytest.fixture
def organization() -> dict:
    """Minimal organization options (mandatory fields only)."""
    return {"name": "My Business", "url": "https://mybusiness.com"}


@pytest.fixture
def full_organization() -> dict:
    return {
        "name": "My Business",
        "url": "https://mybusiness.com",
        "description": "A great business",
        "telephone": "+1-555-123-4567",
        "email": "info@mybusiness.com",
        "priceRange": "$$",
        "image": "https://mybusiness.com/image.jpg",
        "logo": "https://mybusiness.com/logo.jpg",
        "sameAs": ["https://twitter.com/mybusiness"],
        "id": "https://mybusiness.com/#organization",
    }
