"""
Pytest fixtures for the catalog service tests
"""

import pytest

from catalog_service import Catalog, Settings, create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(GREETING="Hello from the catalog")


@pytest.fixture
def app(settings):
    """Application built around the default seed catalog"""
    application = create_app(settings=settings)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def empty_client(settings):
    """Client for an application with no products configured"""
    application = create_app(catalog=Catalog(), settings=settings)
    application.config["TESTING"] = True
    return application.test_client()


@pytest.fixture
def sample_records():
    return [
        {"id": 10, "name": "Sony Bravia", "category": "tv", "price": 52000, "description": "OLED"},
        {"id": 11, "name": "Pixel 8", "category": "mobile", "price": 63999, "description": "Android"},
        {"id": 12, "name": "TCL 32\"", "category": "tv", "price": 12999.5, "description": "HD Ready"},
    ]
