from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from pdftext.api.app import create_app
from pdftext.config.settings import Settings

FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures"


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture()
def client() -> TestClient:
    """Client for an app wired to the real default extractor."""
    return TestClient(create_app(Settings(pdf_engine="pdfplumber")))


@pytest.fixture()
def unchecked_client() -> TestClient:
    """Client for an app that skips the %PDF signature check."""
    settings = Settings(pdf_engine="pdfplumber", validate_pdf_signature=False)
    return TestClient(create_app(settings))
