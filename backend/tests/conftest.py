"""
Shared fixtures: every test gets its own SQLite database and upload
directory, injected by overriding the DI container's providers.
"""
import os
import sys

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.database import Database
from app.main import app, container
from app.services.file_storage_service import FileStorage


@pytest.fixture
def db_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def client(db_url, upload_dir):
    container.db.override(providers.Singleton(Database, db_url=db_url))
    container.file_storage.override(providers.Singleton(FileStorage, upload_dir=str(upload_dir)))
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        container.db.reset_override()
        container.file_storage.reset_override()


def save_question(client, question, answer, video=None):
    files = None
    if video is not None:
        files = {"video": video}
    return client.post("/save-question", data={"question": question, "answer": answer}, files=files)


def list_questions(client):
    response = client.get("/get-questions")
    assert response.status_code == 200
    return response.json()
