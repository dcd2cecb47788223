"""
Service-level tests with the repository and file store mocked out.
"""
import asyncio
import io
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import BackgroundTasks
from starlette.datastructures import UploadFile

from app.core.exceptions import InvalidInput, NotFound, StorageWriteError
from app.services.main_question_service import MainQuestionService
from app.services.question_service import QuestionService


@pytest.fixture
def repository():
    repo = MagicMock()
    repo.upsert = AsyncMock(return_value=None)
    repo.delete = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def file_storage():
    storage = MagicMock()
    storage.save_upload = AsyncMock(return_value="new.mp4")
    return storage


@pytest.fixture
def service(repository, file_storage):
    return QuestionService(question_repository=repository, file_storage=file_storage)


def video():
    return UploadFile(file=io.BytesIO(b"data"), filename="clip.mp4")


def test_invalid_input_touches_nothing(service, repository, file_storage):
    with pytest.raises(InvalidInput):
        asyncio.run(service.save_question("", "answer", video(), BackgroundTasks()))

    repository.upsert.assert_not_called()
    file_storage.save_upload.assert_not_called()


def test_superseded_video_deleted_in_background(service, repository, file_storage):
    repository.upsert.return_value = "old.mp4"
    tasks = BackgroundTasks()

    asyncio.run(service.save_question("q", "a", video(), tasks))

    repository.upsert.assert_awaited_once_with("q", "a", "new.mp4")
    assert len(tasks.tasks) == 1
    assert tasks.tasks[0].func == file_storage.delete
    assert tasks.tasks[0].args == ("old.mp4",)
    file_storage.delete.assert_not_called()


def test_upload_without_filename_is_treated_as_no_video(service, repository, file_storage):
    empty = UploadFile(file=io.BytesIO(b""), filename="")

    asyncio.run(service.save_question("q", "a", empty, BackgroundTasks()))

    file_storage.save_upload.assert_not_called()
    repository.upsert.assert_awaited_once_with("q", "a", None)


def test_failed_write_discards_new_upload(service, repository, file_storage):
    repository.upsert.side_effect = StorageWriteError()

    with pytest.raises(StorageWriteError):
        asyncio.run(service.save_question("q", "a", video(), BackgroundTasks()))

    file_storage.delete.assert_called_once_with("new.mp4")


def test_delete_missing_question_schedules_nothing(service, repository):
    tasks = BackgroundTasks()

    with pytest.raises(NotFound):
        asyncio.run(service.delete_question("q", "clip.mp4", tasks))

    assert tasks.tasks == []


def test_delete_schedules_stored_video(service, repository, file_storage):
    repository.delete.return_value = SimpleNamespace(question="q", video_path="stored.mp4")
    tasks = BackgroundTasks()

    asyncio.run(service.delete_question("q", None, tasks))

    assert [t.args for t in tasks.tasks] == [("stored.mp4",)]


def test_main_question_requires_answer():
    repo = MagicMock()
    repo.upsert = AsyncMock()
    service = MainQuestionService(main_question_repository=repo)

    with pytest.raises(InvalidInput):
        asyncio.run(service.save_main_question("m", "  ", ["a"]))

    repo.upsert.assert_not_called()


def test_main_question_missing_questions_defaults_to_empty():
    repo = MagicMock()
    repo.upsert = AsyncMock(return_value=SimpleNamespace(questions=[]))
    service = MainQuestionService(main_question_repository=repo)

    asyncio.run(service.save_main_question("m", "a", None))

    repo.upsert.assert_awaited_once_with("m", "a", [])
