"""
Tests for the local upload store: naming, saving, best-effort deletion
and path containment.
"""
import asyncio
import io

import pytest
from starlette.datastructures import UploadFile

from app.core.exceptions import NotFound
from app.services.file_storage_service import FileStorage, generate_file_name


@pytest.fixture
def storage(tmp_path):
    return FileStorage(upload_dir=str(tmp_path / "uploads"), chunk_size=4)


def test_upload_dir_created_on_init(tmp_path):
    target = tmp_path / "nested" / "uploads"

    FileStorage(upload_dir=str(target))

    assert target.is_dir()


def test_generate_file_name_keeps_extension():
    name = generate_file_name("Intro Clip.MP4")

    assert name.endswith(".mp4")
    assert len(name) == 32 + len(".mp4")


def test_generate_file_name_without_extension():
    assert len(generate_file_name("clip")) == 32
    assert len(generate_file_name(None)) == 32
    assert "/" not in generate_file_name("clip./../x")


def test_generated_names_are_unique():
    assert generate_file_name("a.mp4") != generate_file_name("a.mp4")


def test_save_upload_streams_content(storage):
    upload = UploadFile(file=io.BytesIO(b"0123456789"), filename="clip.mp4")

    name = asyncio.run(storage.save_upload(upload))

    assert (storage.upload_dir / name).read_bytes() == b"0123456789"
    assert storage.exists(name)


def test_delete_removes_file(storage):
    (storage.upload_dir / "clip.mp4").write_bytes(b"x")

    assert storage.delete("clip.mp4") is True
    assert not (storage.upload_dir / "clip.mp4").exists()


def test_delete_missing_file_does_not_raise(storage):
    assert storage.delete("missing.mp4") is False


def test_delete_refuses_paths_outside_upload_dir(storage, tmp_path):
    outside = tmp_path / "secret.txt"
    outside.write_text("keep me")

    assert storage.delete("../secret.txt") is False
    assert storage.delete("") is False
    assert outside.exists()


def test_path_for_existing_file(storage):
    (storage.upload_dir / "clip.mp4").write_bytes(b"x")

    assert storage.path_for("clip.mp4") == storage.upload_dir / "clip.mp4"


def test_path_for_rejects_traversal_and_missing(storage, tmp_path):
    (tmp_path / "secret.txt").write_text("nope")

    with pytest.raises(NotFound):
        storage.path_for("../secret.txt")
    with pytest.raises(NotFound):
        storage.path_for("missing.mp4")
