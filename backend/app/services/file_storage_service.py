"""Local storage for uploaded video files."""

import os
import uuid
from pathlib import Path

from fastapi import UploadFile
from loguru import logger

from app.core.exceptions import NotFound


def generate_file_name(filename: str | None = None) -> str:
    """Create a unique stored name, keeping the original extension if any."""
    name = uuid.uuid4().hex
    if filename and "." in filename:
        ext = filename.rsplit(".", 1)[1]
        if ext.isalnum():
            return f"{name}.{ext.lower()}"
    return name


class FileStorage:
    def __init__(self, upload_dir: str, chunk_size: int = 1024 * 1024):
        self.upload_dir = Path(upload_dir).resolve()
        self.chunk_size = chunk_size
        os.makedirs(self.upload_dir, exist_ok=True)

    def _resolve(self, filename: str) -> Path | None:
        if not filename:
            return None
        path = (self.upload_dir / filename).resolve()
        if path.parent != self.upload_dir:
            return None
        return path

    async def save_upload(self, upload: UploadFile) -> str:
        """Stream an uploaded part to disk and return its stored name."""
        stored_name = generate_file_name(upload.filename)
        path = self.upload_dir / stored_name
        size = 0
        try:
            with open(path, "wb") as buffer:
                while chunk := await upload.read(self.chunk_size):
                    buffer.write(chunk)
                    size += len(chunk)
        except Exception:
            path.unlink(missing_ok=True)
            raise
        finally:
            await upload.close()

        logger.info(f"[upload] stored {upload.filename!r} as {stored_name} ({size} bytes)")
        return stored_name

    def delete(self, filename: str) -> bool:
        """Remove a stored file. Never raises; returns whether a file was removed."""
        path = self._resolve(filename)
        if path is None:
            logger.warning(f"[upload] refusing to delete {filename!r}: outside upload directory")
            return False
        try:
            path.unlink()
        except OSError as e:
            logger.warning(f"[upload] error deleting {filename}: {e}")
            return False
        logger.info(f"[upload] deleted {filename}")
        return True

    def path_for(self, filename: str) -> Path:
        """Path of an existing stored file, for serving."""
        path = self._resolve(filename)
        if path is None or not path.is_file():
            raise NotFound(detail="File not found")
        return path

    def exists(self, filename: str) -> bool:
        path = self._resolve(filename)
        return path is not None and path.is_file()
