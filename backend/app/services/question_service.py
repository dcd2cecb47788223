import logging
from typing import List, Optional

from fastapi import BackgroundTasks, UploadFile

from app.core.exceptions import InvalidInput, NotFound
from app.models.orm.question import Question
from app.repository.question_repository import QuestionRepository
from app.services.file_storage_service import FileStorage

logger = logging.getLogger(__name__)


class QuestionService:
    """Question/answer pairs with an optional video attachment"""

    def __init__(self, question_repository: QuestionRepository, file_storage: FileStorage):
        self.question_repository = question_repository
        self.file_storage = file_storage

    async def list_questions(self) -> List[Question]:
        return await self.question_repository.read_all()

    async def save_question(
        self,
        question: Optional[str],
        answer: Optional[str],
        video: Optional[UploadFile],
        background_tasks: BackgroundTasks,
    ) -> None:
        """
        Upsert a question by its text.

        A new video replaces the stored one, whose file is removed after the
        response is sent. Without a video the stored filename is kept.
        """
        if not (question or "").strip() or not (answer or "").strip():
            raise InvalidInput()

        video_path = None
        if video is not None and video.filename:
            video_path = await self.file_storage.save_upload(video)

        try:
            superseded = await self.question_repository.upsert(question, answer, video_path)
        except Exception:
            if video_path:
                self.file_storage.delete(video_path)
            raise

        if superseded:
            background_tasks.add_task(self.file_storage.delete, superseded)

        logger.info(
            "[QUESTION] saved question=%r video=%s replaced=%s",
            question, video_path or "-", superseded or "-",
        )

    async def delete_question(
        self,
        question: Optional[str],
        video_path: Optional[str],
        background_tasks: BackgroundTasks,
    ) -> None:
        """Delete a question and the video it owns."""
        deleted = await self.question_repository.delete(question or "")
        if deleted is None:
            raise NotFound(detail="Question not found.")

        if video_path and video_path != deleted.video_path:
            logger.warning(
                "[QUESTION] ignoring video_path=%r for question=%r, stored video is %r",
                video_path, deleted.question, deleted.video_path,
            )
        if deleted.video_path:
            background_tasks.add_task(self.file_storage.delete, deleted.video_path)

        logger.info("[QUESTION] deleted question=%r", deleted.question)
