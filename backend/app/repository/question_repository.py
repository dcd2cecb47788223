import logging
from typing import Callable, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.exceptions import StorageWriteError
from app.models.orm.question import Question
from app.repository.base_repository import BaseRepository

logger = logging.getLogger(__name__)


class QuestionRepository(BaseRepository[Question]):
    read_error_detail = "Error reading questions data"

    def __init__(self, session_factory: Callable[..., object]):
        super().__init__(session_factory, Question)

    async def find_by_question(self, question: str) -> Question | None:
        async with self.session_factory() as session:
            return await self._find_one(session, question=question)

    async def upsert(self, question: str, answer: str, video_path: Optional[str] = None) -> Optional[str]:
        """
        Create or update the record keyed by ``question``.

        ``video_path`` replaces the stored filename only when given. Returns the
        filename the record stopped referencing, or None.
        """
        try:
            async with self.session_factory() as session:
                existing = await self._find_one(session, question=question)
                if existing is None:
                    session.add(Question(question=question, answer=answer, video_path=video_path or ""))
                    try:
                        await session.commit()
                        return None
                    except IntegrityError:
                        # lost the race against a concurrent insert of the same key
                        await session.rollback()
                        existing = await self._find_one(session, question=question)
                        if existing is None:
                            raise

                superseded = self._apply(existing, answer, video_path)
                await session.commit()
                return superseded
        except SQLAlchemyError:
            logger.exception("[QUESTION] failed to save question=%r", question)
            raise StorageWriteError()

    async def delete(self, question: str) -> Question | None:
        """Delete the record keyed by ``question`` and return it, or None if absent."""
        try:
            async with self.session_factory() as session:
                existing = await self._find_one(session, question=question)
                if existing is None:
                    return None
                await session.delete(existing)
                await session.commit()
                return existing
        except SQLAlchemyError:
            logger.exception("[QUESTION] failed to delete question=%r", question)
            raise StorageWriteError()

    @staticmethod
    def _apply(record: Question, answer: str, video_path: Optional[str]) -> Optional[str]:
        superseded = None
        if video_path and record.video_path:
            superseded = record.video_path
        record.answer = answer
        record.video_path = video_path or record.video_path
        return superseded
