import logging
from typing import Callable, Iterable, List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.exceptions import StorageWriteError
from app.models.orm.main_question import MainQuestion
from app.repository.base_repository import BaseRepository

logger = logging.getLogger(__name__)


def dedupe_questions(questions: Iterable[str]) -> List[str]:
    """Drop repeated phrasings, keeping the first occurrence of each."""
    return list(dict.fromkeys(questions))


class MainQuestionRepository(BaseRepository[MainQuestion]):
    read_error_detail = "Error reading responses data"

    def __init__(self, session_factory: Callable[..., object]):
        super().__init__(session_factory, MainQuestion)

    async def find_by_main_question(self, main_question: str) -> MainQuestion | None:
        async with self.session_factory() as session:
            return await self._find_one(session, main_question=main_question)

    async def upsert(self, main_question: str, answer: str, questions: Iterable[str]) -> MainQuestion:
        """Create or update the entry keyed by ``main_question``; ``questions`` is replaced wholesale."""
        phrasings = dedupe_questions(questions)
        try:
            async with self.session_factory() as session:
                existing = await self._find_one(session, main_question=main_question)
                if existing is None:
                    record = MainQuestion(main_question=main_question, answer=answer, questions=phrasings)
                    session.add(record)
                    try:
                        await session.commit()
                        return record
                    except IntegrityError:
                        await session.rollback()
                        existing = await self._find_one(session, main_question=main_question)
                        if existing is None:
                            raise

                existing.answer = answer
                existing.questions = phrasings
                await session.commit()
                return existing
        except SQLAlchemyError:
            logger.exception("[MAIN_QUESTION] failed to save main_question=%r", main_question)
            raise StorageWriteError()
