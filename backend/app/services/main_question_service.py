import logging
from typing import List, Optional

from app.core.exceptions import InvalidInput
from app.models.orm.main_question import MainQuestion
from app.repository.main_question_repository import MainQuestionRepository

logger = logging.getLogger(__name__)


class MainQuestionService:
    def __init__(self, main_question_repository: MainQuestionRepository):
        self.main_question_repository = main_question_repository

    async def list_main_questions(self) -> List[MainQuestion]:
        return await self.main_question_repository.read_all()

    async def save_main_question(
        self,
        main_question: Optional[str],
        answer: Optional[str],
        questions: Optional[List[str]],
    ) -> MainQuestion:
        if not (main_question or "").strip() or not (answer or "").strip():
            raise InvalidInput()

        record = await self.main_question_repository.upsert(main_question, answer, questions or [])
        logger.info(
            "[MAIN_QUESTION] saved main_question=%r phrasings=%d",
            main_question, len(record.questions),
        )
        return record
