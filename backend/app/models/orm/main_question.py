# app/models/orm/main_question.py
from typing import List

from sqlalchemy import JSON, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.models.orm.base import Base, IntegerMixin, TimestampMixin


class MainQuestion(Base, IntegerMixin, TimestampMixin):
    __tablename__ = "main_questions"

    main_question: Mapped[str] = mapped_column(Text, unique=True, nullable=False, index=True)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    # alternative phrasings, kept free of duplicates
    questions: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
