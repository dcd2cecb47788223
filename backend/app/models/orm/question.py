# app/models/orm/question.py
from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column
from app.models.orm.base import Base, IntegerMixin, TimestampMixin


class Question(Base, IntegerMixin, TimestampMixin):
    __tablename__ = "questions"

    # natural key
    question: Mapped[str] = mapped_column(Text, unique=True, nullable=False, index=True)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    # filename relative to the upload directory, "" when no video
    video_path: Mapped[str | None] = mapped_column(Text, nullable=True, default="")
