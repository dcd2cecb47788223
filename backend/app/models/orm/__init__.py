# app/models/orm/__init__.py
from .question import Question
from .main_question import MainQuestion
from .base import Base
