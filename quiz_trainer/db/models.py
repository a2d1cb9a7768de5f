"""Persisted records for users, questions and the admin config."""
from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator

from quiz_trainer.config import OPTIONS_PER_QUESTION


def _now() -> datetime:
    return datetime.now().astimezone()


class Score(BaseModel):
    """Latest result of one user in one module."""
    correct: int = Field(..., ge=0, description="Correctly answered questions")
    total: int = Field(..., ge=1, description="Questions in the attempt")
    last_taken: datetime = Field(default_factory=_now)

    @model_validator(mode="after")
    def _correct_within_total(self) -> "Score":
        if self.correct > self.total:
            raise ValueError(f"correct ({self.correct}) exceeds total ({self.total})")
        return self


class User(BaseModel):
    """Quiz user with scores keyed category -> module."""
    id: str
    name: str
    created_at: datetime = Field(default_factory=_now)
    scores: Dict[str, Dict[str, Score]] = Field(default_factory=dict)

    @field_validator("scores", mode="before")
    @classmethod
    def _null_scores(cls, value):
        # Older files store a never-scored user as "scores": null
        return {} if value is None else value


class Question(BaseModel):
    """Multiple-choice question belonging to a (category, module) pair."""
    id: str
    question: str
    options: List[str]
    answer: int = Field(..., description="Zero-based index of the correct option")
    category: str
    module: str

    @model_validator(mode="after")
    def _check_options(self) -> "Question":
        if len(self.options) != OPTIONS_PER_QUESTION:
            raise ValueError(
                f"question {self.id!r} has {len(self.options)} options, expected {OPTIONS_PER_QUESTION}"
            )
        if not 0 <= self.answer < len(self.options):
            raise ValueError(f"question {self.id!r} answer index {self.answer} out of range")
        return self


class QuizData(BaseModel):
    """Document stored in questions.json."""
    questions: List[Question] = Field(default_factory=list)

    @field_validator("questions", mode="before")
    @classmethod
    def _null_questions(cls, value):
        return [] if value is None else value


class AdminConfig(BaseModel):
    """Document stored in admin.json."""
    password: str
