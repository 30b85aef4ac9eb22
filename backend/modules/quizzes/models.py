"""
Quiz data models.
"""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator


class Question(BaseModel):
    """A multiple-choice question. correct_answer must be one of options."""

    text: str = Field(..., min_length=1)
    options: list[str] = Field(..., min_length=2)
    correct_answer: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def answer_is_an_option(self) -> "Question":
        if self.correct_answer not in self.options:
            raise ValueError("correct_answer must be one of the options")
        return self


class PublicQuestion(BaseModel):
    """A question without its answer."""

    text: str
    options: list[str]


class Quiz(BaseModel):
    id: str
    title: str
    questions: list[Question] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class QuizSummary(BaseModel):
    """Public listing entry; answers are withheld."""

    id: str
    title: str
    question_count: int
    questions: list[PublicQuestion] = Field(default_factory=list)
    created_at: datetime


class CreateQuizRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    questions: list[Question] = Field(..., min_length=1)
