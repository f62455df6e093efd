from typing import Optional, Union
from pydantic import BaseModel


class QuestionOption(BaseModel):
    value: str
    label: str
    description: Optional[str] = None


class Question(BaseModel):
    id: str  # GaitProfile field name
    type: str  # 'single_select', 'multi_select'
    question: str
    hint: Optional[str] = None
    options: list[QuestionOption]
    exclusive_value: Optional[str] = None  # multi_select option that clears the others

    @property
    def is_multi(self) -> bool:
        return self.type == "multi_select"

    def has_option(self, value: str) -> bool:
        return any(option.value == value for option in self.options)


# Answers collected so far, keyed by question id
QuizAnswers = dict[str, Union[str, list[str]]]


class QuizProgress(BaseModel):
    answered: int
    total: int
    progress: float
    is_complete: bool
    next_question: Optional[Question] = None
