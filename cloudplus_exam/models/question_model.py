from typing import Dict, FrozenSet, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# One option key for single-select, a set of keys for multi-select
AnswerKey = Union[str, FrozenSet[str]]


def _answer_keys(answer: AnswerKey) -> FrozenSet[str]:
    return frozenset([answer]) if isinstance(answer, str) else answer


class Question(BaseModel):
    """
    Cloud+ mock exam question.
    Pydantic v2; immutable once loaded from the question bank.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        description="Question number (unique key)"
    )
    question: str = Field(
        ...,
        min_length=1,
        description="Prompt text, may contain embedded line breaks"
    )
    options: Dict[str, str] = Field(
        ...,
        description="Option label key -> option text (e.g. {'A': '...'})"
    )
    answer: AnswerKey = Field(
        ...,
        description="Correct key, or a set of keys for a multi-select question"
    )
    image: Optional[str] = Field(
        None,
        description="Image file name relative to the images directory"
    )
    explanation: Optional[str] = Field(
        None,
        description="Explanation shown on the results screen"
    )

    @field_validator('options')
    @classmethod
    def validate_options_length(cls, v: Dict[str, str]) -> Dict[str, str]:
        """
        Rule 1: a question has between 2 and 6 options.
        """
        if not 2 <= len(v) <= 6:
            raise ValueError(f"options must have 2 to 6 entries, got {len(v)}")
        return v

    @model_validator(mode='after')
    def validate_answer_in_options(self) -> 'Question':
        """
        Rule 2: every answer key must be one of the option keys,
        and a multi-select answer must not be empty.
        """
        keys = _answer_keys(self.answer)
        if not keys:
            raise ValueError("answer set must contain at least one key")
        missing = keys - set(self.options)
        if missing:
            raise ValueError(
                f"answer key(s) {sorted(missing)} not in options {sorted(self.options)}"
            )
        return self

    @property
    def is_multi(self) -> bool:
        return not isinstance(self.answer, str)


class SessionQuestion(BaseModel):
    """
    A Question as presented in one exam session.

    option_order is a permutation of the question's option keys, fixed
    when the session starts.
    """
    model_config = ConfigDict(frozen=True)

    question: Question
    option_order: Tuple[str, ...]

    @model_validator(mode='after')
    def validate_option_order(self) -> 'SessionQuestion':
        if sorted(self.option_order) != sorted(self.question.options):
            raise ValueError(
                f"option_order {self.option_order} is not a permutation of "
                f"{sorted(self.question.options)}"
            )
        return self

    @property
    def id(self) -> int:
        return self.question.id

    @property
    def is_multi(self) -> bool:
        return self.question.is_multi

    @property
    def presented_options(self) -> List[Tuple[str, str]]:
        return [(key, self.question.options[key]) for key in self.option_order]


class Note(BaseModel):
    """Study note (not scored)."""
    model_config = ConfigDict(frozen=True)

    id: Union[int, str]
    title: str = Field(..., min_length=1)
    content: Union[str, List[str]] = Field(
        ...,
        description="Plain text or an ordered list of bullet strings"
    )
    image: Optional[str] = None


class Simulation(BaseModel):
    """
    Performance-based practice item (not scored).
    All fields except id are optional; a simulation with options and
    answer can be self-checked on the simulation screen.
    """
    model_config = ConfigDict(frozen=True)

    id: Union[int, str]
    label: Optional[str] = None
    instructions: Optional[Union[str, List[str]]] = None
    question: Optional[str] = None
    options: Optional[Dict[str, str]] = None
    answer: Optional[AnswerKey] = None
    explanation: Optional[str] = None
    image: Optional[str] = None

    @model_validator(mode='after')
    def validate_answer_in_options(self) -> 'Simulation':
        if self.options is not None and self.answer is not None:
            missing = _answer_keys(self.answer) - set(self.options)
            if missing:
                raise ValueError(
                    f"answer key(s) {sorted(missing)} not in options {sorted(self.options)}"
                )
        return self

    @property
    def is_multi(self) -> bool:
        return self.answer is not None and not isinstance(self.answer, str)

    @property
    def is_checkable(self) -> bool:
        return bool(self.options) and self.answer is not None
