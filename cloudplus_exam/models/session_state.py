"""
models/session_state.py

The live exam attempt (the answer sheet).
Pydantic BaseModel based, no UI code.
"""

import time
import uuid
from typing import Dict, List, Optional, Set

from pydantic import BaseModel, Field

from cloudplus_exam.models.question_model import AnswerKey, SessionQuestion

# Progress grid markers
MARK_ANSWERED = "answered"
MARK_VISITED = "visited"
MARK_UNSEEN = "unseen"


class ExamState(BaseModel):
    """
    Full state of one exam session.

    Attributes:
        session_id:       Per-attempt id, used to key UI widgets so a new
                          attempt never inherits the previous one's inputs.
        questions:        Randomized questions, order fixed for the session.
        answers:          {question.id: option key | set of option keys}.
                          A missing key means unanswered.
        visited:          Ids of questions the user navigated away from.
        current_index:    Index of the question on screen (0-based).
        time_left:        Remaining seconds, never increases while active.
        submitted:        One-way False -> True. Frozen afterwards.
        low_time_alerted: True once the low-time notice has fired.
        score:            Number of correct answers, set on submit.
        start_time:       Unix timestamp of the start of the session.
    """

    session_id: str = Field(
        default_factory=lambda: uuid.uuid4().hex,
        description="Per-attempt id"
    )
    questions: List[SessionQuestion] = Field(
        default_factory=list,
        description="Session questions in presentation order"
    )
    answers: Dict[int, AnswerKey] = Field(
        default_factory=dict,
        description="key: question.id, value: selected key or set of keys"
    )
    visited: Set[int] = Field(
        default_factory=set,
        description="Question ids navigated away from at least once"
    )
    current_index: int = Field(
        default=0,
        ge=0,
        description="Index of the current question (0-based)"
    )
    time_left: int = Field(
        default=0,
        ge=0,
        description="Remaining time in seconds"
    )
    submitted: bool = Field(
        default=False,
        description="Final submission done"
    )
    low_time_alerted: bool = Field(
        default=False,
        description="Low-time notice already emitted"
    )
    score: Optional[int] = Field(
        default=None,
        description="Correct answer count, set on submit"
    )
    start_time: float = Field(
        default_factory=time.time,
        description="Session start (Unix timestamp, time.time())"
    )

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Optional[SessionQuestion]:
        if not self.questions:
            return None
        return self.questions[self.current_index]

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    def is_answered(self, question_id: int) -> bool:
        return question_id in self.answers

    def progress_marks(self) -> List[str]:
        """Per-question marker for the progress grid, in session order."""
        marks = []
        for q in self.questions:
            if q.id in self.answers:
                marks.append(MARK_ANSWERED)
            elif q.id in self.visited:
                marks.append(MARK_VISITED)
            else:
                marks.append(MARK_UNSEEN)
        return marks
