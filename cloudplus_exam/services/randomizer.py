"""
services/randomizer.py

Builds the question set of a new session: a random subset of the bank,
each question with its own shuffled option order.
"""

import logging
import random
from typing import List, Optional, Sequence

from config import QUESTION_COUNT
from cloudplus_exam.models.question_model import Question, SessionQuestion

logger = logging.getLogger(__name__)


class ExamConfigError(ValueError):
    """Requested exam cannot be built from the loaded bank."""


def shuffle_options(question: Question, rng: random.Random) -> SessionQuestion:
    order = list(question.options)
    rng.shuffle(order)
    return SessionQuestion(question=question, option_order=tuple(order))


def pick_questions(
    bank: Sequence[Question],
    count: int = QUESTION_COUNT,
    rng: Optional[random.Random] = None,
) -> List[SessionQuestion]:
    """
    Select `count` distinct questions without replacement and shuffle the
    option order of each one. The bank is not modified.

    Args:
        bank:  Full question bank.
        count: Number of questions in the session.
        rng:   Randomness source; pass random.Random(seed) for a
               reproducible session.

    Raises:
        ExamConfigError: count is below 1 or larger than the bank.
    """
    if count < 1:
        raise ExamConfigError(f"Question count must be at least 1, got {count}")
    if count > len(bank):
        raise ExamConfigError(
            f"Question bank has {len(bank)} questions, {count} requested"
        )

    rng = rng or random.Random()
    picked = rng.sample(list(bank), count)
    logger.debug(f"Picked {count} of {len(bank)} questions")
    return [shuffle_options(q, rng) for q in picked]
