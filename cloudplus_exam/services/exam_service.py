"""
services/exam_service.py

Scoring and results-review business logic.
Plain Python functions: no UI code, no global state changes.
"""

from typing import List, Mapping, Optional, Sequence

from cloudplus_exam.models.question_model import AnswerKey, Question, SessionQuestion


def answer_matches(correct: AnswerKey, given: Optional[AnswerKey]) -> bool:
    """
    Compare a user answer against an answer key.

    - Single key: exact, case-sensitive match.
    - Set of keys: the user answer must also be a set and equal as a set
      (order-independent, no partial credit).
    An unanswered question (None) never matches.
    """
    if given is None:
        return False
    if isinstance(correct, str):
        return isinstance(given, str) and given == correct
    if isinstance(given, str):
        return False
    return frozenset(given) == frozenset(correct)


def is_correct(question: SessionQuestion, user_answers: Mapping[int, AnswerKey]) -> bool:
    return answer_matches(question.question.answer, user_answers.get(question.id))


def calculate_score(
    questions: Sequence[SessionQuestion],
    user_answers: Mapping[int, AnswerKey],
) -> int:
    """
    Score the attempt.

    Args:
        questions:    Session questions to grade.
        user_answers: {question.id: selected key | set of keys}

    Returns:
        Number of correctly answered questions, 0 ~ len(questions).
        Unanswered questions count as incorrect.
    """
    return sum(1 for q in questions if is_correct(q, user_answers))


def get_incorrect_questions(
    questions: Sequence[SessionQuestion],
    user_answers: Mapping[int, AnswerKey],
) -> List[SessionQuestion]:
    """
    Return the wrong or unanswered questions, original order kept.
    """
    return [q for q in questions if not is_correct(q, user_answers)]


def answer_text(question: Question, answer: Optional[AnswerKey]) -> str:
    """
    Option text(s) for an answer, for the results screen.

    A set answer is listed in option-key order and joined with ", ".
    Returns "None" for an unanswered question.
    """
    if answer is None:
        return "None"
    if isinstance(answer, str):
        return question.options.get(answer, "") or "None"
    texts = [question.options.get(key, "") for key in sorted(answer)]
    return ", ".join(t for t in texts if t) or "None"


def format_time(seconds: int) -> str:
    """Remaining seconds as MM:SS."""
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"
