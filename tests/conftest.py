import random

import pytest

from cloudplus_exam.models.question_model import Question
from cloudplus_exam.services.controller import ExamController
from cloudplus_exam.services.timer import ExamTimer


def make_question(qid, answer="A", options=None, **extra):
    if options is None:
        options = {"A": f"opt A{qid}", "B": f"opt B{qid}", "C": f"opt C{qid}", "D": f"opt D{qid}"}
    return Question(id=qid, question=f"Question {qid}?", options=options, answer=answer, **extra)


class FakeHistoryStore:
    """In-memory stand-in for HistoryStore."""

    def __init__(self, initial=None):
        self.scores = list(initial or [])
        self.append_calls = 0
        self.clear_calls = 0

    def load(self):
        return list(self.scores)

    def append(self, score):
        self.append_calls += 1
        self.scores.append(score)
        return list(self.scores)

    def clear(self):
        self.clear_calls += 1
        self.scores = []


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def bank():
    questions = [make_question(i, answer="ABCD"[i % 4]) for i in range(1, 9)]
    questions.append(make_question(9, answer=["A", "C"]))
    questions.append(make_question(10, answer=["B", "C", "D"]))
    return questions


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def history():
    return FakeHistoryStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(bank, history, rng, clock):
    return ExamController(
        bank,
        history,
        question_count=5,
        timer=ExamTimer(duration=600, low_time_threshold=300),
        rng=rng,
        clock=clock,
    )
