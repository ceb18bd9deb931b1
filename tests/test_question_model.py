import pytest
from pydantic import ValidationError

from cloudplus_exam.models.question_model import Question, SessionQuestion, Simulation

from conftest import make_question


def test_single_answer_is_kept_as_key():
    q = make_question(1, answer="B")
    assert q.answer == "B"
    assert not q.is_multi


def test_list_answer_becomes_set():
    q = make_question(1, answer=["C", "A"])
    assert q.answer == frozenset({"A", "C"})
    assert q.is_multi


def test_answer_must_be_an_option_key():
    with pytest.raises(ValidationError, match="not in options"):
        make_question(1, answer="E")


def test_multi_answer_keys_must_be_option_keys():
    with pytest.raises(ValidationError, match="not in options"):
        make_question(1, answer=["A", "Z"])


def test_empty_multi_answer_rejected():
    with pytest.raises(ValidationError, match="at least one key"):
        make_question(1, answer=[])


@pytest.mark.parametrize("options", [{"A": "only"}, {k: k for k in "ABCDEFG"}])
def test_option_count_bounds(options):
    with pytest.raises(ValidationError, match="2 to 6"):
        Question(id=1, question="q", options=options, answer="A")


def test_options_missing_rejected():
    with pytest.raises(ValidationError):
        Question.model_validate({"id": 1, "question": "q", "answer": "A"})


def test_question_is_immutable():
    q = make_question(1)
    with pytest.raises(ValidationError):
        q.answer = "B"


def test_session_question_presents_options_in_order():
    q = make_question(1, options={"A": "one", "B": "two", "C": "three"})
    sq = SessionQuestion(question=q, option_order=("C", "A", "B"))
    assert sq.id == 1
    assert sq.presented_options == [("C", "three"), ("A", "one"), ("B", "two")]


def test_session_question_order_must_be_permutation():
    q = make_question(1, options={"A": "one", "B": "two", "C": "three"})
    with pytest.raises(ValidationError, match="permutation"):
        SessionQuestion(question=q, option_order=("A", "B"))
    with pytest.raises(ValidationError, match="permutation"):
        SessionQuestion(question=q, option_order=("A", "B", "B"))


def test_simulation_optional_fields():
    sim = Simulation(id="s1", label="Walkthrough", instructions=["step 1", "step 2"])
    assert not sim.is_checkable
    assert not sim.is_multi


def test_simulation_with_question_is_checkable():
    sim = Simulation(id=2, options={"A": "x", "B": "y"}, answer=["A", "B"])
    assert sim.is_checkable
    assert sim.is_multi


def test_simulation_answer_must_match_options():
    with pytest.raises(ValidationError, match="not in options"):
        Simulation(id=3, options={"A": "x", "B": "y"}, answer="C")
