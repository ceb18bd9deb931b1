import json

import pytest

import config
from cloudplus_exam.services.question_bank import (
    QuestionBankError,
    load_notes,
    load_questions,
    load_simulations,
    resolve_image,
)


def _write(tmp_path, data, name="bank.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_bundled_data_loads():
    questions = load_questions(config.QUESTION_BANK_FILE)
    assert len(questions) >= config.QUESTION_COUNT
    assert any(q.is_multi for q in questions)
    assert load_notes(config.NOTES_FILE)
    assert load_simulations(config.SIMULATIONS_FILE)


def test_load_questions(tmp_path):
    path = _write(tmp_path, [
        {"id": 1, "question": "Line 1\nLine 2", "options": {"A": "a", "B": "b"}, "answer": "A"},
        {"id": 2, "question": "q2", "options": {"A": "a", "B": "b", "C": "c"},
         "answer": ["A", "C"], "explanation": "why", "image": "x.png"},
    ])
    questions = load_questions(path)
    assert [q.id for q in questions] == [1, 2]
    assert questions[1].answer == frozenset({"A", "C"})
    assert questions[1].explanation == "why"


def test_missing_file(tmp_path):
    with pytest.raises(QuestionBankError, match="not found"):
        load_questions(str(tmp_path / "nope.json"))


def test_malformed_json(tmp_path):
    path = tmp_path / "bank.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(QuestionBankError, match="Cannot read"):
        load_questions(str(path))


def test_not_a_list(tmp_path):
    with pytest.raises(QuestionBankError, match="expected a list"):
        load_questions(_write(tmp_path, {"id": 1}))


def test_invalid_record_reports_index_and_id(tmp_path):
    path = _write(tmp_path, [
        {"id": 1, "question": "ok", "options": {"A": "a", "B": "b"}, "answer": "A"},
        {"id": 7, "question": "bad", "options": {"A": "a", "B": "b"}, "answer": "D"},
    ])
    with pytest.raises(QuestionBankError) as exc:
        load_questions(path)
    message = str(exc.value)
    assert "index 1" in message
    assert "id=7" in message
    assert "not in options" in message


def test_missing_options_fails_fast(tmp_path):
    path = _write(tmp_path, [{"id": 1, "question": "q", "answer": "A"}])
    with pytest.raises(QuestionBankError, match="options"):
        load_questions(path)


def test_duplicate_ids(tmp_path):
    record = {"id": 3, "question": "q", "options": {"A": "a", "B": "b"}, "answer": "A"}
    with pytest.raises(QuestionBankError, match="duplicate"):
        load_questions(_write(tmp_path, [record, record]))


def test_empty_bank(tmp_path):
    with pytest.raises(QuestionBankError, match="empty"):
        load_questions(_write(tmp_path, []))


def test_notes_text_or_bullets(tmp_path):
    notes = load_notes(_write(tmp_path, [
        {"id": 1, "title": "Text", "content": "plain"},
        {"id": "n2", "title": "Bullets", "content": ["one", "two"], "image": "n.png"},
    ], "notes.json"))
    assert notes[0].content == "plain"
    assert notes[1].content == ["one", "two"]


def test_simulation_bad_answer(tmp_path):
    path = _write(tmp_path, [{"id": 1, "options": {"A": "a", "B": "b"}, "answer": "Q"}], "sims.json")
    with pytest.raises(QuestionBankError, match="Simulation"):
        load_simulations(path)


def test_resolve_image(tmp_path):
    (tmp_path / "diagram.png").write_bytes(b"png")
    placeholder = str(tmp_path / "placeholder.svg")

    assert resolve_image(None, str(tmp_path), placeholder) is None
    assert resolve_image("", str(tmp_path), placeholder) is None
    assert resolve_image("diagram.png", str(tmp_path), placeholder) == str(tmp_path / "diagram.png")
    assert resolve_image("missing.png", str(tmp_path), placeholder) == placeholder
