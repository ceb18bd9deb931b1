"""
services/question_bank.py

Static data loading: question bank, notes, simulations, images.
Public API:
  - load_questions(path) -> List[Question]
  - load_notes(path) -> List[Note]
  - load_simulations(path) -> List[Simulation]
  - resolve_image(name, images_dir, placeholder) -> str

Data errors fail fast with QuestionBankError so a broken record is never
rendered. Missing images fall back to the placeholder asset.
"""

import json
import logging
import os
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from config import IMAGES_DIR, PLACEHOLDER_IMAGE
from cloudplus_exam.models.question_model import Note, Question, Simulation

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class QuestionBankError(ValueError):
    """Malformed or missing bank data."""


def _read_records(path: str) -> List[Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise QuestionBankError(f"Data file not found: {path}")
    except (OSError, json.JSONDecodeError) as e:
        raise QuestionBankError(f"Cannot read {path}: {e}")

    if not isinstance(data, list):
        raise QuestionBankError(
            f"{path}: expected a list of records, got {type(data).__name__}"
        )
    return data


def _parse_records(records: List[Any], model: Type[_ModelT], source: str) -> List[_ModelT]:
    parsed: List[_ModelT] = []
    seen_ids = set()

    for idx, raw in enumerate(records):
        record_id = raw.get("id") if isinstance(raw, dict) else None
        try:
            item = model.model_validate(raw)
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}"
                for err in e.errors()
            )
            raise QuestionBankError(
                f"{source}: invalid {model.__name__} at index {idx} (id={record_id!r}): {errors}"
            ) from e

        if item.id in seen_ids:
            raise QuestionBankError(
                f"{source}: duplicate {model.__name__} id {item.id!r} at index {idx}"
            )
        seen_ids.add(item.id)
        parsed.append(item)

    return parsed


def load_questions(path: str) -> List[Question]:
    """
    Load and validate the question bank.

    Raises:
        QuestionBankError: unreadable file, malformed record (missing
            options, answer referencing a nonexistent key, ...) or
            duplicate id.
    """
    questions = _parse_records(_read_records(path), Question, os.path.basename(path))
    if not questions:
        raise QuestionBankError(f"{path}: question bank is empty")

    multi = sum(1 for q in questions if q.is_multi)
    logger.info(f"Loaded {len(questions)} questions ({multi} multi-select) from {path}")
    return questions


def load_notes(path: str) -> List[Note]:
    notes = _parse_records(_read_records(path), Note, os.path.basename(path))
    logger.info(f"Loaded {len(notes)} notes from {path}")
    return notes


def load_simulations(path: str) -> List[Simulation]:
    simulations = _parse_records(_read_records(path), Simulation, os.path.basename(path))
    logger.info(f"Loaded {len(simulations)} simulations from {path}")
    return simulations


def resolve_image(
    name: Optional[str],
    images_dir: str = IMAGES_DIR,
    placeholder: str = PLACEHOLDER_IMAGE,
) -> Optional[str]:
    """
    Image path for a record's `image` field.

    Returns None when the record has no image, the joined path when the
    file exists, and the placeholder asset otherwise.
    """
    if not name:
        return None
    path = os.path.join(images_dir, name)
    if os.path.isfile(path):
        return path
    logger.warning(f"Image not found, using placeholder: {path}")
    return placeholder
