"""
views/components/question_card.py

Renders one SessionQuestion and reports option changes back to the
controller. Options appear in the session's fixed presentation order:
radio buttons for single-select, checkboxes for multi-select.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

import streamlit as st

from cloudplus_exam.models.question_model import AnswerKey, SessionQuestion
from cloudplus_exam.services.question_bank import resolve_image


_MARKDOWN_SPECIAL = re.compile(r"([\\`*_\[\]$~|<>#])")


def escape_markdown(text: str) -> str:
    """Backslash-escape characters Streamlit markdown would interpret."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def prompt_markdown(text: str, question_number: int) -> str:
    """
    Bold prompt with the question number on the first line.

    Each line is bolded on its own and joined with hard breaks, so blank
    lines stay visible without splitting the prompt into paragraphs.
    """
    lines = [line.strip() for line in text.split("\n")]
    lines[0] = f"{question_number}. {lines[0]}"
    return "  \n".join(
        f"**{escape_markdown(line)}**" if line else "&nbsp;" for line in lines
    )


def render_prompt(question: SessionQuestion, question_number: int) -> None:
    """Question number, prompt (line breaks kept) and optional image."""
    st.markdown(prompt_markdown(question.question.question, question_number))

    image = resolve_image(question.question.image)
    if image:
        st.image(image, caption=f"Question {question.id}")


def render(
    question: SessionQuestion,
    question_number: int,
    total: int,
    saved_answer: Optional[AnswerKey],
    on_select: Callable[[int, str], None],
    widget_prefix: str,
) -> None:
    """
    Args:
        question:        Question to show.
        question_number: 1-based position in the session.
        total:           Number of questions in the session.
        saved_answer:    Current answer from the session (None if unanswered).
        on_select:       Called as on_select(question_id, option_key).
        widget_prefix:   Unique per session so widgets never leak between
                         attempts.
    """
    st.caption(
        f"Question {question_number} / {total}"
        + (" · select all that apply" if question.is_multi else "")
    )
    render_prompt(question, question_number)

    options = dict(question.presented_options)

    if question.is_multi:
        selected = saved_answer if isinstance(saved_answer, frozenset) else frozenset()
        for key, text in question.presented_options:
            st.checkbox(
                f"{key}. {text}",
                value=key in selected,
                key=f"{widget_prefix}_check_{question.id}_{key}",
                on_change=on_select,
                args=(question.id, key),
            )
        return

    radio_key = f"{widget_prefix}_radio_{question.id}"
    order = list(question.option_order)
    index = order.index(saved_answer) if saved_answer in order else None

    def _on_change() -> None:
        value = st.session_state.get(radio_key)
        if value is not None:
            on_select(question.id, value)

    st.radio(
        "Choose an answer",
        options=order,
        index=index,
        format_func=lambda k: f"{k}. {options[k]}",
        key=radio_key,
        on_change=_on_change,
        label_visibility="collapsed",
    )
