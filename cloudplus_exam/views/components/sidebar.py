"""
views/components/sidebar.py

Question-number navigation grid.
Clicking a number jumps straight to that question.
"""

from __future__ import annotations

import streamlit as st

from cloudplus_exam.models.session_state import MARK_ANSWERED, MARK_VISITED, ExamState
from cloudplus_exam.services.controller import ExamController

_SYMBOLS = {
    MARK_ANSWERED: "✔",
    MARK_VISITED: "✖",
}
_UNSEEN_SYMBOL = "□"


def render(state: ExamState, controller: ExamController) -> None:
    """
    Render progress and the question-number grid in the sidebar.

    Markers:
      - ✔ answered
      - ✖ seen but unanswered
      - □ not seen yet
    The current question is drawn as a primary button.
    """
    total = state.total
    answered = state.answered_count

    # ── progress ──────────────────────────────────────────────────────────
    st.caption(f"Answered **{answered}** / {total}")
    st.progress(answered / total if total > 0 else 0)

    # ── number grid (5 columns) ───────────────────────────────────────────
    cols_per_row = 5
    marks = state.progress_marks()

    for row_start in range(0, total, cols_per_row):
        cols = st.columns(cols_per_row)
        for col_idx, mark in enumerate(marks[row_start : row_start + cols_per_row]):
            q_idx = row_start + col_idx
            symbol = _SYMBOLS.get(mark, _UNSEEN_SYMBOL)
            with cols[col_idx]:
                st.button(
                    f"{q_idx + 1} {symbol}",
                    key=f"nav_{state.session_id}_{q_idx}",
                    type="primary" if q_idx == state.current_index else "secondary",
                    help=f"Go to question {q_idx + 1}",
                    on_click=controller.jump_to,
                    args=(q_idx,),
                )

    st.caption("✔ answered · ✖ seen, unanswered · □ not seen")
