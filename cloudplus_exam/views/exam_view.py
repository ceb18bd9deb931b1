"""
views/exam_view.py — exam screen

Layout:
  - st.sidebar : countdown + question-number navigator + study resources
  - main area  : current question card + previous/next + final submit

State:
  - st.session_state.controller (ExamController) owns the ExamState.
  - widgets report changes through controller callbacks; the session is
    the single source of truth for answers.
"""

from __future__ import annotations

import streamlit as st

from config import EXAM_TITLE
from cloudplus_exam.services.controller import ExamController
from cloudplus_exam.services.randomizer import ExamConfigError
from cloudplus_exam.views.components import question_card as qcard
from cloudplus_exam.views.components import sidebar as nav
from cloudplus_exam.views.components import timer as tmr

CONFIRM_KEY = "confirm_submit"
START_ERROR_KEY = "start_error"


def start_exam(controller: ExamController) -> None:
    """Build a fresh session (from Home or Retake) and go to the exam screen."""
    st.session_state[CONFIRM_KEY] = False
    try:
        controller.start_exam()
    except ExamConfigError as e:
        st.session_state[START_ERROR_KEY] = str(e)


def _submit(controller: ExamController) -> None:
    st.session_state[CONFIRM_KEY] = False
    controller.submit()


def _ask_confirm() -> None:
    st.session_state[CONFIRM_KEY] = True


def _cancel_confirm() -> None:
    st.session_state[CONFIRM_KEY] = False


def render(controller: ExamController) -> None:
    """Render the exam screen."""

    # ── session guard ──────────────────────────────────────────────────────
    state = controller.state
    if state is None or not state.questions:
        st.warning("No exam in progress. Go back to the home screen.")
        st.button("Home", type="primary", on_click=controller.back_to_home)
        return

    total = state.total
    current_idx = state.current_index
    current_q = state.current_question

    # ── sidebar ────────────────────────────────────────────────────────────
    with st.sidebar:
        st.subheader("Questions")
        tmr.render(controller)
        st.divider()
        nav.render(state, controller)
        st.divider()
        res_left, res_right = st.columns(2)
        with res_left:
            st.button("Notes", key="exam_notes", on_click=controller.open_notes,
                      use_container_width=True)
        with res_right:
            st.button("Simulation", key="exam_sim", on_click=controller.open_simulation,
                      use_container_width=True)

    # ── header ─────────────────────────────────────────────────────────────
    st.title(EXAM_TITLE)
    st.divider()

    # ── question card ──────────────────────────────────────────────────────
    qcard.render(
        question=current_q,
        question_number=current_idx + 1,
        total=total,
        saved_answer=state.answers.get(current_q.id),
        on_select=controller.select_option,
        widget_prefix=state.session_id,
    )

    # ── previous / next ────────────────────────────────────────────────────
    st.write("")
    nav_left, nav_center, nav_right = st.columns([1, 2, 1])

    with nav_left:
        st.button(
            "← Previous",
            key="prev_btn",
            disabled=current_idx == 0,
            on_click=controller.prev_question,
            use_container_width=True,
        )
    with nav_center:
        st.markdown(
            f"<p style='text-align:center; color:#9ca3af; padding-top:8px;'>"
            f"{current_idx + 1} / {total}</p>",
            unsafe_allow_html=True,
        )
    with nav_right:
        st.button(
            "Next →",
            key="next_btn",
            type="primary",
            disabled=current_idx == total - 1,
            on_click=controller.next_question,
            use_container_width=True,
        )

    # ── final submit (last question only) ──────────────────────────────────
    if current_idx != total - 1:
        return

    st.divider()
    unanswered = total - state.answered_count

    if st.session_state.get(CONFIRM_KEY):
        st.warning(f"{unanswered} question(s) are unanswered. Submit anyway?")
        col_yes, col_no = st.columns(2)
        with col_yes:
            st.button("Submit", key="confirm_yes", type="primary",
                      on_click=_submit, args=(controller,))
        with col_no:
            st.button("Cancel", key="confirm_no", on_click=_cancel_confirm)
        return

    if unanswered > 0:
        st.caption(f"⚠️ Unanswered questions: {unanswered}")
        st.button("Submit", key="submit_last", type="primary", on_click=_ask_confirm)
    else:
        st.button("Submit", key="submit_last", type="primary",
                  on_click=_submit, args=(controller,))
