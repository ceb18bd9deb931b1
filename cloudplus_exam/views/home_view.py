"""
views/home_view.py — home / start screen

Features:
  - start a new randomized exam
  - score history of previous attempts, with reset
  - entry points to the study notes and simulations
"""

from __future__ import annotations

import streamlit as st

from config import EXAM_TITLE
from cloudplus_exam.services.controller import ExamController
from cloudplus_exam.views import exam_view


def render(controller: ExamController) -> None:
    """Render the home screen."""

    _, col, _ = st.columns([1, 2.2, 1])

    with col:
        st.markdown(
            f"<h1 style='text-align:center;'>☁️ {EXAM_TITLE}</h1>",
            unsafe_allow_html=True,
        )
        st.markdown(
            f"<p style='text-align:center; color:#6b7280;'>"
            f"{controller.question_count} questions · "
            f"{controller.timer.duration // 60} minutes</p>",
            unsafe_allow_html=True,
        )

        if st.session_state.get(exam_view.START_ERROR_KEY):
            st.error(st.session_state.pop(exam_view.START_ERROR_KEY))

        st.button(
            "Ready? Start Test",
            key="start_exam",
            type="primary",
            on_click=exam_view.start_exam,
            args=(controller,),
            use_container_width=True,
        )

        # ── history ────────────────────────────────────────────────────────
        st.divider()
        st.subheader("History")

        if not controller.history:
            st.write("No attempts yet.")
        else:
            st.markdown(
                "\n".join(
                    f"- Take {i}: {s}/{controller.question_count}"
                    for i, s in enumerate(controller.history, start=1)
                )
            )
            st.button(
                "Reset History",
                key="reset_history",
                on_click=controller.clear_history,
            )

        # ── study resources ────────────────────────────────────────────────
        st.divider()
        st.caption("Study resources")
        res_left, res_right = st.columns(2)
        with res_left:
            st.button("Notes", key="home_notes", on_click=controller.open_notes,
                      use_container_width=True)
        with res_right:
            st.button("Simulation", key="home_sim", on_click=controller.open_simulation,
                      use_container_width=True)
