"""
views/notes_view.py — study notes

Read-only reference content. The running exam (if any) is kept as is,
so the user can go back to it while it is not submitted.
"""

from __future__ import annotations

from typing import List

import streamlit as st

from cloudplus_exam.models.question_model import Note
from cloudplus_exam.services.controller import ExamController
from cloudplus_exam.services.question_bank import resolve_image


def render_back_buttons(controller: ExamController, switch_label: str, on_switch) -> None:
    """Back-to-exam (open session only), back-to-home and the other study screen."""
    cols = st.columns(3)
    if controller.exam_active:
        cols[0].button("← Back to Exam", key="back_exam", type="primary",
                       on_click=controller.back_to_exam, use_container_width=True)
    cols[1].button("Back to Home", key="back_home", on_click=controller.back_to_home,
                   use_container_width=True,
                   help="Leaving for the home screen discards the exam in progress"
                   if controller.exam_active else None)
    cols[2].button(switch_label, key="switch_resource", on_click=on_switch,
                   use_container_width=True)


def render(controller: ExamController, notes: List[Note]) -> None:
    """Render the notes screen."""
    st.title("Notes")
    render_back_buttons(controller, "Simulation →", controller.open_simulation)
    st.divider()

    if not notes:
        st.info("No notes available.")
        return

    for note in notes:
        st.subheader(note.title)
        if isinstance(note.content, list):
            st.markdown("\n".join(f"- {line}" for line in note.content))
        else:
            st.markdown(note.content)

        image = resolve_image(note.image)
        if image:
            st.image(image)
        st.write("")
