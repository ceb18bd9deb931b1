"""
views/simulation_view.py — performance-based practice

Each simulation shows its label, instructions (text or numbered steps)
and image. Items with a practice question can be checked on the spot;
the check is never scored or saved.
"""

from __future__ import annotations

from typing import List

import streamlit as st

from cloudplus_exam.models.question_model import Simulation
from cloudplus_exam.services.controller import ExamController
from cloudplus_exam.services.exam_service import answer_matches
from cloudplus_exam.services.question_bank import resolve_image
from cloudplus_exam.views.notes_view import render_back_buttons


def _render_check(sim: Simulation) -> None:
    """Practice question with a self-check form."""
    options = sim.options or {}
    with st.form(key=f"sim_form_{sim.id}"):
        if sim.question:
            st.markdown(f"**{sim.question}**")

        if sim.is_multi:
            chosen = st.multiselect(
                "Select all that apply",
                options=list(options),
                format_func=lambda k: f"{k}. {options[k]}",
                key=f"sim_{sim.id}_multi",
            )
            given = frozenset(chosen) or None
        else:
            given = st.radio(
                "Choose an answer",
                options=list(options),
                index=None,
                format_func=lambda k: f"{k}. {options[k]}",
                key=f"sim_{sim.id}_single",
            )

        checked = st.form_submit_button("Check answer")

    if not checked:
        return
    if given is None:
        st.info("Select an answer first.")
    elif answer_matches(sim.answer, given):
        st.success("Correct!")
    else:
        st.error("Not quite. Try again.")
    if sim.explanation:
        st.markdown(f"*Explanation: {sim.explanation}*")


def render(controller: ExamController, simulations: List[Simulation]) -> None:
    """Render the simulation screen."""
    st.title("Simulation")
    render_back_buttons(controller, "Notes →", controller.open_notes)
    st.divider()

    if not simulations:
        st.info("No simulations available.")
        return

    for idx, sim in enumerate(simulations, start=1):
        with st.expander(sim.label or f"Simulation {idx}", expanded=idx == 1):
            if isinstance(sim.instructions, list):
                st.markdown("\n".join(f"{n}. {step}" for n, step in enumerate(sim.instructions, start=1)))
            elif sim.instructions:
                st.markdown(sim.instructions)

            image = resolve_image(sim.image)
            if image:
                st.image(image)

            if sim.is_checkable:
                _render_check(sim)
            elif sim.question:
                st.markdown(f"**{sim.question}**")
                if sim.explanation:
                    st.markdown(f"*Explanation: {sim.explanation}*")
