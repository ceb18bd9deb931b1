"""
views/result_view.py — exam results screen

Shows:
  - final score ("You got X out of N correct.")
  - correct / incorrect / unanswered summary
  - per-question review: your answer, correct answer, explanation
  - back home / retake / study resource buttons
The session is read-only here.
"""

from __future__ import annotations

import streamlit as st

from config import EXAM_TITLE
from cloudplus_exam.services.controller import ExamController
from cloudplus_exam.services.exam_service import answer_text, get_incorrect_questions, is_correct
from cloudplus_exam.views import exam_view
from cloudplus_exam.views.components import question_card as qcard
from cloudplus_exam.views.components.timer import TIME_UP_FLAG


def render(controller: ExamController) -> None:
    """Render the results screen."""

    # ── session guard ──────────────────────────────────────────────────────
    state = controller.state
    if state is None or not state.submitted:
        st.warning("No results available.")
        st.button("Home", type="primary", on_click=controller.back_to_home)
        return

    if st.session_state.pop(TIME_UP_FLAG, False):
        st.warning("Time is up! Your answers were submitted automatically.")

    if st.session_state.get(exam_view.START_ERROR_KEY):
        st.error(st.session_state.pop(exam_view.START_ERROR_KEY))

    total = state.total
    score = state.score or 0
    incorrect = get_incorrect_questions(state.questions, state.answers)
    unanswered = total - state.answered_count

    # ── score card ─────────────────────────────────────────────────────────
    st.title(EXAM_TITLE)
    st.header("Results")
    st.markdown(f"#### You got {score} out of {total} correct.")

    s1, s2, s3 = st.columns(3)
    s1.metric("Correct", score)
    s2.metric("Incorrect", len(incorrect) - unanswered)
    s3.metric("Unanswered", unanswered)

    # ── buttons ────────────────────────────────────────────────────────────
    b1, b2, b3, b4 = st.columns(4)
    b1.button("Back to Home", key="home_btn", type="primary",
              on_click=controller.back_to_home, use_container_width=True)
    b2.button("Retake", key="retry_btn", on_click=exam_view.start_exam, args=(controller,),
              use_container_width=True)
    b3.button("Notes", key="res_notes", on_click=controller.open_notes,
              use_container_width=True)
    b4.button("Simulation", key="res_sim", on_click=controller.open_simulation,
              use_container_width=True)

    st.divider()

    # ── review ─────────────────────────────────────────────────────────────
    only_wrong = st.toggle("Show incorrect only", key="review_only_wrong")
    review = incorrect if only_wrong else state.questions

    if only_wrong and not review:
        st.success("You answered every question correctly!")

    for q in review:
        index = state.questions.index(q)
        user = state.answers.get(q.id)
        qcard.render_prompt(q, index + 1)

        colour = "green" if is_correct(q, state.answers) else "red"
        yours = qcard.escape_markdown(answer_text(q.question, user))
        correct = qcard.escape_markdown(answer_text(q.question, q.question.answer))
        st.markdown(
            f":{colour}[Your Answer: {yours}]  \n"
            f":{colour}[Correct: {correct}]"
        )
        if q.question.explanation:
            st.markdown(f"*Explanation: {q.question.explanation}*")
        st.write("")
