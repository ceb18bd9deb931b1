"""
app.py — Streamlit entry point

Run with `streamlit run cloudplus_exam/app.py` (main.py does this and
opens a browser window).

Process-wide resources (question bank, notes, simulations, score history
store) are cached once per server process; each browser session keeps
its own ExamController in st.session_state.
"""

import logging
import os
import sys
from typing import List

import streamlit as st

import config
from cloudplus_exam.models.question_model import Note, Question, Simulation
from cloudplus_exam.services.controller import ExamController, View
from cloudplus_exam.services.history_store import HistoryStore
from cloudplus_exam.services.question_bank import (
    QuestionBankError, load_notes, load_questions, load_simulations
)
from cloudplus_exam.views import exam_view, home_view, notes_view, result_view, simulation_view

logger = logging.getLogger(__name__)


# ── process-wide resources ───────────────────────────────────────────────────

@st.cache_resource
def _configure_logging() -> None:
    try:
        os.makedirs(os.path.dirname(config.LOG_FILE), exist_ok=True)
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            handlers=[
                logging.FileHandler(config.LOG_FILE, encoding='utf-8'),
                logging.StreamHandler(sys.stdout)
            ]
        )
    except OSError:
        # log file unavailable → console only
        logging.basicConfig(level=logging.INFO)


@st.cache_resource
def _question_bank(path: str) -> List[Question]:
    return load_questions(path)


@st.cache_resource
def _notes(path: str) -> List[Note]:
    return load_notes(path)


@st.cache_resource
def _simulations(path: str) -> List[Simulation]:
    return load_simulations(path)


@st.cache_resource
def _history_store(path: str) -> HistoryStore:
    return HistoryStore(path, config.HISTORY_KEY)


def _get_controller(bank: List[Question]) -> ExamController:
    if "controller" not in st.session_state:
        st.session_state.controller = ExamController(
            bank,
            _history_store(config.HISTORY_FILE),
            question_count=config.QUESTION_COUNT,
        )
    return st.session_state.controller


# ── screens ──────────────────────────────────────────────────────────────────

def _render_resource(controller: ExamController) -> None:
    """Notes / simulation screens; a broken data file only breaks that screen."""
    try:
        if controller.view is View.NOTES:
            notes_view.render(controller, _notes(config.NOTES_FILE))
        else:
            simulation_view.render(controller, _simulations(config.SIMULATIONS_FILE))
    except QuestionBankError as e:
        logger.error(f"Study data error: {e}")
        st.error(f"Study material could not be loaded: {e}")
        notes_view.render_back_buttons(
            controller,
            "Simulation →" if controller.view is View.NOTES else "Notes →",
            controller.open_simulation if controller.view is View.NOTES else controller.open_notes,
        )


_PAGES = {
    View.HOME: home_view.render,
    View.EXAM: exam_view.render,
    View.RESULTS: result_view.render,
    View.NOTES: _render_resource,
    View.SIMULATION: _render_resource,
}


def main() -> None:
    st.set_page_config(page_title=config.EXAM_TITLE, page_icon="☁️", layout="centered")
    _configure_logging()

    try:
        bank = _question_bank(config.QUESTION_BANK_FILE)
    except QuestionBankError as e:
        logger.error(f"Question bank error: {e}")
        st.error(f"The question bank could not be loaded.\n\n{e}")
        st.stop()

    controller = _get_controller(bank)
    _PAGES[controller.view](controller)


main()
