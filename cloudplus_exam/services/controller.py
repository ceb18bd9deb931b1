"""
services/controller.py

Screen state machine for one user's exam app.

The transition table (view, event) -> view is pure data; ExamController
applies the side effects (randomizing, scoring, saving history) and
absorbs every event the current view does not allow as a no-op.
No UI code.
"""

import enum
import logging
import random
import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from config import QUESTION_COUNT
from cloudplus_exam.models.question_model import Question
from cloudplus_exam.models.session_state import ExamState
from cloudplus_exam.services.exam_service import calculate_score
from cloudplus_exam.services.history_store import HistoryStore
from cloudplus_exam.services.randomizer import pick_questions
from cloudplus_exam.services.timer import ExamTimer, TickOutcome

logger = logging.getLogger(__name__)


class View(str, enum.Enum):
    HOME = "home"
    EXAM = "exam"
    RESULTS = "results"
    NOTES = "notes"
    SIMULATION = "simulation"


class Event(str, enum.Enum):
    START_EXAM = "start_exam"
    NAVIGATE = "navigate"
    SELECT_OPTION = "select_option"
    SUBMIT = "submit"
    TIMER_EXPIRED = "timer_expired"
    TICK = "tick"
    OPEN_NOTES = "open_notes"
    OPEN_SIMULATION = "open_simulation"
    BACK_TO_EXAM = "back_to_exam"
    BACK_TO_HOME = "back_to_home"


TRANSITIONS: Dict[Tuple[View, Event], View] = {
    (View.HOME, Event.START_EXAM): View.EXAM,
    (View.RESULTS, Event.START_EXAM): View.EXAM,

    (View.EXAM, Event.NAVIGATE): View.EXAM,
    (View.EXAM, Event.SELECT_OPTION): View.EXAM,
    (View.EXAM, Event.TICK): View.EXAM,
    (View.EXAM, Event.SUBMIT): View.RESULTS,
    (View.EXAM, Event.TIMER_EXPIRED): View.RESULTS,

    (View.HOME, Event.OPEN_NOTES): View.NOTES,
    (View.EXAM, Event.OPEN_NOTES): View.NOTES,
    (View.RESULTS, Event.OPEN_NOTES): View.NOTES,
    (View.SIMULATION, Event.OPEN_NOTES): View.NOTES,
    (View.HOME, Event.OPEN_SIMULATION): View.SIMULATION,
    (View.EXAM, Event.OPEN_SIMULATION): View.SIMULATION,
    (View.RESULTS, Event.OPEN_SIMULATION): View.SIMULATION,
    (View.NOTES, Event.OPEN_SIMULATION): View.SIMULATION,

    (View.NOTES, Event.BACK_TO_EXAM): View.EXAM,
    (View.SIMULATION, Event.BACK_TO_EXAM): View.EXAM,

    (View.NOTES, Event.BACK_TO_HOME): View.HOME,
    (View.SIMULATION, Event.BACK_TO_HOME): View.HOME,
    (View.RESULTS, Event.BACK_TO_HOME): View.HOME,
}


def next_view(view: View, event: Event) -> Optional[View]:
    """Target view for an event, or None when the event is not allowed."""
    return TRANSITIONS.get((view, event))


class ExamController:
    """
    Routes user actions and clock ticks to the exam session.

    Args:
        bank:           Validated question bank.
        history_store:  Score history persistence.
        question_count: Questions per session.
        timer:          Countdown rules (duration, low-time threshold).
        rng:            Randomness source for question/option shuffling.
        clock:          Monotonic clock used to turn wall time into ticks.
    """

    def __init__(
        self,
        bank: Sequence[Question],
        history_store: HistoryStore,
        question_count: int = QUESTION_COUNT,
        timer: Optional[ExamTimer] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.bank = list(bank)
        self.history_store = history_store
        self.question_count = question_count
        self.timer = timer or ExamTimer()
        self.rng = rng or random.Random()
        self.clock = clock

        self.view = View.HOME
        self.state: Optional[ExamState] = None
        self.history: List[int] = history_store.load()
        self._last_tick_at: Optional[float] = None

    # ── helpers ──────────────────────────────────────────────────────────────

    def _go(self, event: Event) -> bool:
        target = next_view(self.view, event)
        if target is None:
            logger.debug(f"Ignored {event.value} in view {self.view.value}")
            return False
        self.view = target
        return True

    def _allowed(self, event: Event) -> bool:
        return next_view(self.view, event) is not None

    @property
    def exam_active(self) -> bool:
        return self.state is not None and not self.state.submitted

    # ── session lifecycle ────────────────────────────────────────────────────

    def start_exam(self) -> ExamState:
        """
        Build a fresh session and switch to the exam screen.

        Raises:
            ExamConfigError: the bank cannot supply question_count questions.
        """
        if not self._allowed(Event.START_EXAM):
            logger.debug(f"Ignored start_exam in view {self.view.value}")
            return self.state

        questions = pick_questions(self.bank, self.question_count, self.rng)
        state = ExamState(questions=questions)
        self.timer.reset(state)

        self.state = state
        self._last_tick_at = self.clock()
        self._go(Event.START_EXAM)
        logger.info(
            f"Exam started: session={state.session_id} "
            f"questions={state.total} time={state.time_left}s"
        )
        return state

    def submit(self, forced: bool = False) -> Optional[int]:
        """
        Score the session, save the score and show the results.

        Runs at most once per session; later calls return None.
        """
        event = Event.TIMER_EXPIRED if forced else Event.SUBMIT
        if not self.exam_active or not self._allowed(event):
            logger.debug(f"Ignored {event.value} in view {self.view.value}")
            return None

        state = self.state
        state.submitted = True
        state.score = calculate_score(state.questions, state.answers)
        self.history = self.history_store.append(state.score)
        self._last_tick_at = None
        self._go(event)

        logger.info(
            f"Exam {'auto-submitted (time up)' if forced else 'submitted'}: "
            f"session={state.session_id} score={state.score}/{state.total}"
        )
        return state.score

    # ── navigation / answers ─────────────────────────────────────────────────

    def jump_to(self, index: int) -> None:
        if not self.exam_active or not self._allowed(Event.NAVIGATE):
            return
        state = self.state
        state.visited.add(state.current_question.id)
        state.current_index = max(0, min(index, state.total - 1))

    def next_question(self) -> None:
        if self.state is not None:
            self.jump_to(self.state.current_index + 1)

    def prev_question(self) -> None:
        if self.state is not None:
            self.jump_to(self.state.current_index - 1)

    def select_option(self, question_id: int, key: str) -> None:
        """
        Single-select: replace the answer.
        Multi-select: toggle `key` in the answer set; removing the last key
        leaves the question unanswered.
        """
        if not self.exam_active or not self._allowed(Event.SELECT_OPTION):
            return
        state = self.state
        question = next((q for q in state.questions if q.id == question_id), None)
        if question is None or key not in question.question.options:
            logger.debug(f"Ignored option {key!r} for question {question_id}")
            return

        if not question.is_multi:
            state.answers[question_id] = key
            return

        current = state.answers.get(question_id, frozenset())
        updated = current - {key} if key in current else current | {key}
        if updated:
            state.answers[question_id] = frozenset(updated)
        else:
            state.answers.pop(question_id, None)

    # ── timer ────────────────────────────────────────────────────────────────

    def tick(self) -> TickOutcome:
        """
        Apply one second. Validity is checked on every call, so a tick that
        arrives after the exam screen was left or the session was submitted
        changes nothing.
        """
        if not self.exam_active or not self._allowed(Event.TICK):
            return TickOutcome.IGNORED

        outcome = self.timer.tick(self.state)
        if outcome is TickOutcome.LOW_TIME:
            logger.warning(
                f"Low time: {self.state.time_left}s left in session {self.state.session_id}"
            )
        elif outcome is TickOutcome.EXPIRED:
            logger.info(f"Time is up for session {self.state.session_id}")
            self.submit(forced=True)
        return outcome

    def sync_clock(self) -> List[TickOutcome]:
        """
        Apply one tick per whole second elapsed since the last applied tick.
        Returns the outcomes that were not plain ticks.
        """
        if self._last_tick_at is None or not self.exam_active or self.view is not View.EXAM:
            return []

        now = self.clock()
        ticks = self.timer.elapsed_ticks(self._last_tick_at, now)
        notable: List[TickOutcome] = []
        for _ in range(ticks):
            outcome = self.tick()
            if outcome is TickOutcome.IGNORED:
                break
            if outcome is not TickOutcome.TICKED:
                notable.append(outcome)
            if outcome is TickOutcome.EXPIRED:
                break
            self._last_tick_at += 1
        return notable

    # ── study resources ──────────────────────────────────────────────────────

    def open_notes(self) -> None:
        self._go(Event.OPEN_NOTES)

    def open_simulation(self) -> None:
        self._go(Event.OPEN_SIMULATION)

    def back_to_exam(self) -> None:
        if not self.exam_active:
            logger.debug("Ignored back_to_exam: no open session")
            return
        if self._go(Event.BACK_TO_EXAM):
            # time spent on study screens is not counted
            self._last_tick_at = self.clock()

    def back_to_home(self) -> None:
        if self._go(Event.BACK_TO_HOME):
            self.state = None
            self._last_tick_at = None

    # ── history ──────────────────────────────────────────────────────────────

    def clear_history(self) -> None:
        self.history_store.clear()
        self.history = []
