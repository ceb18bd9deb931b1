"""
services/timer.py

Exam countdown.
One tick = one elapsed second. Ticks are applied cooperatively by the
controller; this module only updates ExamState and reports what happened.
"""

import enum

from config import EXAM_DURATION_SECONDS, LOW_TIME_ALERT_SECONDS
from cloudplus_exam.models.session_state import ExamState


class TickOutcome(enum.Enum):
    IGNORED = "ignored"     # session submitted, or no live exam
    TICKED = "ticked"
    LOW_TIME = "low_time"   # time_left just reached the alert threshold
    EXPIRED = "expired"     # time_left is 0 and the session is not submitted


class ExamTimer:
    """
    Countdown rules for one exam.

    Args:
        duration:           Seconds given to a new session.
        low_time_threshold: time_left value that fires the one-shot
                            low-time notice.
    """

    def __init__(
        self,
        duration: int = EXAM_DURATION_SECONDS,
        low_time_threshold: int = LOW_TIME_ALERT_SECONDS,
    ):
        if duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        self.duration = duration
        self.low_time_threshold = low_time_threshold

    def reset(self, state: ExamState) -> None:
        state.time_left = self.duration
        state.low_time_alerted = False

    def tick(self, state: ExamState) -> TickOutcome:
        if state.submitted:
            return TickOutcome.IGNORED
        if state.time_left <= 0:
            return TickOutcome.EXPIRED

        state.time_left -= 1

        if state.time_left == 0:
            return TickOutcome.EXPIRED
        if state.time_left == self.low_time_threshold and not state.low_time_alerted:
            state.low_time_alerted = True
            return TickOutcome.LOW_TIME
        return TickOutcome.TICKED

    @staticmethod
    def elapsed_ticks(last: float, now: float) -> int:
        """Whole seconds between two monotonic clock readings."""
        return max(0, int(now - last))
