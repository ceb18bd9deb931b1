from cloudplus_exam.models.session_state import ExamState
from cloudplus_exam.services.timer import ExamTimer, TickOutcome


def _started(timer):
    state = ExamState()
    timer.reset(state)
    return state


def test_full_countdown_expires_once():
    timer = ExamTimer(duration=5400, low_time_threshold=300)
    state = _started(timer)

    outcomes = [timer.tick(state) for _ in range(5400)]

    assert state.time_left == 0
    assert outcomes.count(TickOutcome.EXPIRED) == 1
    assert outcomes[-1] is TickOutcome.EXPIRED


def test_low_time_fires_exactly_once():
    timer = ExamTimer(duration=5400, low_time_threshold=300)
    state = _started(timer)

    outcomes = [timer.tick(state) for _ in range(5400)]

    assert outcomes.count(TickOutcome.LOW_TIME) == 1
    assert outcomes.index(TickOutcome.LOW_TIME) == 5400 - 300 - 1
    assert state.low_time_alerted


def test_no_low_time_when_starting_below_threshold():
    timer = ExamTimer(duration=200, low_time_threshold=300)
    state = _started(timer)
    outcomes = [timer.tick(state) for _ in range(200)]
    assert TickOutcome.LOW_TIME not in outcomes


def test_tick_after_submit_changes_nothing():
    timer = ExamTimer(duration=100)
    state = _started(timer)
    state.submitted = True

    assert timer.tick(state) is TickOutcome.IGNORED
    assert state.time_left == 100


def test_tick_at_zero_keeps_reporting_expiry():
    timer = ExamTimer(duration=0)
    state = _started(timer)
    assert timer.tick(state) is TickOutcome.EXPIRED
    assert state.time_left == 0


def test_reset_restores_duration():
    timer = ExamTimer(duration=600, low_time_threshold=300)
    state = _started(timer)
    for _ in range(301):
        timer.tick(state)
    assert state.low_time_alerted

    timer.reset(state)
    assert state.time_left == 600
    assert not state.low_time_alerted


def test_elapsed_ticks():
    assert ExamTimer.elapsed_ticks(10.0, 12.7) == 2
    assert ExamTimer.elapsed_ticks(10.0, 10.4) == 0
    assert ExamTimer.elapsed_ticks(10.0, 9.0) == 0
