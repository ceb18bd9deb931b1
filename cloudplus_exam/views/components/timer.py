"""
views/components/timer.py

Countdown clock for the exam sidebar.
Runs as a fragment re-executed every second while the exam screen is
rendered; each run turns the elapsed wall time into controller ticks.
Once the exam screen is gone the fragment is no longer scheduled.
"""

import streamlit as st

from config import LOW_TIME_ALERT_SECONDS
from cloudplus_exam.services.controller import ExamController, View
from cloudplus_exam.services.exam_service import format_time
from cloudplus_exam.services.timer import TickOutcome

TIME_UP_FLAG = "time_up_notice"


@st.fragment(run_every=1)
def render(controller: ExamController) -> None:
    outcomes = controller.sync_clock()

    if TickOutcome.LOW_TIME in outcomes:
        st.toast(f"Only {LOW_TIME_ALERT_SECONDS // 60} minutes left!", icon="⏰")

    if TickOutcome.EXPIRED in outcomes or controller.view is not View.EXAM:
        # session was submitted by the clock → redraw the whole app (results)
        if TickOutcome.EXPIRED in outcomes:
            st.session_state[TIME_UP_FLAG] = True
        st.rerun()

    state = controller.state
    time_str = format_time(state.time_left)
    if state.time_left <= LOW_TIME_ALERT_SECONDS:
        st.markdown(f"**Time Left:** :red[**{time_str}**]")
    else:
        st.markdown(f"**Time Left:** {time_str}")
