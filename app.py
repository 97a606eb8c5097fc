"""Streamlit demo console for the CareerPilot simulator."""
from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from careerpilot.config import load_settings
from careerpilot.fallbacks import FallbackInvoker, Operation
from careerpilot.log import configure_logging, get_logger
from careerpilot.models import JOB_STATUSES, utcnow
from careerpilot.remote import get_client
from careerpilot.report import build_analytics_report
from careerpilot.simulator import DEFAULT_USER_ID, StateSimulator
from careerpilot.storage import get_storage

log = get_logger(__name__)

# ── Constants ────────────────────────────────────────────────────────────

INTERVIEW_ROLES: list[str] = [
    "Frontend Developer", "Backend Developer", "Machine Learning Engineer",
    "Cybersecurity Analyst", "Product Manager",
]

_GLASS_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: linear-gradient(135deg, #e8eaf6 0%, #f3e5f5 40%, #e0f2f1 100%);
}
[data-testid="stSidebar"] {
    background: rgba(255,255,255,0.55);
    backdrop-filter: blur(16px);
    border-right: 1px solid rgba(255,255,255,0.3);
}
</style>
"""

# ── Helpers ──────────────────────────────────────────────────────────────


def _simulator() -> StateSimulator:
    # One simulator per browser session, like the web app's session storage
    if "simulator" not in st.session_state:
        settings = load_settings()
        configure_logging(settings)
        st.session_state["settings"] = settings
        st.session_state["simulator"] = StateSimulator.from_settings(settings, get_storage(settings))
    return st.session_state["simulator"]


def _invoker() -> FallbackInvoker:
    if "invoker" not in st.session_state:
        sim = _simulator()
        st.session_state["invoker"] = FallbackInvoker(get_client(st.session_state["settings"]), sim)
    return st.session_state["invoker"]


def _user() -> str:
    return st.session_state.get("user_id") or DEFAULT_USER_ID


def _move_job(user: str, job_id: str, key: str) -> None:
    status = st.session_state[key]
    if _simulator().simulate_progress(user, job_id, status) is None:
        log.warning("No job %r for user %r", job_id, user)


# ── Page: Opportunities ──────────────────────────────────────────────────


def page_opportunities() -> None:
    st.header("Opportunities")
    sim = _simulator()
    user = _user()
    now = utcnow()

    if st.button("Refresh from job search", use_container_width=True):
        result = _invoker().invoke(Operation.FETCH_JOBS, {"userId": user})
        if result.error is not None:
            st.error(str(result.error))
        elif result.is_mock:
            st.info("Job search is unavailable — showing demo opportunities.")

    for job in sim.get_jobs(user):
        with st.container(border=True):
            c1, c2 = st.columns([4, 1])
            with c1:
                st.markdown(f"**{job.title}** @ {job.company}")
                deadline = "expired" if job.is_expired(now) else f"{job.days_until_deadline(now)} days left"
                st.caption(f"{job.location} · {job.type} · {job.salary_range} · {deadline}")
                st.caption(", ".join(job.requirements))
            with c2:
                st.metric("Fit", f"{job.fit_score}%")
                st.write(f"_{job.status}_")
            b1, b2 = st.columns(2)
            with b1:
                if st.button("Apply", key=f"apply_{job.id}", disabled=job.status in ("applied", "interviewing", "offered")):
                    sim.apply_to_job(user, job.id)
                    st.rerun()
            with b2:
                # Keyed on the current status so the widget resets after any change
                key = f"status_{job.id}_{job.status}"
                st.selectbox(
                    "Move to", JOB_STATUSES, index=JOB_STATUSES.index(job.status), key=key,
                    on_change=_move_job, args=(user, job.id, key), label_visibility="collapsed",
                )


# ── Page: Analytics ──────────────────────────────────────────────────────


def page_analytics() -> None:
    st.header("Analytics")
    sim = _simulator()
    a = sim.get_analytics(_user())

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Applications", a.total_applications)
    c2.metric("Interview Rate", f"{a.interview_rate}%")
    c3.metric("Offer Rate", f"{a.offer_rate}%")
    c4.metric("Response Rate", f"{a.response_rate}%")

    tab_funnel, tab_dist, tab_report = st.tabs(["Funnel", "Current Stage", "Report"])
    with tab_funnel:
        st.dataframe(pd.DataFrame([{"Stage": s.name, "Count": s.value} for s in a.funnel_data]), hide_index=True)
    with tab_dist:
        st.dataframe(
            pd.DataFrame([{"Stage": s.name, "Jobs": s.value, "Color": s.color} for s in a.status_distribution]),
            hide_index=True,
        )
    with tab_report:
        st.markdown(build_analytics_report(sim, _user()))


# ── Page: Calendar ───────────────────────────────────────────────────────


def page_calendar() -> None:
    st.header("Calendar")
    events = _simulator().get_events(_user())
    if not events:
        st.info("No events yet. Apply to an opportunity to schedule one.")
        return
    df = pd.DataFrame([e.to_dict() for e in events])
    df["date"] = pd.to_datetime(df["date"])
    st.dataframe(
        df.sort_values("date")[["date", "type", "title", "company"]],
        use_container_width=True,
        hide_index=True,
    )


# ── Page: Interview ──────────────────────────────────────────────────────


def page_interview() -> None:
    st.header("Mock Interview")
    role = st.selectbox("Role", INTERVIEW_ROLES)
    messages: list[dict] = st.session_state.setdefault("interview_messages", [])

    for m in messages:
        with st.chat_message("assistant" if m["role"] == "bot" else "user"):
            st.markdown(m["content"])

    prompt = st.chat_input("Your answer")
    if prompt:
        messages.append({"role": "user", "content": prompt})
        result = _invoker().invoke(
            Operation.AI_INTERVIEW, {"messages": messages, "role": role, "userId": _user()},
        )
        if result.error is not None:
            st.error(str(result.error))
            return
        messages.append({"role": "bot", "content": result.data.get("response", "")})
        st.rerun()

    if messages and st.button("Start over"):
        st.session_state.pop("interview_messages", None)
        st.rerun()


# ── Main ─────────────────────────────────────────────────────────────────


def _inject_css() -> None:
    st.markdown(_GLASS_CSS, unsafe_allow_html=True)


def _sidebar() -> None:
    with st.sidebar:
        st.session_state.setdefault("user_id", DEFAULT_USER_ID)
        st.text_input("User id", key="user_id")
        st.caption("Demo mode: data is simulated and kept for this session only.")


def _wrap(page):
    def run():
        _inject_css()
        _sidebar()
        page()

    run.__name__ = page.__name__
    return run


pages = [
    st.Page(_wrap(page_opportunities), title="Opportunities", icon="💼", url_path="opportunities", default=True),
    st.Page(_wrap(page_analytics), title="Analytics", icon="📊", url_path="analytics"),
    st.Page(_wrap(page_calendar), title="Calendar", icon="📅", url_path="calendar"),
    st.Page(_wrap(page_interview), title="Interview", icon="🎤", url_path="interview"),
]

nav = st.navigation(pages)
nav.run()
