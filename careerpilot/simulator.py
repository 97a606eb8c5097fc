"""
Per-user demo state: simulated jobs, calendar events and derived analytics.

Stands in for the live job backend when it is unreachable. Every user id gets
its own copy of the seed jobs the first time it is read; each mutation
recomputes analytics and writes the whole snapshot back to storage.
"""
from __future__ import annotations

import json
import math
import random
from datetime import datetime, timedelta
from typing import Callable

from careerpilot.log import get_logger
from careerpilot.models import (
    JOB_STATUSES,
    Analytics,
    CalendarEvent,
    FunnelStage,
    Job,
    SimState,
    StatusSlice,
    to_iso,
    utcnow,
)
from careerpilot.seed import seed_jobs
from careerpilot.storage import MemoryStorage, Storage

log = get_logger(__name__)

STORAGE_KEY_PREFIX = "career_pilot_mock_state_"
DEFAULT_USER_ID = "default"

_APPLIED = {"applied", "interviewing", "offered", "rejected", "accepted"}
_INTERVIEWING = {"interviewing", "offered", "accepted"}
_OFFERS = {"offered", "accepted"}
# Re-applying from these is a no-op
_APPLY_LOCKED = {"applied", "interviewing", "offered"}
_PASSIVE = {"new", "saved"}

_DISTRIBUTION_COLORS: dict[str, str] = {
    "Applied": "#9b87f5",
    "Interview": "#F97316",
    "Offer": "#10B981",
    "Rejected": "#EF4444",
}


def _percent(part: int, total: int) -> int:
    if total <= 0:
        return 0
    # half-up, not banker's rounding
    return int(math.floor((part / total) * 100 + 0.5))


def recalculate_analytics(jobs: list[Job]) -> Analytics:
    """Aggregate pipeline metrics for a job list.

    The distribution buckets subtract overlapping memberships, so a job
    rejected after interviewing is counted in both the Interview and Rejected
    sets before subtraction. Callers must not read them as cumulative.
    """
    applied = sum(1 for j in jobs if j.status in _APPLIED)
    interviewing = sum(1 for j in jobs if j.status in _INTERVIEWING)
    offers = sum(1 for j in jobs if j.status in _OFFERS)
    rejected = sum(1 for j in jobs if j.status == "rejected")

    total = applied
    return Analytics(
        total_applications=total,
        interview_rate=_percent(interviewing, total),
        offer_rate=_percent(offers, total),
        response_rate=_percent(interviewing + rejected, total),
        funnel_data=[
            FunnelStage("Applied", total),
            FunnelStage("Screening", max(0, total - rejected)),
            FunnelStage("Interview", interviewing),
            FunnelStage("Offer", offers),
        ],
        status_distribution=[
            StatusSlice("Applied", applied - interviewing - rejected, _DISTRIBUTION_COLORS["Applied"]),
            StatusSlice("Interview", interviewing - offers, _DISTRIBUTION_COLORS["Interview"]),
            StatusSlice("Offer", offers, _DISTRIBUTION_COLORS["Offer"]),
            StatusSlice("Rejected", rejected, _DISTRIBUTION_COLORS["Rejected"]),
        ],
    )


class StateSimulator:
    def __init__(
        self,
        storage: Storage | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
        *,
        follow_up_probability: float = 0.3,
        interview_offset_days: tuple[int, int] = (5, 7),
    ) -> None:
        self.storage = storage if storage is not None else MemoryStorage()
        self.rng = rng or random.Random()
        self.clock = clock or utcnow
        self.follow_up_probability = follow_up_probability
        self.interview_offset_days = tuple(interview_offset_days)

    @classmethod
    def from_settings(cls, settings: dict, storage: Storage) -> StateSimulator:
        sim_cfg = settings.get("simulator", {})
        return cls(
            storage,
            follow_up_probability=float(sim_cfg.get("follow_up_probability", 0.3)),
            interview_offset_days=tuple(sim_cfg.get("interview_offset_days", (5, 7))),
        )

    # ── persistence ─────────────────────────────────────────────────────

    @staticmethod
    def storage_key(user_id: str | None) -> str:
        return f"{STORAGE_KEY_PREFIX}{DEFAULT_USER_ID if user_id is None else user_id}"

    def _load(self, user_id: str | None) -> SimState:
        key = self.storage_key(user_id)
        stored = self.storage.get(key)
        if stored:
            return SimState.from_dict(json.loads(stored))

        state = SimState(jobs=seed_jobs(self.clock()))
        state.analytics = recalculate_analytics(state.jobs)
        self.storage.set(key, json.dumps(state.to_dict()))
        log.info("Seeded demo state for user %r (%d jobs)", user_id, len(state.jobs))
        return state

    def _save(self, user_id: str | None, state: SimState) -> None:
        self.storage.set(self.storage_key(user_id), json.dumps(state.to_dict()))

    # ── reads ───────────────────────────────────────────────────────────

    def get_jobs(self, user_id: str | None) -> list[Job]:
        return self._load(user_id).jobs

    def get_job(self, user_id: str | None, job_id: str) -> Job | None:
        return self._load(user_id).find_job(job_id)

    def get_analytics(self, user_id: str | None) -> Analytics:
        return self._load(user_id).analytics

    def get_events(self, user_id: str | None) -> list[CalendarEvent]:
        """Events in the order they were generated (not sorted by date)."""
        return self._load(user_id).events

    # ── mutations ───────────────────────────────────────────────────────

    def apply_to_job(self, user_id: str | None, job_id: str) -> Job | None:
        state = self._load(user_id)
        job = state.find_job(job_id)
        if job is None:
            log.debug("apply_to_job: unknown job %r for user %r", job_id, user_id)
            return None
        if job.status in _APPLY_LOCKED:
            return job

        now = self.clock()
        job.status = "applied"
        job.applied_at = to_iso(now)

        stamp = int(now.timestamp() * 1000)
        state.events.append(
            CalendarEvent(
                id=f"evt-app-{stamp}-{len(state.events) + 1}",
                title=f"Application: {job.title}",
                date=to_iso(now),
                type="application",
                job_id=job.id,
                company=job.company,
            )
        )

        active = sum(1 for j in state.jobs if j.status not in _PASSIVE)
        if active == 1 or self.rng.random() < self.follow_up_probability:
            low, high = self.interview_offset_days
            interview_at = now + timedelta(days=self.rng.randint(low, high))
            state.events.append(
                CalendarEvent(
                    id=f"evt-int-{stamp}-{len(state.events) + 1}",
                    title=f"Mock Interview: {job.company}",
                    date=to_iso(interview_at),
                    type="interview",
                    job_id=job.id,
                    company=job.company,
                )
            )
            log.debug("Scheduled mock interview with %s on %s", job.company, interview_at.date())

        state.analytics = recalculate_analytics(state.jobs)
        self._save(user_id, state)
        log.info("User %r applied to %s @ %s", user_id, job.title, job.company)
        return job

    def simulate_progress(self, user_id: str | None, job_id: str, new_status: str) -> Job | None:
        """Force a job into any pipeline status (demo helper, no transition rules)."""
        if new_status not in JOB_STATUSES:
            raise ValueError(f"Unknown job status: {new_status!r}")
        state = self._load(user_id)
        job = state.find_job(job_id)
        if job is None:
            return None
        job.status = new_status
        state.analytics = recalculate_analytics(state.jobs)
        self._save(user_id, state)
        log.info("User %r moved %s → %s", user_id, job_id, new_status)
        return job
