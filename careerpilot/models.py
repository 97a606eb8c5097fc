"""Data models for simulated jobs, calendar events and analytics."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any

JOB_STATUSES: tuple[str, ...] = (
    "new", "saved", "applied", "interviewing", "offered", "rejected", "accepted",
)
EVENT_TYPES: tuple[str, ...] = ("application", "interview", "offer")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(dt: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a trailing Z."""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: str) -> datetime:
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


@dataclass
class Job:
    id: str
    title: str
    company: str
    location: str
    type: str
    fit_score: int
    status: str
    description: str
    created_at: str
    deadline: str
    salary_range: str
    requirements: list[str] = field(default_factory=list)
    applied_at: str | None = None
    feedback: str | None = None
    next_step: str | None = None

    def days_until_deadline(self, now: datetime) -> int:
        """Whole days left before the deadline; negative once it has passed."""
        return (parse_iso(self.deadline) - now).days

    def is_expired(self, now: datetime) -> bool:
        return parse_iso(self.deadline) < now

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Job:
        return cls(
            id=data["id"],
            title=data["title"],
            company=data["company"],
            location=data["location"],
            type=data["type"],
            fit_score=int(data["fit_score"]),
            status=data["status"],
            description=data.get("description", ""),
            created_at=data["created_at"],
            deadline=data["deadline"],
            salary_range=data.get("salary_range", ""),
            requirements=list(data.get("requirements", [])),
            applied_at=data.get("applied_at"),
            feedback=data.get("feedback"),
            next_step=data.get("next_step"),
        )


@dataclass
class CalendarEvent:
    id: str
    title: str
    date: str
    type: str
    job_id: str
    company: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date,
            "type": self.type,
            "jobId": self.job_id,
            "company": self.company,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CalendarEvent:
        return cls(
            id=data["id"],
            title=data["title"],
            date=data["date"],
            type=data["type"],
            job_id=data["jobId"],
            company=data["company"],
        )


@dataclass
class FunnelStage:
    name: str
    value: int


@dataclass
class StatusSlice:
    name: str
    value: int
    color: str


@dataclass
class Analytics:
    total_applications: int = 0
    interview_rate: int = 0
    offer_rate: int = 0
    response_rate: int = 0
    funnel_data: list[FunnelStage] = field(default_factory=list)
    status_distribution: list[StatusSlice] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalApplications": self.total_applications,
            "interviewRate": self.interview_rate,
            "offerRate": self.offer_rate,
            "responseRate": self.response_rate,
            "funnelData": [asdict(s) for s in self.funnel_data],
            "statusDistribution": [asdict(s) for s in self.status_distribution],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Analytics:
        return cls(
            total_applications=data.get("totalApplications", 0),
            interview_rate=data.get("interviewRate", 0),
            offer_rate=data.get("offerRate", 0),
            response_rate=data.get("responseRate", 0),
            funnel_data=[FunnelStage(**s) for s in data.get("funnelData", [])],
            status_distribution=[StatusSlice(**s) for s in data.get("statusDistribution", [])],
        )


@dataclass
class SimState:
    jobs: list[Job]
    events: list[CalendarEvent] = field(default_factory=list)
    analytics: Analytics = field(default_factory=Analytics)

    def find_job(self, job_id: str) -> Job | None:
        for job in self.jobs:
            if job.id == job_id:
                return job
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "jobs": [j.to_dict() for j in self.jobs],
            "events": [e.to_dict() for e in self.events],
            "analytics": self.analytics.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SimState:
        return cls(
            jobs=[Job.from_dict(j) for j in data.get("jobs", [])],
            events=[CalendarEvent.from_dict(e) for e in data.get("events", [])],
            analytics=Analytics.from_dict(data.get("analytics", {})),
        )
