"""Markdown analytics report for a user's simulated pipeline."""
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from careerpilot.config import REPORTS_DIR
from careerpilot.log import get_logger
from careerpilot.models import CalendarEvent, Job, parse_iso, utcnow
from careerpilot.simulator import StateSimulator

log = get_logger(__name__)

_EVENT_BADGES: dict[str, str] = {
    "application": "\U0001f4e8",
    "interview": "\U0001f3a4",
    "offer": "\U0001f389",
}


def _deadline_label(job: Job, now: datetime) -> str:
    if job.is_expired(now):
        return "expired"
    days = job.days_until_deadline(now)
    if days == 0:
        return "today"
    return f"{days} day{'s' if days != 1 else ''} left"


def _upcoming(events: list[CalendarEvent], now: datetime) -> list[CalendarEvent]:
    return sorted((e for e in events if parse_iso(e.date) >= now), key=lambda e: parse_iso(e.date))


def build_analytics_report(
    simulator: StateSimulator,
    user_id: str | None,
    now: datetime | None = None,
) -> str:
    now = now or utcnow()
    analytics = simulator.get_analytics(user_id)
    jobs = simulator.get_jobs(user_id)
    events = simulator.get_events(user_id)

    lines: list[str] = [f"# Application Analytics — {now.strftime('%Y-%m-%d')}", ""]
    lines.append(
        f"**{analytics.total_applications}** applications | "
        f"**{analytics.interview_rate}%** interview rate | "
        f"**{analytics.offer_rate}%** offer rate | "
        f"**{analytics.response_rate}%** response rate"
    )
    lines.append("")

    lines.append("## Funnel")
    lines.append("")
    lines.append("| Stage | Count |")
    lines.append("|-------|------:|")
    for stage in analytics.funnel_data:
        lines.append(f"| {stage.name} | {stage.value} |")
    lines.append("")

    lines.append("## Current Stage")
    lines.append("")
    lines.append("| Stage | Jobs |")
    lines.append("|-------|-----:|")
    for bucket in analytics.status_distribution:
        lines.append(f"| {bucket.name} | {bucket.value} |")
    lines.append("")

    upcoming = _upcoming(events, now)
    if upcoming:
        lines.append("## Upcoming")
        lines.append("")
        for e in upcoming:
            badge = _EVENT_BADGES.get(e.type, "•")
            lines.append(f"- {badge} **{e.title}** — {parse_iso(e.date).strftime('%a %d %b')}")
        lines.append("")

    open_jobs = [j for j in jobs if j.status in ("new", "saved")]
    if open_jobs:
        lines.append("## Open Opportunities")
        lines.append("")
        lines.append("| Role | Company | Fit | Status | Deadline |")
        lines.append("|------|---------|----:|--------|----------|")
        for j in sorted(open_jobs, key=lambda j: j.fit_score, reverse=True):
            lines.append(
                f"| {j.title} | {j.company} | {j.fit_score}% | {j.status} | {_deadline_label(j, now)} |"
            )
        lines.append("")

    log.info("Built analytics report: %d applications, %d events", analytics.total_applications, len(events))
    return "\n".join(lines)


def write_analytics_report(content: str, user_id: str | None) -> Path:
    REPORTS_DIR.mkdir(parents=True, exist_ok=True)
    date = utcnow().strftime("%Y-%m-%d")
    safe = "".join(c if c.isalnum() or c in "-_" else "_" for c in (user_id or "default"))[:40]
    path = REPORTS_DIR / f"analytics_{safe}_{date}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
