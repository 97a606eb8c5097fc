#!/usr/bin/env python3
"""Command-line access to the demo simulator and the fallback-wrapped functions."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from careerpilot.config import load_settings
from careerpilot.fallbacks import FallbackInvoker, Operation
from careerpilot.log import configure_logging, get_logger
from careerpilot.models import JOB_STATUSES
from careerpilot.remote import get_client
from careerpilot.report import build_analytics_report, write_analytics_report
from careerpilot.simulator import DEFAULT_USER_ID, StateSimulator
from careerpilot.storage import get_storage

log = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="run_simulator", description=__doc__)
    p.add_argument("--user", default=DEFAULT_USER_ID, help="user id partition (default: %(default)s)")
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("jobs", help="list simulated opportunities")

    apply = sub.add_parser("apply", help="apply to a job")
    apply.add_argument("job_id")

    progress = sub.add_parser("progress", help="force a job into a pipeline status")
    progress.add_argument("job_id")
    progress.add_argument("status", choices=JOB_STATUSES)

    sub.add_parser("analytics", help="print aggregate analytics as JSON")
    sub.add_parser("events", help="list generated calendar events")

    report = sub.add_parser("report", help="render the markdown analytics report")
    report.add_argument("--write", action="store_true", help="also save it under reports/")

    search = sub.add_parser("search", help="job search (falls back to simulated jobs)")
    search.add_argument("--query", default="")
    search.add_argument("--location", default="")

    interview = sub.add_parser("interview", help="send one interview message")
    interview.add_argument("message", nargs="+")
    interview.add_argument("--role", default="Frontend Developer")

    resume = sub.add_parser("parse-resume", help="parse a resume by URL")
    resume.add_argument("file_url")
    return p


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings)
    simulator = StateSimulator.from_settings(settings, get_storage(settings))
    user = args.user

    if args.command == "jobs":
        for j in simulator.get_jobs(user):
            print(f"{j.id:<8} {j.status:<13} {j.fit_score:>3}%  {j.title} @ {j.company}")
        return 0

    if args.command == "apply":
        job = simulator.apply_to_job(user, args.job_id)
        if job is None:
            log.error("No job %r for user %r", args.job_id, user)
            return 1
        print(f"{job.id}: {job.status} (applied_at {job.applied_at})")
        return 0

    if args.command == "progress":
        job = simulator.simulate_progress(user, args.job_id, args.status)
        if job is None:
            log.error("No job %r for user %r", args.job_id, user)
            return 1
        print(f"{job.id}: {job.status}")
        return 0

    if args.command == "analytics":
        _print_json(simulator.get_analytics(user).to_dict())
        return 0

    if args.command == "events":
        for e in simulator.get_events(user):
            print(f"{e.date}  {e.type:<12} {e.title}")
        return 0

    if args.command == "report":
        text = build_analytics_report(simulator, user)
        print(text)
        if args.write:
            write_analytics_report(text, user)
        return 0

    invoker = FallbackInvoker(get_client(settings), simulator)
    if args.command == "search":
        body = {"query": args.query, "location": args.location, "userId": user}
        result = invoker.invoke(Operation.FETCH_JOBS, body)
    elif args.command == "interview":
        body = {"messages": [{"role": "user", "content": " ".join(args.message)}], "role": args.role}
        result = invoker.invoke(Operation.AI_INTERVIEW, body)
    else:
        result = invoker.invoke(Operation.PARSE_RESUME, {"fileUrl": args.file_url, "userId": user})

    if result.error is not None:
        log.error("%s failed: %s", args.command, result.error)
        return 1
    if result.is_mock:
        log.info("Showing simulated data (remote service unavailable)")
    _print_json(result.data)
    return 0


if __name__ == "__main__":
    sys.exit(main())
