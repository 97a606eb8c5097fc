"""
Remote calls with transparent demo fallbacks.

``invoke_with_fallback`` calls a hosted function and, when it fails (or the
job search comes back empty), answers from the state simulator or canned data
instead. Both paths return an ``InvokeResult`` so callers branch on
``result.error`` alone; fallback payloads carry ``isMock: True``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from careerpilot.interview import canned_reply
from careerpilot.log import get_logger
from careerpilot.remote import RemoteError, RemoteFunctions
from careerpilot.simulator import DEFAULT_USER_ID, StateSimulator

log = get_logger(__name__)


class Operation(str, Enum):
    FETCH_JOBS = "fetch-jobs"
    AI_INTERVIEW = "ai-interview"
    PARSE_RESUME = "parse-resume"

    @classmethod
    def lookup(cls, name: Operation | str) -> Operation | None:
        try:
            return cls(name)
        except ValueError:
            return None


# ── Typed requests ───────────────────────────────────────────────────────


@dataclass
class FetchJobsRequest:
    user_id: str | None = None
    query: str = ""
    location: str = ""

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> FetchJobsRequest:
        return cls(
            user_id=body.get("userId"),
            query=body.get("query") or "",
            location=body.get("location") or "",
        )


@dataclass
class InterviewTurnRequest:
    messages: list[dict[str, Any]] = field(default_factory=list)
    role: str = ""
    user_id: str | None = None

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> InterviewTurnRequest:
        return cls(
            messages=list(body.get("messages") or []),
            role=body.get("role") or "",
            user_id=body.get("userId"),
        )


@dataclass
class ParseResumeRequest:
    file_url: str = ""
    user_id: str | None = None

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> ParseResumeRequest:
        return cls(file_url=body.get("fileUrl") or "", user_id=body.get("userId"))


# ── Fallback generators ──────────────────────────────────────────────────

CANNED_RESUME: dict[str, Any] = {
    "skills": ["React", "TypeScript", "Node.js", "Tailwind CSS", "UI/UX Design"],
    "experience_years": 2,
    "target_roles": ["Frontend Developer", "Full Stack Developer"],
}


def _fallback_jobs(simulator: StateSimulator, request: FetchJobsRequest) -> dict[str, Any]:
    jobs = simulator.get_jobs(request.user_id or DEFAULT_USER_ID)
    return {"success": True, "jobs": [j.to_dict() for j in jobs], "isMock": True}


def _fallback_interview(simulator: StateSimulator, request: InterviewTurnRequest) -> dict[str, Any]:
    return {"response": canned_reply(request.messages, request.role), "isMock": True}


def _fallback_resume(simulator: StateSimulator, request: ParseResumeRequest) -> dict[str, Any]:
    return {
        "success": True,
        "skills_added": len(CANNED_RESUME["skills"]),
        "isMock": True,
        "content": {
            "skills": list(CANNED_RESUME["skills"]),
            "experience_years": CANNED_RESUME["experience_years"],
            "target_roles": list(CANNED_RESUME["target_roles"]),
        },
    }


def _no_jobs(data: Any) -> bool:
    return not data.get("jobs") if isinstance(data, dict) else True


def _never_empty(data: Any) -> bool:
    return False


@dataclass(frozen=True)
class OperationHandler:
    parse_request: Callable[[dict[str, Any]], Any]
    fallback: Callable[[StateSimulator, Any], dict[str, Any]]
    is_empty: Callable[[Any], bool] = _never_empty


OPERATIONS: dict[Operation, OperationHandler] = {
    Operation.FETCH_JOBS: OperationHandler(FetchJobsRequest.from_body, _fallback_jobs, _no_jobs),
    Operation.AI_INTERVIEW: OperationHandler(InterviewTurnRequest.from_body, _fallback_interview),
    Operation.PARSE_RESUME: OperationHandler(ParseResumeRequest.from_body, _fallback_resume),
}


# ── Invocation ───────────────────────────────────────────────────────────


@dataclass
class InvokeResult:
    data: Any = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_mock(self) -> bool:
        return isinstance(self.data, dict) and bool(self.data.get("isMock"))


class FallbackInvoker:
    def __init__(self, client: RemoteFunctions, simulator: StateSimulator) -> None:
        self.client = client
        self.simulator = simulator

    def invoke(self, operation: Operation | str, body: dict[str, Any] | None = None) -> InvokeResult:
        body = body or {}
        op = Operation.lookup(operation)
        name = op.value if op else str(operation)
        handler = OPERATIONS.get(op) if op else None

        try:
            data = self.client.invoke(name, body)
            if not data:
                raise RemoteError(name, "API failed")
            if handler is not None and handler.is_empty(data):
                raise RemoteError(name, "Empty job results")
            return InvokeResult(data=data)
        except Exception as exc:
            log.warning("Fallback triggered for %s: %s", name, exc)
            error: BaseException = exc

        if handler is None:
            return InvokeResult(error=error)

        try:
            return InvokeResult(data=handler.fallback(self.simulator, handler.parse_request(body)))
        except Exception as exc:
            log.error("Fallback for %s failed: %s", name, exc)
            return InvokeResult(error=exc)


def invoke_with_fallback(
    operation: Operation | str,
    body: dict[str, Any] | None = None,
    *,
    client: RemoteFunctions,
    simulator: StateSimulator,
) -> InvokeResult:
    return FallbackInvoker(client, simulator).invoke(operation, body)
