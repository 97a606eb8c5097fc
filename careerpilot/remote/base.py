from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RemoteError(Exception):
    """A remote function call failed (transport, HTTP status or payload)."""

    def __init__(self, operation: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.status_code = status_code


class RemoteFunctions(ABC):
    @abstractmethod
    def invoke(self, name: str, body: dict[str, Any]) -> Any:
        """Call the named function and return its decoded JSON body."""
        pass
