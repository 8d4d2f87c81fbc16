"""
Envelope — the normalized result of a remote call.

Every call through RequestClient returns exactly one of:

    Success(data)                  data is the body's "data" field, or the body
    Failure(message, status_code)  message is never empty; status_code is None
                                   when no response was received

Callers branch on `ok` (or isinstance) instead of inspecting raw JSON.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Success:
    data: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    message: str
    status_code: Optional[int] = None

    def __post_init__(self):
        if not self.message:
            raise ValueError("Failure message must be a non-empty string")

    @property
    def ok(self) -> bool:
        return False


Envelope = Union[Success, Failure]
