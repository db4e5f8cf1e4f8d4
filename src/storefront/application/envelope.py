"""Response envelope shared by every use case exposed to clients.

Clients receive ``{success, message, data}``; ``status_code`` is the HTTP
status the same outcome maps to and is kept out of the JSON body.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any

from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)


@dataclass(frozen=True)
class Envelope:
    success: bool
    message: str
    data: Any = None
    status_code: int = 200

    @staticmethod
    def ok(message: str, data: Any = None, created: bool = False) -> Envelope:
        return Envelope(True, message, _plain(data), 201 if created else 200)

    @staticmethod
    def from_error(exc: DomainException) -> Envelope:
        if isinstance(exc, EntityNotFoundError):
            status = 404
        elif isinstance(exc, ValidationError):
            status = 400
        else:
            status = 500
        return Envelope(False, str(exc), None, status)

    def body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.data is not None:
            body["data"] = self.data
        return body

    def to_json(self) -> str:
        return json.dumps(self.body(), indent=2, ensure_ascii=False)


def _plain(data: Any) -> Any:
    if is_dataclass(data) and not isinstance(data, type):
        return asdict(data)
    if isinstance(data, list):
        return [_plain(item) for item in data]
    return data
