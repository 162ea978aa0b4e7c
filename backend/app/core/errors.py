"""
API error types.

ApiError carries the HTTP status and the exact JSON body the client receives,
e.g. {"msg": "Profile not found"} or {"errors": [...]}.
"""
from typing import Any


class ApiError(Exception):
    """Expected failure with a client-facing JSON payload."""

    def __init__(self, status_code: int, payload: dict[str, Any], headers: dict[str, str] | None = None):
        super().__init__(payload)
        self.status_code = status_code
        self.payload = payload
        self.headers = headers

    @classmethod
    def message(cls, status_code: int, msg: str, headers: dict[str, str] | None = None) -> "ApiError":
        return cls(status_code, {"msg": msg}, headers=headers)

    @classmethod
    def field_errors(cls, errors: list[dict[str, Any]]) -> "ApiError":
        return cls(400, {"errors": errors})


class EntryNotFound(LookupError):
    """An embedded list entry with the requested id does not exist."""

    def __init__(self, collection: str, entry_id: str):
        super().__init__(f"{collection} entry {entry_id} not found")
        self.collection = collection
        self.entry_id = entry_id
