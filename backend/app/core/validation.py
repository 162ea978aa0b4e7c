"""
Declarative request-field checks.

Each rule inspects one body field and yields an error entry shaped like
{"msg": ..., "param": ..., "location": "body", "value": ...}. Rules for
different fields are evaluated independently so every failing field is
reported; only the first failing rule per field is kept.
"""
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional

from email_validator import EmailNotValidError, validate_email

from backend.app.core.errors import ApiError

# Largest value a signed 64-bit INTEGER column can hold
MAX_RECORD_ID = 2**63 - 1


def is_empty(value: Any) -> bool:
    """Missing, None and zero-length strings/collections count as empty. Whitespace does not."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


@dataclass(frozen=True)
class Rule:
    param: str
    msg: str
    test: Callable[[Any], bool]


def required(param: str, msg: str) -> Rule:
    return Rule(param, msg, lambda v: not is_empty(v))


def _is_valid_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def email(param: str, msg: str) -> Rule:
    return Rule(param, msg, _is_valid_email)


def parse_record_id(raw: Any) -> Optional[int]:
    """Positive integer primary key from a path or token value, or None if malformed."""
    try:
        value = int(str(raw))
    except ValueError:
        return None
    if value <= 0 or value > MAX_RECORD_ID:
        return None
    return value


def min_length(param: str, msg: str, length: int) -> Rule:
    return Rule(param, msg, lambda v: isinstance(v, str) and len(v) >= length)


def field_error(param: str | None, msg: str, value: Any = None, location: str = "body") -> dict:
    error = {"msg": msg}
    if param is not None:
        error.update({"param": param, "location": location, "value": value if value is not None else ""})
    return error


def collect_errors(data: Mapping[str, Any], rules: Iterable[Rule]) -> list[dict]:
    """Run rules against data and return the field errors, in rule order."""
    errors: list[dict] = []
    failed: set[str] = set()
    for rule in rules:
        if rule.param in failed:
            continue
        value = data.get(rule.param)
        if not rule.test(value):
            failed.add(rule.param)
            errors.append(field_error(rule.param, rule.msg, value))
    return errors


def validate(data: Mapping[str, Any], rules: Iterable[Rule]) -> None:
    """Raise a 400 ApiError listing every failing field."""
    errors = collect_errors(data, rules)
    if errors:
        raise ApiError.field_errors(errors)
