"""
Declarative field rules.

A rule is a single predicate over one field plus the message reported when
it fails. Rules for the same field are chained in order, but every rule is
evaluated on its own: a failing rule never stops the ones after it, so one
bad field can contribute several errors.

Values are coerced to text before the string checks run, the same way
form validators treat their input: missing and null become "", booleans
become "true"/"false" and numbers their decimal representation.
"""
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")
NUMERIC_RE = re.compile(r"^[+-]?([0-9]*[.])?[0-9]+$")
BOOLEAN_VALUES = ("true", "false", "1", "0")

PATH = "path"
BODY = "body"

Check = Callable[[Any], bool]


def to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_number(value: Any) -> Optional[float]:
    """Loose numeric conversion; None when the value has no numeric reading."""
    if isinstance(value, str):
        value = value.strip() or 0
    elif not isinstance(value, (bool, int, float)):
        return None
    try:
        return float(value)
    except (ValueError, OverflowError):
        return None


def to_int(value: Any) -> Optional[int]:
    """Integer reading of a value that passed `is_int`; None when too long to convert."""
    try:
        return int(to_text(value))
    except ValueError:
        return None


def is_int(value: Any) -> bool:
    return INTEGER_RE.match(to_text(value)) is not None


def is_numeric(value: Any) -> bool:
    return NUMERIC_RE.match(to_text(value)) is not None


def not_empty(value: Any) -> bool:
    return to_text(value) != ""


def not_blank(value: Any) -> bool:
    return to_text(value).strip() != ""


def max_length(limit: int) -> Check:
    def check(value: Any) -> bool:
        return len(to_text(value)) <= limit
    return check


def is_boolean(value: Any) -> bool:
    return to_text(value) in BOOLEAN_VALUES


def is_positive(value: Any) -> bool:
    number = to_number(value)
    return number is not None and math.isfinite(number) and number > 0


def to_bool(value: Any) -> bool:
    return to_text(value) in ("true", "1")


@dataclass(frozen=True)
class FieldError:
    field: str
    msg: str
    location: str

    def as_dict(self) -> dict:
        return {"field": self.field, "msg": self.msg, "location": self.location}


@dataclass(frozen=True)
class Rule:
    field: str
    location: str
    check: Check
    message: str

    def evaluate(self, sources: dict[str, dict]) -> Optional[FieldError]:
        value = sources.get(self.location, {}).get(self.field)
        if self.check(value):
            return None
        return FieldError(field=self.field, msg=self.message, location=self.location)


def chain(field: str, location: str, *checks: tuple[Check, str]) -> list[Rule]:
    """Build the ordered rules for one field from (check, message) pairs."""
    return [Rule(field, location, check, message) for check, message in checks]


def run_rules(rules: list[Rule], path: Optional[dict] = None, body: Optional[dict] = None) -> list[FieldError]:
    """Evaluate every rule and return the failures in rule order."""
    sources = {PATH: path or {}, BODY: body or {}}
    errors = []
    for rule in rules:
        error = rule.evaluate(sources)
        if error is not None:
            errors.append(error)
    return errors
