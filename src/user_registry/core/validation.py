"""Field validation and the minimum-age rule for users.

Validation is driven by a rule table: every rule names the attribute it
checks, the profiles it belongs to and the message reported when it fails.
``FULL`` applies presence, blank, format and past-date rules (create and
full replace). ``PARTIAL`` applies only format and past-date rules to the
fields that are set (partial update); blank strings pass it, but an empty
email still fails the format rule.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from src.user_registry.entities.user import UserFields

EMAIL_PATTERN = re.compile(r".+@.+\..+")


class ValidationProfile(str, Enum):
    FULL = "full"
    PARTIAL = "partial"


@dataclass(frozen=True)
class FieldRule:
    """A single constraint on one user attribute."""

    attribute: str
    profiles: frozenset[ValidationProfile]
    message: str
    check: Callable[[Any, date], bool]
    # Rules that skip missing values leave presence to a dedicated rule
    skip_none: bool = True

    def applies_to(self, profile: ValidationProfile) -> bool:
        return profile in self.profiles

    def is_satisfied(self, value: Any, today: date) -> bool:
        if value is None and self.skip_none:
            return True
        return self.check(value, today)


_FULL = frozenset({ValidationProfile.FULL})
_ALL = frozenset({ValidationProfile.FULL, ValidationProfile.PARTIAL})


def _present(value: Any, _today: date) -> bool:
    return value is not None


def _not_blank(value: str | None, _today: date) -> bool:
    return value is not None and value.strip() != ""


def _email_format(value: str, _today: date) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def _in_past(value: date, today: date) -> bool:
    return value < today


def _field_rules(attribute: str, label: str, *, required: bool) -> list[FieldRule]:
    rules = []
    if required:
        rules.append(
            FieldRule(attribute, _FULL, f"{label} may not be null", _present, skip_none=False)
        )
    # A missing value is blank too, so null required fields report both messages
    rules.append(
        FieldRule(
            attribute,
            _FULL,
            f"{label} may have at least 1 symbol",
            _not_blank,
            skip_none=False,
        )
    )
    return rules


RULES: tuple[FieldRule, ...] = (
    *_field_rules("email", "Email", required=True),
    FieldRule("email", _ALL, "Email is not valid", _email_format),
    *_field_rules("first_name", "FirstName", required=True),
    *_field_rules("last_name", "LastName", required=True),
    FieldRule("birth_date", _FULL, "BirthDate may not be null", _present, skip_none=False),
    FieldRule("birth_date", _ALL, "BirthDate may not be in future", _in_past),
    *_field_rules("address", "Address", required=False),
    *_field_rules("phone_number", "PhoneNumber", required=False),
)


def validate(
    candidate: UserFields, profile: ValidationProfile, today: date
) -> list[str]:
    """Check ``candidate`` against every rule of ``profile``.

    Returns the message of every failing rule in rule-table order; an empty
    list means the candidate is valid.
    """
    return [
        rule.message
        for rule in RULES
        if rule.applies_to(profile)
        and not rule.is_satisfied(getattr(candidate, rule.attribute), today)
    ]


def add_years(value: date, years: int) -> date:
    """Shift ``value`` by whole years, mapping 29 February to 28 February."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


def check_adult(birth_date: date, min_age: int, today: date) -> bool:
    """Return whether someone born on ``birth_date`` is at least ``min_age`` today."""
    return add_years(birth_date, min_age) <= today
