"""People, accounts, and employment.

- ``SafePerson`` and ``SafeBankAccount`` replace records of bare strings and
  floats with smart-constructed fields, validated together at one point.
- ``Employment`` extracts the missing enumeration hidden in a person's
  optional job / employment date / school fields.
- ``PERSON`` is a type-state blueprint: a ``Person`` can only be built once
  both age and name are supplied.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import StrEnum
from typing import Any

from fdm.domain.constructors import (
    ACCOUNT_NAME,
    AGE,
    BALANCE,
    BANK_ACCOUNT_ID,
    SALARY,
)
from fdm.domain.result import (
    AmbiguousOrMissingVariant,
    Err,
    Ok,
    Result,
    ValidationFailure,
)
from fdm.domain.typestate import Blueprint, Builder
from fdm.domain.validated import Validated
from fdm.domain.variants import VariantBuilder, case

# ---------------------------------------------------------------------------
# Smart-constructed aggregates
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SafePerson:
    age: Validated[int]
    name: Validated[str]
    salary: Validated[Decimal]


def build_person(age: Any, name: Any, salary: Any) -> Result[SafePerson, ValidationFailure]:
    """Validate each field in order (age, name, salary); stop at the first failure."""
    valid_age = AGE(age)
    if isinstance(valid_age, Err):
        return valid_age
    valid_name = ACCOUNT_NAME(name)
    if isinstance(valid_name, Err):
        return valid_name
    valid_salary = SALARY(salary)
    if isinstance(valid_salary, Err):
        return valid_salary
    return Ok(SafePerson(age=valid_age.value, name=valid_name.value, salary=valid_salary.value))


@dataclass(frozen=True)
class SafeBankAccount:
    account_id: Validated[str]
    name: Validated[str]
    balance: Validated[Decimal]
    opened: datetime


def open_bank_account(
    account_id: Any,
    name: Any,
    balance: Any,
    opened: datetime,
) -> Result[SafeBankAccount, ValidationFailure]:
    valid_id = BANK_ACCOUNT_ID(account_id)
    if isinstance(valid_id, Err):
        return valid_id
    valid_name = ACCOUNT_NAME(name)
    if isinstance(valid_name, Err):
        return valid_name
    valid_balance = BALANCE(balance)
    if isinstance(valid_balance, Err):
        return valid_balance
    return Ok(
        SafeBankAccount(
            account_id=valid_id.value,
            name=valid_name.value,
            balance=valid_balance.value,
            opened=opened,
        )
    )


# ---------------------------------------------------------------------------
# Age brackets
# ---------------------------------------------------------------------------


class AgeBracket(StrEnum):
    BABY = "baby"
    CHILD = "child"
    TEENAGER = "teenager"
    YOUNG_ADULT = "young_adult"
    ADULT = "adult"
    MATURE_ADULT = "mature_adult"
    SENIOR_ADULT = "senior_adult"


# Upper bound (exclusive) for each bracket, in ascending order.
_BRACKET_LIMITS: list[tuple[int, AgeBracket]] = [
    (2, AgeBracket.BABY),
    (13, AgeBracket.CHILD),
    (20, AgeBracket.TEENAGER),
    (30, AgeBracket.YOUNG_ADULT),
    (50, AgeBracket.ADULT),
    (65, AgeBracket.MATURE_ADULT),
]


def age_bracket(age: Validated[int]) -> AgeBracket:
    """Bracket a validated age. Total: every valid age has a bracket."""
    for limit, bracket in _BRACKET_LIMITS:
        if age.value < limit:
            return bracket
    return AgeBracket.SENIOR_ADULT


# ---------------------------------------------------------------------------
# Employment (extract sum)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Job:
    title: str
    salary: Decimal


@dataclass(frozen=True)
class Enrollment:
    university: str
    credits: int
    year: date


@dataclass(frozen=True)
class Employed:
    job: Job
    since: datetime


@dataclass(frozen=True)
class Student:
    enrollment: Enrollment


Employment = Employed | Student

EMPLOYMENT: VariantBuilder[Employment] = VariantBuilder(
    "employment",
    [
        case(
            "employed",
            lambda job, employment_date: Employed(job=job, since=employment_date),
            "job",
            "employment_date",
        ),
        case("student", lambda school: Student(enrollment=school), "school"),
    ],
)


@dataclass(frozen=True)
class EmployedPerson:
    name: str
    employment: Employment


def classify_employment(
    name: str,
    raw_fields: Mapping[str, Any],
) -> Result[EmployedPerson, AmbiguousOrMissingVariant]:
    """Classify ``job``/``employment_date``/``school`` into one employment."""
    match EMPLOYMENT.classify(raw_fields):
        case Ok(employment):
            return Ok(EmployedPerson(name=name, employment=employment))
        case Err() as failed:
            return failed


# ---------------------------------------------------------------------------
# Person builder (type-state)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Person:
    name: str
    age: int


PERSON: Blueprint[Person] = Blueprint(Person, marks={"age": "AgeSet", "name": "NameSet"})


def person_builder() -> Builder[Person]:
    """An empty Person builder: ``person_builder().with_field("age", 42)...``."""
    return PERSON.empty()
