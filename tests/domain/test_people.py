"""Tests for people, accounts, and employment."""

from datetime import UTC, date, datetime
from decimal import Decimal

import pytest

from fdm.domain.constructors import AGE
from fdm.domain.people import (
    AgeBracket,
    Employed,
    EmployedPerson,
    Enrollment,
    Job,
    Person,
    Student,
    age_bracket,
    build_person,
    classify_employment,
    open_bank_account,
    person_builder,
)
from fdm.domain.result import AmbiguousOrMissingVariant, Err, IncompleteBuilder, Ok, RuleViolated

OPENED = datetime(2023, 1, 2, tzinfo=UTC)


class TestSafePerson:
    def test_valid(self) -> None:
        result = build_person("42", "Ada", "5000")
        assert isinstance(result, Ok)
        assert result.value.age.value == 42
        assert result.value.name.value == "Ada"
        assert result.value.salary.value == Decimal("5000")

    def test_first_failure_wins(self) -> None:
        assert build_person(200, "   ", 0) == Err(RuleViolated(rule="<=120", tag="Age"))
        assert build_person(20, "   ", 0) == Err(RuleViolated(rule="not-blank", tag="AccountName"))
        assert build_person(20, "Ada", 0) == Err(RuleViolated(rule=">0", tag="Salary"))


class TestBankAccount:
    def test_valid(self) -> None:
        result = open_bank_account("0123456789", "Ada", "12.30", OPENED)
        assert isinstance(result, Ok)
        assert result.value.balance.value == Decimal("12.30")
        assert result.value.opened == OPENED

    def test_short_id(self) -> None:
        result = open_bank_account("123", "Ada", "0", OPENED)
        assert result == Err(RuleViolated(rule="len==10", tag="BankAccountId"))

    def test_negative_balance(self) -> None:
        result = open_bank_account("0123456789", "Ada", "-1", OPENED)
        assert result == Err(RuleViolated(rule=">=0", tag="Balance"))


class TestAgeBracket:
    @pytest.mark.parametrize(
        ("age", "bracket"),
        [
            (0, AgeBracket.BABY),
            (1, AgeBracket.BABY),
            (2, AgeBracket.CHILD),
            (12, AgeBracket.CHILD),
            (13, AgeBracket.TEENAGER),
            (19, AgeBracket.TEENAGER),
            (20, AgeBracket.YOUNG_ADULT),
            (29, AgeBracket.YOUNG_ADULT),
            (30, AgeBracket.ADULT),
            (49, AgeBracket.ADULT),
            (50, AgeBracket.MATURE_ADULT),
            (64, AgeBracket.MATURE_ADULT),
            (65, AgeBracket.SENIOR_ADULT),
            (120, AgeBracket.SENIOR_ADULT),
        ],
    )
    def test_boundaries(self, age: int, bracket: AgeBracket) -> None:
        validated = AGE(age)
        assert isinstance(validated, Ok)
        assert age_bracket(validated.value) is bracket


class TestEmployment:
    def test_employed(self) -> None:
        job = Job("Engineer", Decimal("100"))
        result = classify_employment("Ada", {"job": job, "employment_date": OPENED})
        assert result == Ok(EmployedPerson("Ada", Employed(job, OPENED)))

    def test_student(self) -> None:
        enrollment = Enrollment("MIT", 30, date(2024, 9, 1))
        result = classify_employment("Bo", {"school": enrollment, "job": None})
        assert result == Ok(EmployedPerson("Bo", Student(enrollment)))

    def test_job_without_date_is_missing(self) -> None:
        result = classify_employment("Cy", {"job": Job("Chef", Decimal("1"))})
        assert result == Err(AmbiguousOrMissingVariant("employment", ("job",)))

    def test_job_and_school_is_ambiguous(self) -> None:
        fields = {
            "job": Job("Chef", Decimal("1")),
            "employment_date": OPENED,
            "school": Enrollment("MIT", 1, date(2024, 1, 1)),
        }
        assert isinstance(classify_employment("Di", fields), Err)


class TestPersonBuilder:
    def test_age_then_name(self) -> None:
        result = person_builder().with_field("age", 42).with_field("name", "Ada").build()
        assert result == Ok(Person(name="Ada", age=42))

    def test_order_does_not_matter(self) -> None:
        result = person_builder().with_field("name", "Ada").with_field("age", 42).build()
        assert result == Ok(Person(name="Ada", age=42))

    def test_missing_name(self) -> None:
        result = person_builder().with_field("age", 42).build()
        assert result == Err(IncompleteBuilder("Person", frozenset({"NameSet"})))

    def test_empty_build(self) -> None:
        result = person_builder().build()
        assert result == Err(IncompleteBuilder("Person", frozenset({"AgeSet", "NameSet"})))
