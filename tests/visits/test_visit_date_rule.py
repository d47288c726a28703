"""Unit tests: the Sunday scheduling rule."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from petclinic.owners.models import Owner
from petclinic.validation.report import FieldError, ValidationReport
from petclinic.visits.models import Visit
from petclinic.visits.validators import VisitDateRule

SUNDAY = date(2024, 1, 7)


class FollowUpVisit(Visit):
    """A Visit subtype; the rule must accept it like a plain Visit."""


def _visit(on: date | None) -> Visit:
    return Visit(date=on, description="checkup")


def test_sunday_visit_is_rejected_on_date_field() -> None:
    report = ValidationReport()

    VisitDateRule().validate(_visit(SUNDAY), report)

    assert report.errors == (
        FieldError(
            field="date",
            code="sunday.not.allowed",
            message="Visits on Sundays are not allowed",
        ),
    )


@pytest.mark.parametrize("days_after_sunday", range(1, 7))
def test_monday_through_saturday_are_accepted(days_after_sunday: int) -> None:
    report = ValidationReport()

    VisitDateRule().validate(_visit(SUNDAY + timedelta(days=days_after_sunday)), report)

    assert not report.has_errors


@pytest.mark.parametrize(
    "on",
    [date(2024, 1, 6), date(2024, 1, 8)],
    ids=["saturday-before", "monday-after"],
)
def test_days_next_to_sunday_are_accepted(on: date) -> None:
    report = ValidationReport()
    VisitDateRule().validate(_visit(on), report)
    assert report.error_count == 0


def test_every_sunday_of_a_year_is_rejected() -> None:
    rule = VisitDateRule()
    for week in range(52):
        report = ValidationReport()
        rule.validate(_visit(SUNDAY + timedelta(weeks=week)), report)
        assert [e.code for e in report.errors] == ["sunday.not.allowed"]


def test_validate_is_idempotent_across_fresh_reports() -> None:
    rule = VisitDateRule()
    visit = _visit(SUNDAY)
    first, second = ValidationReport(), ValidationReport()

    rule.validate(visit, first)
    rule.validate(visit, second)

    assert first.errors == second.errors
    assert first.error_count == 1


def test_validate_appends_to_existing_report_entries() -> None:
    report = ValidationReport()
    report.reject_value("description", "required", "Description is required")

    VisitDateRule().validate(_visit(SUNDAY), report)

    assert report.fields == ["description", "date"]


def test_validate_does_not_mutate_the_visit() -> None:
    visit = _visit(SUNDAY)

    VisitDateRule().validate(visit, ValidationReport())

    assert visit.date == SUNDAY
    assert visit.description == "checkup"


def test_missing_date_is_left_to_the_request_schema() -> None:
    report = ValidationReport()

    VisitDateRule().validate(_visit(None), report)

    assert not report.has_errors


def test_applies_to_visit_and_subtypes() -> None:
    rule = VisitDateRule()
    assert rule.applies(Visit) is True
    assert rule.applies(FollowUpVisit) is True


@pytest.mark.parametrize("kind", [Owner, object, date, str])
def test_does_not_apply_to_unrelated_kinds(kind: type) -> None:
    assert VisitDateRule().applies(kind) is False


def test_does_not_apply_to_non_class_values() -> None:
    # An instance is not a kind.
    assert VisitDateRule().applies(_visit(SUNDAY)) is False
