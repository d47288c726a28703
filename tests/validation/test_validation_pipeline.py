"""Unit tests: routing objects through the validation pipeline."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

import pytest

from petclinic.domain.exceptions import FieldValidationError
from petclinic.owners.models import Owner
from petclinic.validation import ValidationPipeline, ValidationReport, Validator
from petclinic.visits.models import Visit
from petclinic.visits.validators import VisitDateRule, get_visit_validation_pipeline


class _RecordingOwnerRule:
    """Owner-only rule that records what it was asked to validate."""

    def __init__(self) -> None:
        self.seen: list[Any] = []

    def applies(self, kind: Any) -> bool:
        return isinstance(kind, type) and issubclass(kind, Owner)

    def validate(self, target: Any, report: ValidationReport) -> None:
        self.seen.append(target)


def test_rules_satisfy_the_validator_protocol() -> None:
    assert isinstance(VisitDateRule(), Validator)
    assert isinstance(_RecordingOwnerRule(), Validator)


def test_validators_for_keeps_registration_order_and_filters_by_kind() -> None:
    date_rule = VisitDateRule()
    owner_rule = _RecordingOwnerRule()
    pipeline = ValidationPipeline([owner_rule, date_rule])

    assert pipeline.validators_for(Visit) == [date_rule]
    assert pipeline.validators_for(Owner) == [owner_rule]
    assert pipeline.validators_for(str) == []


def test_rule_is_never_invoked_for_an_incompatible_object() -> None:
    owner_rule = _RecordingOwnerRule()
    pipeline = ValidationPipeline([owner_rule, VisitDateRule()])

    report = pipeline.validate(Visit(date=date(2024, 1, 7), description="checkup"))

    assert owner_rule.seen == []
    assert [e.code for e in report.errors] == ["sunday.not.allowed"]


def test_owner_is_not_routed_to_the_visit_date_rule() -> None:
    owner = Owner(first_name="George", last_name="Franklin")
    report = get_visit_validation_pipeline().validate(owner)
    assert not report.has_errors


def test_each_validate_call_returns_a_fresh_report() -> None:
    pipeline = get_visit_validation_pipeline()
    visit = Visit(date=date(2024, 1, 7), description="checkup")

    first = pipeline.validate(visit)
    second = pipeline.validate(visit)

    assert first is not second
    assert first.to_list() == second.to_list()
    assert second.error_count == 1


def test_validate_or_raise_carries_the_report() -> None:
    pipeline = get_visit_validation_pipeline()

    with pytest.raises(FieldValidationError) as exc_info:
        pipeline.validate_or_raise(Visit(date=date(2024, 1, 7), description="checkup"))

    assert exc_info.value.message == "Validation failed"
    assert exc_info.value.report.fields == ["date"]


def test_validate_or_raise_returns_empty_report_for_weekday() -> None:
    report = get_visit_validation_pipeline().validate_or_raise(
        Visit(date=date(2024, 1, 8), description="checkup")
    )
    assert not report.has_errors


def test_validation_log_carries_codes_not_values(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="petclinic.validation")

    get_visit_validation_pipeline().validate(
        Visit(date=date(2024, 1, 7), description="private reason")
    )

    records = [r for r in caplog.records if r.name == "petclinic.validation"]
    assert len(records) == 1
    record = records[0]
    assert record.__dict__["object_kind"] == "Visit"
    assert record.__dict__["validators"] == ["VisitDateRule"]
    assert record.__dict__["error_codes"] == ["sunday.not.allowed"]
    assert "private reason" not in record.getMessage()
