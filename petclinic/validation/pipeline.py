from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from petclinic.core.metrics import validation_failures_total
from petclinic.domain.exceptions import FieldValidationError
from petclinic.validation.base import Validator
from petclinic.validation.report import ValidationReport

logger = logging.getLogger("petclinic.validation")


class ValidationPipeline:
    """Route an object to every registered validator that applies to its type.

    Each call to `validate` works on a fresh report, so one pipeline instance can be
    shared across concurrent requests.
    """

    def __init__(self, validators: Iterable[Validator]) -> None:
        self._validators = tuple(validators)

    def validators_for(self, kind: type) -> list[Validator]:
        return [v for v in self._validators if v.applies(kind)]

    def validate(self, target: Any) -> ValidationReport:
        kind = type(target)
        applicable = self.validators_for(kind)
        report = ValidationReport()
        for validator in applicable:
            validator.validate(target, report)

        for error in report.errors:
            validation_failures_total.labels(
                kind=kind.__name__, field=error.field, code=error.code
            ).inc()

        # Field names and codes only: submitted values are never logged.
        logger.debug(
            "Validation completed",
            extra={
                "object_kind": kind.__name__,
                "validators": [type(v).__name__ for v in applicable],
                "error_codes": [e.code for e in report.errors],
            },
        )
        return report

    def validate_or_raise(self, target: Any) -> ValidationReport:
        report = self.validate(target)
        if report.has_errors:
            raise FieldValidationError(report)
        return report
