from __future__ import annotations

from functools import lru_cache
from typing import Any

from petclinic.validation.pipeline import ValidationPipeline
from petclinic.validation.report import ValidationReport
from petclinic.visits.models import Visit

_ISO_SUNDAY = 7


class VisitDateRule:
    """Reject visits scheduled on a Sunday.

    Holds no state, so a single instance can serve concurrent validations. A visit
    without a date is left alone: presence of the date is checked by the request
    schema before any visit reaches this rule.
    """

    field = "date"
    code = "sunday.not.allowed"
    default_message = "Visits on Sundays are not allowed"

    def applies(self, kind: Any) -> bool:
        return isinstance(kind, type) and issubclass(kind, Visit)

    def validate(self, visit: Visit, report: ValidationReport) -> None:
        if visit.date is None:
            return
        if visit.date.isoweekday() == _ISO_SUNDAY:
            report.reject_value(self.field, self.code, self.default_message)


@lru_cache
def get_visit_validation_pipeline() -> ValidationPipeline:
    return ValidationPipeline([VisitDateRule()])
