from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from petclinic.validation.report import ValidationReport


class BusinessValidationError(Exception):
    """Raised when a domain/business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FieldValidationError(BusinessValidationError):
    """Raised when one or more validators rejected fields of an object."""

    def __init__(self, report: ValidationReport, message: str = "Validation failed"):
        super().__init__(message)
        self.report = report
