"""Validation layer: field error reports, validator contract and routing pipeline."""

from petclinic.validation.base import Validator
from petclinic.validation.pipeline import ValidationPipeline
from petclinic.validation.report import FieldError, ValidationReport

__all__ = [
    "FieldError",
    "ValidationPipeline",
    "ValidationReport",
    "Validator",
]
