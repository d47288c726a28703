from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from petclinic.validation.report import ValidationReport


@runtime_checkable
class Validator(Protocol):
    """A rule the validation pipeline can route objects to.

    `applies` is asked first with the object's type; `validate` is only called for
    objects whose type was accepted, and reports failures by appending to `report`.
    """

    def applies(self, kind: Any) -> bool: ...

    def validate(self, target: Any, report: ValidationReport) -> None: ...
