"""Field-scoped error collection for a single validation pass."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class FieldError:
    """One rejected field.

    `code` is stable and machine-readable (e.g. `sunday.not.allowed`); `message` is the
    default human-readable text shown when no translation for `code` exists.
    """

    field: str
    code: str
    message: str


class ValidationReport:
    """Append-only sink of `FieldError` entries, kept in insertion order.

    A report is owned by whoever created it for the duration of one validation pass.
    Validators only ever append to it; nothing is removed or rewritten.
    """

    def __init__(self) -> None:
        self._errors: list[FieldError] = []

    def reject_value(self, field: str, code: str, message: str) -> FieldError:
        error = FieldError(field=field, code=code, message=message)
        self._errors.append(error)
        return error

    @property
    def errors(self) -> tuple[FieldError, ...]:
        return tuple(self._errors)

    @property
    def error_count(self) -> int:
        return len(self._errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def fields(self) -> list[str]:
        """Rejected field names, in the order they were first rejected."""
        return list(dict.fromkeys(e.field for e in self._errors))

    def field_errors(self, field: str) -> list[FieldError]:
        return [e for e in self._errors if e.field == field]

    def to_list(self) -> list[dict[str, str]]:
        return [asdict(e) for e in self._errors]

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"ValidationReport(errors={self._errors!r})"
