"""Field-level change detection between two User values."""

from collections.abc import Sequence
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict

from usermanagement.models import User

# Comparison order is also the order changes are reported in
DIFF_FIELDS: tuple[str, ...] = (
    "forename",
    "surname",
    "email",
    "is_active",
    "date_of_birth",
)

FIELD_LABELS: dict[str, str] = {
    "forename": "Forename",
    "surname": "Surname",
    "email": "Email",
    "is_active": "Active",
    "date_of_birth": "Date of birth",
}

CHANGE_SEPARATOR = "; "


def _format_value(value: Any) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


class FieldChange(BaseModel):
    """One changed field: (field, old_value, new_value)."""

    model_config = ConfigDict(frozen=True)

    field: str
    old_value: Any
    new_value: Any

    @property
    def label(self) -> str:
        return FIELD_LABELS.get(self.field, self.field)

    def render(self) -> str:
        """Human-readable form, e.g. 'Forename changed from A to B'."""
        return (
            f"{self.label} changed from {_format_value(self.old_value)} "
            f"to {_format_value(self.new_value)}"
        )


def diff_users(old: User, new: User) -> list[FieldChange]:
    """Compare two users field by field.

    Equality is exact value equality (strings are case-sensitive).
    Identity is not compared. An empty result means nothing changed.
    """
    changes = []
    for field in DIFF_FIELDS:
        old_value = getattr(old, field)
        new_value = getattr(new, field)
        if old_value != new_value:
            changes.append(
                FieldChange(field=field, old_value=old_value, new_value=new_value)
            )
    return changes


def render_changes(changes: Sequence[FieldChange]) -> str:
    """Join rendered changes into a single audit details string."""
    return CHANGE_SEPARATOR.join(change.render() for change in changes)
