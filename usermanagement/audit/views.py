"""Read-only projections of the audit trail for listing screens."""

from collections.abc import Iterable

from usermanagement.models import LogEntry, LogEntryWithUser, User


def join_users(
    entries: Iterable[LogEntry],
    users: Iterable[User],
    search: str | None = None,
) -> list[LogEntryWithUser]:
    """Left-join entries with their subject user and optionally filter.

    When search is non-blank, only rows whose forename or surname
    contains it (case-insensitively) are kept. Rows whose user no
    longer exists carry no name and never match a search. Input order
    is preserved.
    """
    by_id = {user.id: user for user in users}
    needle = search.casefold() if search and search.strip() else None

    rows = []
    for entry in entries:
        user = by_id.get(entry.user_id) if entry.user_id is not None else None
        row = LogEntryWithUser(
            log_id=entry.id,
            action=entry.action,
            user_id=entry.user_id,
            forename=user.forename if user else None,
            surname=user.surname if user else None,
            details=entry.details,
            actor=entry.actor,
            timestamp=entry.timestamp,
        )
        if needle is not None and not _matches(row, needle):
            continue
        rows.append(row)
    return rows


def _matches(row: LogEntryWithUser, needle: str) -> bool:
    return any(
        name is not None and needle in name.casefold()
        for name in (row.forename, row.surname)
    )
