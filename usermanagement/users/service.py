"""User directory: the business rules over users and their audit trail."""

from usermanagement.audit.log import AuditLog
from usermanagement.audit.views import join_users
from usermanagement.errors import InvalidArgumentError, NotFoundError
from usermanagement.models import AuditAction, LogEntry, LogEntryWithUser, User
from usermanagement.observability.logging import get_logger
from usermanagement.observability.metrics import USER_COUNT
from usermanagement.storage.store import EntityStore
from usermanagement.users.diff import FieldChange, diff_users, render_changes

logger = get_logger(__name__)


def _require_positive(user_id: int | None) -> None:
    if user_id is None or user_id <= 0:
        raise InvalidArgumentError(f"user identity must be positive, got {user_id!r}")


class UserDirectory:
    """Lookup, filtering and audited mutation of users.

    Store failures propagate unchanged. The directory only decides
    whether to call the store and whether an action is audit-worthy.

    Audit-on-create is a caller choice: create() writes no audit entry,
    create_and_log() does.
    """

    def __init__(self, store: EntityStore, audit_log: AuditLog | None = None) -> None:
        self._store = store
        self._audit = audit_log or AuditLog(store.log_entries)

    @property
    def audit_log(self) -> AuditLog:
        return self._audit

    async def _refresh_user_count(self) -> None:
        USER_COUNT.set(await self._store.users.count())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    async def all_users(self) -> list[User]:
        return await self._store.list_all(User)

    async def users_where_active(self, is_active: bool) -> list[User]:
        """Users whose is_active flag equals the given value."""
        users = await self._store.list_all(User)
        return [u for u in users if u.is_active == is_active]

    async def user_by_id(self, user_id: int) -> User | None:
        """Get a user, or None when no user has that identity.

        Raises:
            InvalidArgumentError: If user_id is not positive
        """
        _require_positive(user_id)
        users = await self._store.list_all(User)
        return next((u for u in users if u.id == user_id), None)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    async def create(self, user: User) -> User:
        """Persist a new user without writing an audit entry."""
        if user is None:
            raise InvalidArgumentError("user must not be None")
        created = await self._store.add(user)
        await self._refresh_user_count()
        logger.info("user_created", user_id=created.id)
        return created

    async def create_and_log(self, user: User, actor: str | None = None) -> User:
        """Persist a new user and append a Created audit entry."""
        created = await self.create(user)
        await self._audit.record(
            created.id,
            AuditAction.CREATED.value,
            f"Created user {created.display_name} ({created.email})",
            actor=actor,
        )
        return created

    async def update_with_audit(
        self,
        existing: User,
        proposed: User,
        actor: str | None = None,
    ) -> list[FieldChange]:
        """Apply proposed values onto existing and audit what changed.

        When nothing differs, nothing is persisted or logged and an
        empty list is returned. proposed.id is ignored. existing is
        only modified once the store has accepted the update.
        """
        if existing is None or proposed is None:
            raise InvalidArgumentError("existing and proposed users are required")
        _require_positive(existing.id)

        changes = diff_users(existing, proposed)
        if not changes:
            logger.debug("user_update_skipped", user_id=existing.id)
            return []

        updated = existing.model_copy(
            update={change.field: change.new_value for change in changes}
        )
        await self._store.update(updated)
        for change in changes:
            setattr(existing, change.field, change.new_value)

        await self._audit.record(
            existing.id,
            AuditAction.UPDATED.value,
            render_changes(changes),
            actor=actor,
        )
        logger.info(
            "user_updated",
            user_id=existing.id,
            fields=[change.field for change in changes],
        )
        return changes

    async def delete_with_audit(self, user: User, actor: str | None = None) -> None:
        """Remove a user and append a Deleted audit entry.

        Earlier entries about the user are kept.
        """
        if user is None:
            raise InvalidArgumentError("user must not be None")
        await self._store.remove(user)
        await self._refresh_user_count()
        await self._audit.record(
            user.id,
            AuditAction.DELETED.value,
            f"Deleted user {user.display_name}",
            actor=actor,
        )
        logger.info("user_deleted", user_id=user.id)

    async def delete_by_id(self, user_id: int, actor: str | None = None) -> User:
        """Look up a user by identity, then delete_with_audit it.

        Raises:
            NotFoundError: If no user has that identity
        """
        user = await self.user_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        await self.delete_with_audit(user, actor=actor)
        return user

    # ------------------------------------------------------------------
    # Audit trail
    # ------------------------------------------------------------------
    async def log_user_action(
        self,
        user_id: int | None,
        action: str,
        details: str | None = None,
        actor: str | None = None,
    ) -> LogEntry:
        """Append an arbitrary audit entry about a user."""
        return await self._audit.record(user_id, action, details, actor=actor)

    async def logs_for(self, user_id: int) -> list[LogEntry]:
        return await self._audit.entries_for(user_id)

    async def log_entry(self, log_id: int) -> LogEntry:
        return await self._audit.entry_by_id(log_id)

    async def all_log_entries(self, search: str | None = None) -> list[LogEntryWithUser]:
        """Every audit entry with its subject's name, newest first.

        search filters by case-insensitive substring of forename or
        surname; blank search returns everything.
        """
        entries = await self._audit.all_entries()
        users = await self._store.list_all(User)
        return join_users(entries, users, search)
