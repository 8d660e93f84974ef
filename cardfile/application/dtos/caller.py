"""Caller context and notification recipient DTOs."""

from dataclasses import dataclass, field

from cardfile.domain.enums import Role


@dataclass(frozen=True)
class CallerContext:
    """Identity and roles of the caller, supplied by the auth layer.

    Anonymous callers have user_id None and the USER role.
    """

    user_id: str | None = None
    roles: frozenset[Role] = field(default_factory=lambda: frozenset({Role.USER}))

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def is_admin(self) -> bool:
        return Role.ADMIN in self.roles

    @property
    def is_manager(self) -> bool:
        """Admins are managers too."""
        return Role.MANAGER in self.roles or self.is_admin

    @property
    def role(self) -> Role:
        """Highest role held; this is what the visibility policy keys on."""
        if self.is_admin:
            return Role.ADMIN
        if self.is_manager:
            return Role.MANAGER
        return Role.USER


@dataclass(frozen=True)
class NotificationRecipient:
    """Author of a text material as seen by the notifier."""

    user_id: str
    username: str
    email: str
    receive_notifications: bool = True
