"""Role-aware default approval-status filter.

One shared function for every listing; the context flag selects between the
public catalog rules and an author's own materials.
"""

from collections.abc import Iterable

from cardfile.domain.enums import ApprovalStatus, Role, VisibilityContext

PUBLIC_STATUSES = frozenset({ApprovalStatus.APPROVED})
MANAGER_DEFAULT_STATUSES = frozenset({ApprovalStatus.PENDING, ApprovalStatus.APPROVED})
ALL_STATUSES = frozenset(ApprovalStatus)


def effective_approval_statuses(
    role: Role | str | None,
    requested: Iterable[ApprovalStatus | int] | None = None,
    context: VisibilityContext = VisibilityContext.CATALOG,
) -> frozenset[ApprovalStatus]:
    """Return the approval-status set actually applied for this caller.

    Catalog rules:
        - USER (and any unrecognized role): always exactly {APPROVED}.
        - MANAGER: requested set with REJECTED stripped; {PENDING, APPROVED}
          when nothing (or only REJECTED) was requested.
        - ADMIN: requested set verbatim; all statuses when nothing was requested.

    OWN rules (author viewing their own materials): requested set verbatim,
    all statuses when nothing was requested, regardless of role.

    Never returns an empty set. Unknown status codes in ``requested`` are ignored.

    Args:
        role: Caller role (Role member or its string value).
        requested: Status codes the caller asked for; empty/None means role default.
        context: Listing context.

    Returns:
        Non-empty frozenset of ApprovalStatus.
    """
    wanted = _coerce_statuses(requested)

    if context == VisibilityContext.OWN:
        return wanted or ALL_STATUSES

    try:
        resolved = Role(role) if role is not None else Role.USER
    except ValueError:
        return PUBLIC_STATUSES

    if resolved == Role.ADMIN:
        return wanted or ALL_STATUSES
    if resolved == Role.MANAGER:
        allowed = wanted - {ApprovalStatus.REJECTED}
        return allowed or MANAGER_DEFAULT_STATUSES
    return PUBLIC_STATUSES


def can_view(
    role: Role | str | None,
    status: ApprovalStatus,
    context: VisibilityContext = VisibilityContext.CATALOG,
) -> bool:
    """Return whether a single material in ``status`` is visible under the role default."""
    return status in effective_approval_statuses(role, None, context)


def _coerce_statuses(
    requested: Iterable[ApprovalStatus | int] | None,
) -> frozenset[ApprovalStatus]:
    if not requested:
        return frozenset()
    statuses: set[ApprovalStatus] = set()
    for code in requested:
        try:
            statuses.add(ApprovalStatus(code))
        except ValueError:
            continue
    return frozenset(statuses)
