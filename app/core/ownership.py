"""
Ownership guard shared by projects, tasks and todos.

Every mapped entity carries an ``owner_id``; only that user may read or mutate it.
"""

from enum import Enum

from app.core.errors import NotFound, Forbidden


class Access(str, Enum):
    ACCESS = "access"
    DENY = "deny"
    NOT_FOUND = "not_found"


def check(entity, requester_id) -> Access:
    if entity is None:
        return Access.NOT_FOUND
    if entity.owner_id != requester_id:
        return Access.DENY
    return Access.ACCESS


def ensure_access(entity, requester_id, kind: str, action: str = "access"):
    """Return ``entity`` if the requester owns it, otherwise raise NotFound/Forbidden.

    ``kind`` is the display name ("Project", "Task", "Todo") used in messages.
    """
    verdict = check(entity, requester_id)
    if verdict is Access.NOT_FOUND:
        raise NotFound(f"{kind} not found")
    if verdict is Access.DENY:
        raise Forbidden(f"Not authorized to {action} this {kind.lower()}")
    return entity
