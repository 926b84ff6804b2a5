from types import SimpleNamespace

import pytest

from app.core.errors import NotFound, Forbidden
from app.core.ownership import Access, check, ensure_access


def test_missing_entity_is_not_found():
    assert check(None, 1) is Access.NOT_FOUND


def test_other_owner_is_denied():
    assert check(SimpleNamespace(owner_id=2), 1) is Access.DENY


def test_owner_has_access():
    assert check(SimpleNamespace(owner_id=1), 1) is Access.ACCESS


def test_ensure_access_returns_entity_for_owner():
    entity = SimpleNamespace(owner_id=7)
    assert ensure_access(entity, 7, "Task") is entity


def test_ensure_access_raises_not_found():
    with pytest.raises(NotFound) as exc:
        ensure_access(None, 1, "Project")
    assert exc.value.status_code == 404
    assert exc.value.message == "Project not found"


def test_ensure_access_raises_forbidden_with_action():
    with pytest.raises(Forbidden) as exc:
        ensure_access(SimpleNamespace(owner_id=2), 1, "Todo", "delete")
    assert exc.value.status_code == 403
    assert exc.value.message == "Not authorized to delete this todo"
