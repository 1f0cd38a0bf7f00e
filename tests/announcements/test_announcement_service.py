from __future__ import annotations

import pytest

from src.worklog_payroll.worklog_payroll.core.enums import Role
from src.worklog_payroll.worklog_payroll.core.exceptions import AuthorizationError, ValidationError
from src.worklog_payroll.worklog_payroll.announcements.service import AnnouncementService


@pytest.fixture
def svc(announcements_repo):
    return AnnouncementService(announcements_repo)


def test_active_list_is_ordered_by_priority_then_newest(svc):
    low = svc.create(current_role=Role.ADMIN, author_id=99, title="Low", content="x")
    high = svc.create(current_role=Role.ADMIN, author_id=99, title="High", content="x", priority=3)
    newer_low = svc.create(current_role=Role.ADMIN, author_id=99, title="Newer low", content="x", priority="1")

    ids = [a.announcement_id for a in svc.list_active()]
    assert ids == [high, newer_low, low]


def test_toggle_hides_from_active_list(svc):
    aid = svc.create(current_role=Role.ADMIN, author_id=99, title="Notice", content="Body")

    assert svc.toggle(current_role=Role.ADMIN, announcement_id=aid) is False
    assert svc.list_active() == []
    assert len(svc.list_all(current_role=Role.ADMIN)) == 1


@pytest.mark.parametrize("title, content, priority", [("", "x", 1), ("t", "  ", 1), ("t", "x", 4), ("t", "x", "hi")])
def test_invalid_announcements(svc, title, content, priority):
    with pytest.raises(ValidationError):
        svc.create(current_role=Role.ADMIN, author_id=99, title=title, content=content, priority=priority)


def test_employees_only_read(svc):
    with pytest.raises(AuthorizationError):
        svc.create(current_role=Role.EMPLOYEE, author_id=1, title="t", content="c")
    with pytest.raises(AuthorizationError):
        svc.list_all(current_role=Role.EMPLOYEE)


def test_update_and_delete(svc):
    aid = svc.create(current_role=Role.ADMIN, author_id=99, title="Old", content="Body")

    svc.update(current_role=Role.ADMIN, announcement_id=aid, title="New", content="Body 2", priority=2)
    view = svc.to_view(svc.list_active()[0])
    assert (view["title"], view["content"], view["priority"]) == ("New", "Body 2", 2)

    svc.delete(current_role=Role.ADMIN, announcement_id=aid)
    assert svc.list_active() == []
