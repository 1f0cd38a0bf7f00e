from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from fakes import InMemoryAnnouncements, InMemoryDeductions, InMemoryProfiles, InMemoryWorkLogs
from src.worklog_payroll.worklog_payroll.core.enums import Role
from src.worklog_payroll.worklog_payroll.profiles.model import Profile


@pytest.fixture
def employee() -> Profile:
    return Profile(
        user_id=1,
        full_name="Kim Employee",
        email="employee@example.com",
        password_hash=generate_password_hash("employee123"),
        role=Role.EMPLOYEE,
        hourly_wage=10000,
    )


@pytest.fixture
def admin() -> Profile:
    return Profile(
        user_id=99,
        full_name="Admin",
        email="admin@example.com",
        password_hash=generate_password_hash("admin123"),
        role=Role.ADMIN,
    )


@pytest.fixture
def profiles_repo(employee, admin) -> InMemoryProfiles:
    return InMemoryProfiles([employee, admin])


@pytest.fixture
def worklogs_repo() -> InMemoryWorkLogs:
    return InMemoryWorkLogs()


@pytest.fixture
def deductions_repo() -> InMemoryDeductions:
    return InMemoryDeductions()


@pytest.fixture
def announcements_repo() -> InMemoryAnnouncements:
    return InMemoryAnnouncements()
