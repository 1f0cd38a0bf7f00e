from __future__ import annotations

from dataclasses import dataclass

from .announcements.mysql_announcement_repository import MySQLAnnouncementRepository
from .announcements.service import AnnouncementService
from .core.constants import DEFAULT_HOURLY_WAGE
from .database.connection import DBConfig, DatabaseConnection, get_connection
from .deductions.mysql_deduction_repository import MySQLDeductionRepository
from .deductions.service import DeductionService
from .payroll.service import PayrollReportService
from .profiles.mysql_profile_repository import MySQLProfileRepository
from .profiles.service import AuthService, ProfileService
from .worklogs.mysql_worklog_repository import MySQLWorkLogRepository
from .worklogs.service import WorkLogService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    profiles_repo: MySQLProfileRepository
    worklogs_repo: MySQLWorkLogRepository
    deductions_repo: MySQLDeductionRepository
    announcements_repo: MySQLAnnouncementRepository

    auth_service: AuthService
    profile_service: ProfileService
    worklog_service: WorkLogService
    deduction_service: DeductionService
    payroll_report_service: PayrollReportService
    announcement_service: AnnouncementService


def build_container(*, db_config: dict, default_hourly_wage: int = DEFAULT_HOURLY_WAGE) -> Container:
    conn = get_connection(DBConfig.from_mapping(db_config))

    profiles_repo = MySQLProfileRepository(conn)
    worklogs_repo = MySQLWorkLogRepository(conn)
    deductions_repo = MySQLDeductionRepository(conn)
    announcements_repo = MySQLAnnouncementRepository(conn)

    profile_service = ProfileService(profiles_repo, default_hourly_wage=default_hourly_wage)

    return Container(
        conn=conn,
        profiles_repo=profiles_repo,
        worklogs_repo=worklogs_repo,
        deductions_repo=deductions_repo,
        announcements_repo=announcements_repo,
        auth_service=AuthService(profiles_repo),
        profile_service=profile_service,
        worklog_service=WorkLogService(worklogs_repo),
        deduction_service=DeductionService(deductions_repo),
        payroll_report_service=PayrollReportService(worklogs_repo, deductions_repo, profile_service),
        announcement_service=AnnouncementService(announcements_repo),
    )
