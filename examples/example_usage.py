"""Example: use the service layer directly (without Flask).

Prints the current month's pay summary for user 1.
"""

import importlib

from config import get_settings_module

from src.worklog_payroll.worklog_payroll.common.datetime_utils import current_month
from src.worklog_payroll.worklog_payroll.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    summary = container.payroll_report_service.monthly_summary(1, current_month())
    print(summary.as_dict())


if __name__ == "__main__":
    main()
