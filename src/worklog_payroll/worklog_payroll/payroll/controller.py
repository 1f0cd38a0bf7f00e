from __future__ import annotations

from flask import Flask

from ..common.http import current_role, current_user_id, login_required, manager_required, month_arg, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.payroll_report_service

    @app.route("/api/payroll/summary", endpoint="payroll_summary")
    @login_required
    def payroll_summary():
        summary = svc.monthly_summary(current_user_id(), month_arg())
        return ok(month=month_arg(), summary=summary.as_dict())

    @app.route("/api/admin/employees/<int:user_id>/payroll", endpoint="admin_employee_payroll")
    @manager_required
    def admin_employee_payroll(user_id: int):
        detail = svc.employee_detail(current_role=current_role(), user_id=user_id, month=month_arg())
        return ok(
            month=month_arg(),
            summary=detail.summary.as_dict(),
            worklogs=detail.rows,
            deductions=detail.deductions,
        )
