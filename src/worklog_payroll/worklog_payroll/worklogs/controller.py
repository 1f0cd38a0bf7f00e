from __future__ import annotations

from flask import Flask, request

from ..common.http import (
    current_role,
    current_user_id,
    json_body,
    login_required,
    manager_required,
    month_arg,
    ok,
    parse_date_field,
)
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.worklog_service

    @app.route("/api/worklogs", methods=["GET"], endpoint="worklogs_list")
    @login_required
    def worklogs_list():
        logs = svc.list_month(current_user_id(), month_arg(), status=request.args.get("status"))
        return ok(worklogs=[svc.to_view(log) for log in logs])

    @app.route("/api/worklogs", methods=["POST"], endpoint="worklogs_create")
    @login_required
    def worklogs_create():
        data = json_body()
        log_id = svc.register(
            current_user_id=current_user_id(),
            current_role=current_role(),
            user_id=data.get("user_id"),
            work_date=parse_date_field(data.get("date")),
            work_type=data.get("work_type") or "work",
            clock_in=data.get("clock_in"),
            clock_out=data.get("clock_out"),
            day_off_reason=data.get("day_off_reason"),
            status=data.get("status"),
        )
        return ok(log_id=log_id), 201

    @app.route("/api/worklogs/<int:log_id>", methods=["PUT"], endpoint="worklogs_update")
    @login_required
    def worklogs_update(log_id: int):
        data = json_body()
        svc.update(
            current_user_id=current_user_id(),
            current_role=current_role(),
            log_id=log_id,
            work_date=parse_date_field(data["date"]) if data.get("date") else None,
            work_type=data.get("work_type"),
            clock_in=data.get("clock_in"),
            clock_out=data.get("clock_out"),
            day_off_reason=data.get("day_off_reason"),
            status=data.get("status"),
        )
        return ok()

    @app.route("/api/worklogs/<int:log_id>", methods=["DELETE"], endpoint="worklogs_delete")
    @manager_required
    def worklogs_delete(log_id: int):
        svc.delete(current_role=current_role(), log_id=log_id)
        return ok()

    @app.route("/api/worklogs/<int:log_id>/approve", methods=["POST"], endpoint="worklogs_approve")
    @manager_required
    def worklogs_approve(log_id: int):
        svc.approve(current_role=current_role(), log_id=log_id)
        return ok()

    @app.route("/api/worklogs/<int:log_id>/reject", methods=["POST"], endpoint="worklogs_reject")
    @manager_required
    def worklogs_reject(log_id: int):
        svc.reject(current_role=current_role(), log_id=log_id)
        return ok()

    @app.route("/api/worklogs/pending", endpoint="worklogs_pending")
    @manager_required
    def worklogs_pending():
        return ok(worklogs=[svc.to_view(log) for log in svc.list_pending(current_role=current_role())])

    @app.route("/api/worklogs/calendar", endpoint="worklogs_calendar")
    @login_required
    def worklogs_calendar():
        return ok(month=month_arg(), days=svc.calendar(current_user_id(), month_arg()))
