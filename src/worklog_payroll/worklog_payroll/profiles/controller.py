from __future__ import annotations

from flask import Flask, session

from ..common.http import current_role, current_user_id, json_body, login_required, manager_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))

        session.clear()
        session.permanent = bool(data.get("remember_me"))

        session["user_id"] = s_user.user_id
        session["name"] = s_user.full_name
        session["role"] = s_user.role.value
        return ok(user={"user_id": s_user.user_id, "full_name": s_user.full_name, "role": s_user.role.value})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok()

    @app.route("/api/me", endpoint="me")
    @login_required
    def me():
        profile = container.profile_service.get(current_user_id())
        return ok(
            user={
                "user_id": profile.user_id,
                "full_name": profile.full_name,
                "email": profile.email,
                "role": profile.role.value,
                "hourly_wage": container.profile_service.hourly_wage_for(profile.user_id),
            }
        )

    @app.route("/api/admin/employees", endpoint="admin_employees")
    @manager_required
    def admin_employees():
        return ok(employees=container.profile_service.list_employees(current_role=current_role()))

    @app.route("/api/admin/employees/<int:user_id>/wage", methods=["PUT"], endpoint="admin_employee_wage")
    @manager_required
    def admin_employee_wage(user_id: int):
        container.profile_service.set_hourly_wage(
            current_role=current_role(),
            user_id=user_id,
            hourly_wage=json_body().get("hourly_wage"),
        )
        return ok()
