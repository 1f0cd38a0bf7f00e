from __future__ import annotations

from flask import Flask

from ..common.http import current_role, json_body, login_required, manager_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.deduction_service

    def _view(rule) -> dict:
        return {
            "deduction_id": rule.deduction_id,
            "user_id": rule.user_id,
            "name": rule.name,
            "type": rule.type.value,
            "amount": rule.amount,
            "is_active": rule.is_active,
        }

    @app.route("/api/deductions/presets", endpoint="deductions_presets")
    @login_required
    def deductions_presets():
        return ok(presets=svc.presets())

    @app.route("/api/admin/employees/<int:user_id>/deductions", methods=["GET"], endpoint="admin_deductions_list")
    @manager_required
    def admin_deductions_list(user_id: int):
        return ok(deductions=[_view(r) for r in svc.list_for_user(user_id)])

    @app.route("/api/admin/employees/<int:user_id>/deductions", methods=["POST"], endpoint="admin_deductions_create")
    @manager_required
    def admin_deductions_create(user_id: int):
        data = json_body()
        deduction_id = svc.create(
            current_role=current_role(),
            user_id=user_id,
            name=data.get("name", ""),
            type=data.get("type", "fixed"),
            amount=data.get("amount"),
            is_active=data.get("is_active", True),
        )
        return ok(deduction_id=deduction_id), 201

    @app.route("/api/deductions/<int:deduction_id>", methods=["PUT"], endpoint="deductions_update")
    @manager_required
    def deductions_update(deduction_id: int):
        data = json_body()
        svc.update(
            current_role=current_role(),
            deduction_id=deduction_id,
            name=data.get("name"),
            type=data.get("type"),
            amount=data.get("amount"),
            is_active=data.get("is_active"),
        )
        return ok()

    @app.route("/api/deductions/<int:deduction_id>/toggle", methods=["POST"], endpoint="deductions_toggle")
    @manager_required
    def deductions_toggle(deduction_id: int):
        return ok(is_active=svc.toggle(current_role=current_role(), deduction_id=deduction_id))

    @app.route("/api/deductions/<int:deduction_id>", methods=["DELETE"], endpoint="deductions_delete")
    @manager_required
    def deductions_delete(deduction_id: int):
        svc.delete(current_role=current_role(), deduction_id=deduction_id)
        return ok()
