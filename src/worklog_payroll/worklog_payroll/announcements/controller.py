from __future__ import annotations

from flask import Flask

from ..common.http import current_role, current_user_id, json_body, login_required, manager_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.announcement_service

    @app.route("/api/announcements", endpoint="announcements_active")
    @login_required
    def announcements_active():
        return ok(announcements=[svc.to_view(a) for a in svc.list_active()])

    @app.route("/api/admin/announcements", methods=["GET"], endpoint="admin_announcements")
    @manager_required
    def admin_announcements():
        return ok(announcements=[svc.to_view(a) for a in svc.list_all(current_role=current_role())])

    @app.route("/api/admin/announcements", methods=["POST"], endpoint="admin_announcements_create")
    @manager_required
    def admin_announcements_create():
        data = json_body()
        announcement_id = svc.create(
            current_role=current_role(),
            author_id=current_user_id(),
            title=data.get("title", ""),
            content=data.get("content", ""),
            priority=data.get("priority"),
        )
        return ok(announcement_id=announcement_id), 201

    @app.route("/api/admin/announcements/<int:announcement_id>", methods=["PUT"], endpoint="admin_announcements_update")
    @manager_required
    def admin_announcements_update(announcement_id: int):
        data = json_body()
        svc.update(
            current_role=current_role(),
            announcement_id=announcement_id,
            title=data.get("title", ""),
            content=data.get("content", ""),
            priority=data.get("priority"),
        )
        return ok()

    @app.route(
        "/api/admin/announcements/<int:announcement_id>/toggle",
        methods=["POST"],
        endpoint="admin_announcements_toggle",
    )
    @manager_required
    def admin_announcements_toggle(announcement_id: int):
        return ok(is_active=svc.toggle(current_role=current_role(), announcement_id=announcement_id))

    @app.route("/api/admin/announcements/<int:announcement_id>", methods=["DELETE"], endpoint="admin_announcements_delete")
    @manager_required
    def admin_announcements_delete(announcement_id: int):
        svc.delete(current_role=current_role(), announcement_id=announcement_id)
        return ok()
