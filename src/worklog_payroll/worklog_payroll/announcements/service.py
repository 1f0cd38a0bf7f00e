from __future__ import annotations

from typing import Sequence

from ..common.validators import require_int_between, require_non_empty
from ..core.constants import DEFAULT_ANNOUNCEMENT_PRIORITY, MAX_ANNOUNCEMENT_PRIORITY
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import Announcement
from .repository import AnnouncementRepository


class AnnouncementService:
    def __init__(self, announcements: AnnouncementRepository):
        self._announcements = announcements

    def list_active(self) -> Sequence[Announcement]:
        return self._announcements.list_ordered(active_only=True)

    def list_all(self, *, current_role: Role) -> Sequence[Announcement]:
        if not current_role.is_manager:
            raise AuthorizationError("Permission denied")
        return self._announcements.list_ordered(active_only=False)

    def create(self, *, current_role: Role, author_id: int, title: str, content: str, priority=None) -> int:
        if not current_role.is_manager:
            raise AuthorizationError("Permission denied")
        return self._announcements.create(
            title=require_non_empty(title, "Title"),
            content=require_non_empty(content, "Content"),
            priority=self._priority(priority),
            author_id=int(author_id),
        )

    def update(self, *, current_role: Role, announcement_id: int, title: str, content: str, priority=None) -> None:
        if not current_role.is_manager:
            raise AuthorizationError("Permission denied")
        self._get(announcement_id)
        self._announcements.update(
            announcement_id=int(announcement_id),
            title=require_non_empty(title, "Title"),
            content=require_non_empty(content, "Content"),
            priority=self._priority(priority),
        )

    def toggle(self, *, current_role: Role, announcement_id: int) -> bool:
        if not current_role.is_manager:
            raise AuthorizationError("Permission denied")
        item = self._get(announcement_id)
        self._announcements.set_active(item.announcement_id, not item.is_active)
        return not item.is_active

    def delete(self, *, current_role: Role, announcement_id: int) -> None:
        if not current_role.is_manager:
            raise AuthorizationError("Permission denied")
        if not self._announcements.delete(int(announcement_id)):
            raise NotFoundError("Announcement not found")

    @staticmethod
    def to_view(a: Announcement) -> dict:
        return {
            "announcement_id": a.announcement_id,
            "title": a.title,
            "content": a.content,
            "priority": a.priority,
            "is_active": a.is_active,
            "author_name": a.author_name,
            "created_at": a.created_at.strftime("%Y-%m-%d %H:%M") if a.created_at else None,
        }

    def _get(self, announcement_id: int) -> Announcement:
        item = self._announcements.get_by_id(int(announcement_id))
        if not item:
            raise NotFoundError("Announcement not found")
        return item

    @staticmethod
    def _priority(value) -> int:
        if value is None or value == "":
            return DEFAULT_ANNOUNCEMENT_PRIORITY
        return require_int_between(value, "Priority", 1, MAX_ANNOUNCEMENT_PRIORITY)
