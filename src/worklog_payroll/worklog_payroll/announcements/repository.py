from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Announcement


class AnnouncementRepository(Protocol):
    def get_by_id(self, announcement_id: int) -> Optional[Announcement]:
        raise NotImplementedError

    def list_ordered(self, *, active_only: bool) -> Sequence[Announcement]:
        """Ordered by priority DESC, then created_at DESC."""

        raise NotImplementedError

    def create(self, *, title: str, content: str, priority: int, author_id: int) -> int:
        raise NotImplementedError

    def update(self, *, announcement_id: int, title: str, content: str, priority: int) -> bool:
        raise NotImplementedError

    def set_active(self, announcement_id: int, is_active: bool) -> bool:
        raise NotImplementedError

    def delete(self, announcement_id: int) -> bool:
        raise NotImplementedError
