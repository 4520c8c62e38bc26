"""Unit tests for NotificationService."""

from datetime import datetime, timedelta

import pytest

from folio.config import SocialSettings
from folio.domain.error import StoreUnavailableError, ValidationError
from folio.domain.model import Notification
from folio.domain.repository import NotificationRepository
from folio.domain.service import NotificationService
from folio.domain.value import NotificationKind, NotificationTargetKind, UserId
from folio.persistence.repository.inmemory import InMemoryNotificationRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class UnavailableNotificationRepository(InMemoryNotificationRepository):
    async def find_by_recipient(self, recipient_id, limit=20, offset=0):
        raise StoreUnavailableError("connection refused")


async def _notify_follow(service: NotificationService, recipient: int, actor: int):
    return await service.notify(
        recipient_id=UserId(recipient),
        actor_id=UserId(actor),
        kind=NotificationKind.FOLLOW,
        target_kind=NotificationTargetKind.PROFILE,
    )


class TestNotificationService:
    """Tests for notification listing and read state."""

    @pytest.mark.asyncio
    async def test_notify_appends_unread(self, unit_env):
        service = await unit_env.get(NotificationService)

        notification = await service.notify(
            recipient_id=UserId(7),
            actor_id=UserId(1),
            kind=NotificationKind.STAR,
            target_kind=NotificationTargetKind.PROJECT,
            target_id=42,
        )

        assert notification.id is not None
        assert notification.read is False
        assert await service.unread_count(UserId(7)) == 1

    @pytest.mark.asyncio
    async def test_list_newest_first(self, unit_env):
        """Newest first; identical timestamps fall back to insertion order."""
        # Arrange
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        base = datetime(2025, 1, 1, 12, 0, 0)
        for offset_minutes, actor in [(0, 1), (5, 2), (5, 3), (10, 4)]:
            await repo.add(
                Notification(
                    recipient_id=UserId(7),
                    actor_id=UserId(actor),
                    kind=NotificationKind.FOLLOW,
                    target_kind=NotificationTargetKind.PROFILE,
                    created_at=base + timedelta(minutes=offset_minutes),
                )
            )

        # Act
        notifications = await service.list_for_user(UserId(7))

        # Assert
        assert [n.actor_id for n in notifications] == [4, 3, 2, 1]

    @pytest.mark.asyncio
    async def test_list_is_scoped_to_recipient(self, unit_env):
        service = await unit_env.get(NotificationService)
        await _notify_follow(service, recipient=7, actor=1)
        await _notify_follow(service, recipient=8, actor=1)

        notifications = await service.list_for_user(UserId(7))

        assert [n.recipient_id for n in notifications] == [7]

    @pytest.mark.asyncio
    async def test_list_respects_limit(self, unit_env):
        service = await unit_env.get(NotificationService)
        for actor in range(1, 6):
            await _notify_follow(service, recipient=7, actor=actor)

        assert len(await service.list_for_user(UserId(7), limit=3)) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -1, 101])
    async def test_list_rejects_out_of_range_limit(self, unit_env, limit):
        service = await unit_env.get(NotificationService)

        with pytest.raises(ValidationError):
            await service.list_for_user(UserId(7), limit=limit)

    @pytest.mark.asyncio
    async def test_list_rejects_negative_offset(self, unit_env):
        service = await unit_env.get(NotificationService)

        with pytest.raises(ValidationError):
            await service.list_for_user(UserId(7), offset=-1)

    @pytest.mark.asyncio
    async def test_list_skips_offset(self, unit_env):
        service = await unit_env.get(NotificationService)
        for actor in (1, 2, 3):
            await _notify_follow(service, recipient=7, actor=actor)

        notifications = await service.list_for_user(UserId(7), offset=1)

        assert [n.actor_id for n in notifications] == [2, 1]

    @pytest.mark.asyncio
    async def test_list_degrades_to_empty_when_store_unavailable(self):
        service = NotificationService(
            UnavailableNotificationRepository(), SocialSettings()
        )

        assert await service.list_for_user(UserId(7)) == []

    @pytest.mark.asyncio
    async def test_mark_as_read_only_for_recipient(self, unit_env):
        service = await unit_env.get(NotificationService)
        notification = await _notify_follow(service, recipient=7, actor=1)

        assert await service.mark_as_read(notification.id, UserId(8)) is False
        assert await service.unread_count(UserId(7)) == 1

        assert await service.mark_as_read(notification.id, UserId(7)) is True
        assert await service.unread_count(UserId(7)) == 0

    @pytest.mark.asyncio
    async def test_mark_as_read_missing_notification(self, unit_env):
        service = await unit_env.get(NotificationService)

        assert await service.mark_as_read(999, UserId(7)) is False

    @pytest.mark.asyncio
    async def test_mark_all_as_read(self, unit_env):
        service = await unit_env.get(NotificationService)
        for actor in (1, 2, 3):
            await _notify_follow(service, recipient=7, actor=actor)
        await _notify_follow(service, recipient=8, actor=1)

        changed = await service.mark_all_as_read(UserId(7))

        assert changed == 3
        assert await service.unread_count(UserId(7)) == 0
        assert await service.unread_count(UserId(8)) == 1
        assert await service.mark_all_as_read(UserId(7)) == 0
