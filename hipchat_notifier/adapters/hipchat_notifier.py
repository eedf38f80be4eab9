# hipchat_notifier/adapters/hipchat_notifier.py
"""
HipChat room message 알림 전송 어댑터
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence
import logging

import httpx

from hipchat_notifier.adapters.room_message import RoomMessage
from hipchat_notifier.application.services.message import render_message
from hipchat_notifier.application.services.target import parse_target
from hipchat_notifier.config import (
    HIPCHAT_AUTH_TOKEN,
    HIPCHAT_BASE_URL,
    HIPCHAT_TIMEOUT,
    HIPCHAT_USERNAME,
    SEYREN_BASE_URL,
)
from hipchat_notifier.domain.alert_type import SubscriptionType
from hipchat_notifier.domain.exceptions import NotificationFailedError
from hipchat_notifier.domain.message_color import MessageColor, color_for_state
from hipchat_notifier.domain.models import Alert, Check, Subscription

logger = logging.getLogger(__name__)

MESSAGE_PATH = "/v1/rooms/message"


@dataclass(frozen=True)
class RoomDelivery:
    """room 하나에 대한 전송 결과"""

    room_id: str
    delivered: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


class HipChatNotificationService:
    """HipChat room 으로 체크 상태 알림 전송"""

    def __init__(
        self,
        auth_token: str = HIPCHAT_AUTH_TOKEN,
        username: str = HIPCHAT_USERNAME,
        seyren_base_url: str = SEYREN_BASE_URL,
        base_url: str = HIPCHAT_BASE_URL,
        timeout: float = HIPCHAT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.auth_token = auth_token
        self.username = username
        self.seyren_base_url = seyren_base_url
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    def can_handle(self, subscription_type: SubscriptionType) -> bool:
        return subscription_type is SubscriptionType.HIPCHAT

    def notify(
        self,
        check: Check,
        subscription: Subscription,
        alerts: Sequence[Alert],
    ) -> List[RoomDelivery]:
        """
        구독 target 의 모든 room 으로 알림 전송

        Args:
            check: 상태가 바뀐 체크
            subscription: HipChat 구독 ("room1,room2" 또는 "room1,room2:regex")
            alerts: 알림을 발생시킨 이벤트 목록

        Returns:
            room 별 전송 결과 (전송 대상 상태가 아니면 빈 리스트)

        Raises:
            NotificationFailedError: target 파싱 / 메시지 생성 실패
        """
        color = color_for_state(check.state)
        if color is None:
            logger.warning(
                "Did not send notification to HipChat for check in state: %s",
                check.state.name,
            )
            return []

        try:
            target = parse_target(subscription.target)
            message = render_message(
                self.seyren_base_url, check, alerts, target.pattern
            )
        except Exception as exc:
            raise NotificationFailedError(
                "Failed to send notification to HipChat", cause=exc
            ) from exc

        return [
            self._post_to_room(room_id, message, color, notify=True)
            for room_id in target.rooms
        ]

    def _post_to_room(
        self,
        room_id: str,
        message: str,
        color: MessageColor,
        notify: bool,
    ) -> RoomDelivery:
        """
        room 하나로 메시지 전송. 실패해도 예외를 올리지 않는다.

        Args:
            room_id: HipChat room id 또는 이름
            message: 전송할 메시지 (HTML)
            color: 배경색
            notify: 사용자 알림 ping 여부

        Returns:
            전송 결과
        """
        logger.info(
            "Posting: %s to %s: %s %s", self.username, room_id, message, color.name
        )

        try:
            form = RoomMessage(
                auth_token=self.auth_token,
                from_=self.username,
                room_id=room_id,
                message=message,
                color=color.wire_value,
                notify="1" if notify else None,
            ).to_form()

            with httpx.Client(
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                resp = client.post(self.base_url + MESSAGE_PATH, data=form)
        except Exception as exc:
            logger.warning(
                "❌ Error posting to HipChat room %s: %s", room_id, exc, exc_info=True
            )
            return RoomDelivery(room_id=room_id, delivered=False, error=str(exc))

        if resp.is_error:
            logger.warning(
                "❌ HipChat response error. room=%s status=%s body=%s",
                room_id,
                resp.status_code,
                resp.text[:200],
            )
            return RoomDelivery(
                room_id=room_id,
                delivered=False,
                status_code=resp.status_code,
                error=f"HTTP {resp.status_code}",
            )

        return RoomDelivery(
            room_id=room_id, delivered=True, status_code=resp.status_code
        )
