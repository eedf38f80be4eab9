# hipchat_notifier/application/services/dispatcher.py
from __future__ import annotations

from typing import Sequence
import logging

from hipchat_notifier.application.ports.notification_service import NotificationService
from hipchat_notifier.domain.exceptions import NotificationFailedError
from hipchat_notifier.domain.models import Alert, Check, Subscription

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """
    구독 타입에 맞는 알림 채널 선택 서비스

    책임:
    - 비활성 구독 건너뛰기
    - can_handle 로 채널 선택
    - 채널 하나의 실패가 다른 채널 전송을 막지 않도록 처리
    """

    def __init__(self, services: Sequence[NotificationService]):
        """
        Args:
            services: 등록된 알림 채널 구현체 목록
        """
        self.services = list(services)

    def dispatch(
        self,
        check: Check,
        subscription: Subscription,
        alerts: Sequence[Alert],
    ) -> bool:
        """
        구독 하나에 대해 알림 전송

        Returns:
            True  -> 처리 가능한 채널이 있었음
            False -> 비활성 구독이거나 처리할 채널 없음
        """
        if not subscription.enabled:
            logger.info(
                "Skipping disabled subscription (id=%s, type=%s)",
                subscription.id,
                subscription.type.name,
            )
            return False

        handlers = [s for s in self.services if s.can_handle(subscription.type)]
        if not handlers:
            logger.warning(
                "⚠️ No notification service for subscription type %s",
                subscription.type.name,
            )
            return False

        for service in handlers:
            try:
                service.notify(check, subscription, alerts)
            except NotificationFailedError as exc:
                logger.error(
                    "❌ Notification failed for check %s: %s",
                    check.id,
                    exc,
                    exc_info=exc.cause,
                )

        return True
