# hipchat_notifier/container.py
"""
의존성 조립 (Dependency Assembly)
"""
from typing import List
import logging

from hipchat_notifier.adapters.hipchat_notifier import HipChatNotificationService
from hipchat_notifier.application.ports.notification_service import NotificationService
from hipchat_notifier.application.services.dispatcher import NotificationDispatcher
from hipchat_notifier.domain.alert_type import SubscriptionType

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    서비스 컨테이너

    알림 채널 어댑터와 dispatcher 를 생성하고 조립합니다.
    """

    def __init__(self):
        # Adapter 생성 (Singleton)
        self._hipchat = HipChatNotificationService()
        self._services: List[NotificationService] = [self._hipchat]

        self._dispatcher = NotificationDispatcher(self._services)

    @property
    def hipchat(self) -> HipChatNotificationService:
        """HipChatNotificationService 인스턴스"""
        return self._hipchat

    @property
    def dispatcher(self) -> NotificationDispatcher:
        """NotificationDispatcher 인스턴스"""
        return self._dispatcher

    def supported_types(self) -> List[SubscriptionType]:
        """등록된 채널이 처리할 수 있는 구독 타입 목록"""
        return [
            subscription_type
            for subscription_type in SubscriptionType
            if any(s.can_handle(subscription_type) for s in self._services)
        ]


# 전역 컨테이너 인스턴스
_container: ServiceContainer | None = None


def is_container_initialized() -> bool:
    """컨테이너가 이미 생성되었는지 여부"""
    return _container is not None


def get_container() -> ServiceContainer:
    """
    ServiceContainer 싱글톤 인스턴스 반환

    Returns:
        ServiceContainer 인스턴스
    """
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def init_container() -> ServiceContainer:
    """
    ServiceContainer 초기화

    애플리케이션 시작 시 명시적으로 호출합니다.

    Returns:
        ServiceContainer 인스턴스
    """
    global _container
    _container = ServiceContainer()
    logger.info("✅ Service container initialized")
    return _container
