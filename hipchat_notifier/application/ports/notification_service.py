# hipchat_notifier/application/ports/notification_service.py
"""
알림 전송 포트 (인터페이스)

Secondary Port: 체크 상태 변화를 외부 채널로 알리기 위한 인터페이스
"""
from typing import Any, Protocol, Sequence

from hipchat_notifier.domain.alert_type import SubscriptionType
from hipchat_notifier.domain.models import Alert, Check, Subscription


class NotificationService(Protocol):
    """
    알림 채널 인터페이스

    이 Protocol을 구현하는 어댑터:
    - HipChatNotificationService (adapters/hipchat_notifier.py)

    Protocol을 사용하는 서비스:
    - dispatcher.py (구독 타입별 어댑터 선택)
    """

    def can_handle(self, subscription_type: SubscriptionType) -> bool:
        """
        이 채널이 해당 구독 타입을 처리하는지 여부

        Args:
            subscription_type: 구독의 전달 채널 종류

        Returns:
            처리 가능 여부
        """
        ...

    def notify(
        self,
        check: Check,
        subscription: Subscription,
        alerts: Sequence[Alert],
    ) -> Any:
        """
        체크 알림 전송

        Args:
            check: 상태가 바뀐 체크
            subscription: 전달 대상 설정
            alerts: 알림을 발생시킨 이벤트 목록

        Raises:
            NotificationFailedError: 전송 시작 전 실패
        """
        ...
