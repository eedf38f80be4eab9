# scripts/send_test_notification.py
"""
실제 HipChat room 으로 테스트 알림 전송

사용법:
    pdm run python scripts/send_test_notification.py "ops,dev:host-(.*)" ERROR

주의:
    - .env 의 HIPCHAT_AUTH_TOKEN 이 설정되어 있어야 함
    - 실제 HipChat room 으로 메시지가 전송됨
"""
import sys

from hipchat_notifier.adapters.hipchat_notifier import HipChatNotificationService
from hipchat_notifier.domain.alert_type import AlertType, SubscriptionType
from hipchat_notifier.domain.models import Alert, Check, Subscription
from hipchat_notifier.logging_config import setup_logging


def main() -> int:
    if len(sys.argv) < 2:
        print(__doc__)
        return 1

    target = sys.argv[1]
    state = AlertType[sys.argv[2]] if len(sys.argv) > 2 else AlertType.ERROR

    setup_logging()

    check = Check(id="e2e-check", name="E2E test check", state=state)
    subscription = Subscription(target=target, type=SubscriptionType.HIPCHAT)
    alerts = [
        Alert(target="servers.host-b.cpu"),
        Alert(target="servers.host-a.cpu"),
    ]

    results = HipChatNotificationService().notify(check, subscription, alerts)

    for result in results:
        mark = "✅" if result.delivered else "❌"
        print(f"{mark} room={result.room_id} status={result.status_code} error={result.error}")

    return 0 if all(r.delivered for r in results) else 2


if __name__ == "__main__":
    sys.exit(main())
