# tests/test_dispatcher.py
from unittest.mock import MagicMock

import pytest

from hipchat_notifier.application.services.dispatcher import NotificationDispatcher
from hipchat_notifier.domain.alert_type import AlertType, SubscriptionType
from hipchat_notifier.domain.exceptions import NotificationFailedError
from hipchat_notifier.domain.models import Alert, Check, Subscription


# --- Helper / 픽스처 -------------------------------------------------------

def make_service(handles: SubscriptionType) -> MagicMock:
    service = MagicMock()
    service.can_handle.side_effect = lambda t: t is handles
    return service


@pytest.fixture
def check() -> Check:
    return Check(id="c1", name="cpu", state=AlertType.ERROR)


@pytest.fixture
def alerts() -> list[Alert]:
    return [Alert(target="host-a")]


# --- 테스트들 ---------------------------------------------------------------

def test_routes_to_matching_service(check, alerts):
    """구독 타입에 맞는 채널만 호출"""
    hipchat = make_service(SubscriptionType.HIPCHAT)
    slack = make_service(SubscriptionType.SLACK)
    dispatcher = NotificationDispatcher([hipchat, slack])
    subscription = Subscription(target="ops", type=SubscriptionType.HIPCHAT)

    assert dispatcher.dispatch(check, subscription, alerts) is True

    hipchat.notify.assert_called_once_with(check, subscription, alerts)
    slack.notify.assert_not_called()


def test_no_matching_service(check, alerts):
    dispatcher = NotificationDispatcher([make_service(SubscriptionType.HIPCHAT)])
    subscription = Subscription(target="a@b.c", type=SubscriptionType.EMAIL)

    assert dispatcher.dispatch(check, subscription, alerts) is False


def test_disabled_subscription_skipped(check, alerts):
    """비활성 구독은 전송하지 않음"""
    hipchat = make_service(SubscriptionType.HIPCHAT)
    dispatcher = NotificationDispatcher([hipchat])
    subscription = Subscription(
        target="ops", type=SubscriptionType.HIPCHAT, enabled=False
    )

    assert dispatcher.dispatch(check, subscription, alerts) is False
    hipchat.notify.assert_not_called()


def test_failed_service_does_not_block_others(check, alerts, caplog):
    """한 채널의 NotificationFailedError 는 로그만 남긴다"""
    failing = make_service(SubscriptionType.HIPCHAT)
    failing.notify.side_effect = NotificationFailedError(
        "Failed to send notification to HipChat", cause=ValueError("bad regex")
    )
    other = make_service(SubscriptionType.HIPCHAT)
    dispatcher = NotificationDispatcher([failing, other])
    subscription = Subscription(target="ops", type=SubscriptionType.HIPCHAT)

    assert dispatcher.dispatch(check, subscription, alerts) is True

    other.notify.assert_called_once()
    assert "Notification failed for check c1" in caplog.text
