# hipchat_notifier/domain/alert_type.py
from enum import Enum


class AlertType(Enum):
    """
    체크 상태 (severity).

    - UNKNOWN: 아직 평가되지 않은 상태
    - OK / WARN / ERROR: HipChat 으로 알림을 보내는 상태
    - EXCEPTION: 평가 중 예외 발생
    """

    UNKNOWN = "UNKNOWN"
    OK = "OK"
    WARN = "WARN"
    ERROR = "ERROR"
    EXCEPTION = "EXCEPTION"


class SubscriptionType(Enum):
    """구독 전달 채널 종류"""

    EMAIL = "EMAIL"
    PAGERDUTY = "PAGERDUTY"
    HIPCHAT = "HIPCHAT"
    HUBOT = "HUBOT"
    FLOWDOCK = "FLOWDOCK"
    IRCCAT = "IRCCAT"
    SLACK = "SLACK"
    PUSHOVER = "PUSHOVER"
    HTTP = "HTTP"
    LOGGER = "LOGGER"
