# hipchat_notifier/domain/exceptions.py
from __future__ import annotations


class NotificationFailedError(Exception):
    """
    알림 전송 실패.

    room 으로 전송을 시작하기 전에 발생한 오류만 이 예외로 올라온다.
    (room 별 전송 실패는 로그만 남기고 무시)
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
