# hipchat_notifier/domain/message_color.py
from __future__ import annotations

from enum import Enum

from hipchat_notifier.domain.alert_type import AlertType


class MessageColor(Enum):
    """HipChat room message 배경색"""

    YELLOW = "YELLOW"
    RED = "RED"
    GREEN = "GREEN"
    PURPLE = "PURPLE"
    RANDOM = "RANDOM"

    @property
    def wire_value(self) -> str:
        """API 에 보내는 값 (소문자)"""
        return self.name.lower()


# 알림을 보내는 상태만 등록. 나머지 상태는 전송하지 않는다.
STATE_COLORS: dict[AlertType, MessageColor] = {
    AlertType.ERROR: MessageColor.RED,
    AlertType.WARN: MessageColor.YELLOW,
    AlertType.OK: MessageColor.GREEN,
}


def color_for_state(state: AlertType) -> MessageColor | None:
    """
    체크 상태에 해당하는 색상 반환.

    Returns:
        None 이면 전송 대상 아님
    """
    return STATE_COLORS.get(state)
