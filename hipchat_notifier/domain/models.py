from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from hipchat_notifier.domain.alert_type import AlertType, SubscriptionType


class Check(BaseModel):
    """
    모니터링 대상 조건.
    알림 어댑터는 id / name / state 만 사용한다.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    state: AlertType = AlertType.UNKNOWN

    description: Optional[str] = None
    target: Optional[str] = None
    enabled: bool = True


class Alert(BaseModel):
    """
    알림을 발생시킨 이벤트 하나.
    target 은 알림이 발생한 대상 이름 (ex. "servers.host-a.cpu").
    """

    model_config = ConfigDict(frozen=True)

    target: str

    id: Optional[str] = None
    check_id: Optional[str] = None
    value: Optional[float] = None
    from_type: Optional[AlertType] = None
    to_type: Optional[AlertType] = None


class Subscription(BaseModel):
    """
    전달 대상 설정.

    HipChat 의 경우 target 은 "room1,room2" 또는 "room1,room2:regex" 형태.
    """

    model_config = ConfigDict(frozen=True)

    target: str
    type: SubscriptionType

    id: Optional[str] = None
    enabled: bool = True
