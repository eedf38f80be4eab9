from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class RoomMessage(BaseModel):
    """
    HipChat v1 `POST /v1/rooms/message` 폼 파라미터.

    - `from` 은 파이썬 예약어라서 필드명은 from_, 전송 시 alias 사용
    - notify 가 None 이면 폼에서 빠진다 (알림 ping 없음)
    """

    model_config = ConfigDict(populate_by_name=True)

    auth_token: str
    from_: str = Field(alias="from")
    room_id: str
    message: str
    color: str
    notify: Optional[str] = None

    def to_form(self) -> Dict[str, str]:
        """form-urlencoded 로 보낼 dict"""
        return self.model_dump(by_alias=True, exclude_none=True)
