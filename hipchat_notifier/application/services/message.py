# hipchat_notifier/application/services/message.py
from __future__ import annotations

from typing import Optional, Sequence
import re

from hipchat_notifier.domain.models import Alert, Check


def check_url(seyren_base_url: str, check: Check) -> str:
    """체크 상세 화면 링크"""
    return f"{seyren_base_url}/#/checks/{check.id}"


def render_base_message(seyren_base_url: str, check: Check) -> str:
    """
    ex) Check <a href=http://seyren/#/checks/123>cpu</a> has entered its ERROR state.
    """
    return (
        f"Check <a href={check_url(seyren_base_url, check)}>{check.name}</a> "
        f"has entered its {check.state.name} state."
    )


def extract_captures(
    pattern: re.Pattern[str], alerts: Sequence[Alert]
) -> list[Optional[str]]:
    """
    모든 alert target 에서 pattern 의 group(1) 을 모아서 정렬해 반환.

    한 alert 에서 여러 번 매칭되면 전부 수집한다.
    group(1) 이 매칭에 참여하지 않으면 None.
    """
    captures = []
    for alert in alerts:
        for match in pattern.finditer(alert.target):
            captures.append(match.group(1))

    return sorted(captures)


def render_message(
    seyren_base_url: str,
    check: Check,
    alerts: Sequence[Alert],
    pattern: re.Pattern[str] | None,
) -> str:
    """
    HipChat 으로 보낼 메시지 생성.

    pattern 이 있으면 capture 목록을 "(a|b) " 형태로 앞에 붙인다.
    """
    message = render_base_message(seyren_base_url, check)

    if pattern is None:
        return message

    captures = extract_captures(pattern, alerts)
    # 매칭되지 않은 group 은 빈 문자열로 표시
    joined = "|".join(c if c is not None else "" for c in captures)
    return f"({joined}) {message}"
