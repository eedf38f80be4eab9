from __future__ import annotations

from dataclasses import dataclass
import re


@dataclass(frozen=True)
class ParsedTarget:
    """
    구독 target 파싱 결과.

    - rooms: room id 목록 (입력 순서 유지, 최소 1개)
    - pattern: alert target 에서 capture 를 뽑을 정규식 (없으면 None)
    """

    rooms: tuple[str, ...]
    pattern: re.Pattern[str] | None = None


def parse_target(target: str) -> ParsedTarget:
    """
    "room1,room2:regex" 형태의 target 문자열을 파싱한다.

    - 첫 번째 ':' 앞은 room 목록, 뒤는 정규식
    - room 목록은 ',' 로 분리 (중복 제거 / 검증 없음)

    Raises:
        re.error: 정규식 컴파일 실패
    """
    rooms_part, sep, regex_part = target.partition(":")

    pattern = re.compile(regex_part) if sep else None

    return ParsedTarget(rooms=tuple(rooms_part.split(",")), pattern=pattern)
