# tests/test_target.py
import re

import pytest

from hipchat_notifier.application.services.target import ParsedTarget, parse_target


def test_single_room_without_regex():
    """',' 도 ':' 도 없으면 room 하나, 정규식 없음"""
    parsed = parse_target("ops")

    assert parsed.rooms == ("ops",)
    assert parsed.pattern is None


def test_multiple_rooms_without_regex():
    """',' 로 분리, 순서 유지"""
    parsed = parse_target("ops,dev,ops")

    assert parsed.rooms == ("ops", "dev", "ops")
    assert parsed.pattern is None


def test_rooms_with_regex():
    """"A,B:re" -> rooms [A, B], regex re"""
    parsed = parse_target("A,B:host-(.*)")

    assert parsed.rooms == ("A", "B")
    assert parsed.pattern is not None
    assert parsed.pattern.pattern == "host-(.*)"


def test_regex_split_on_first_colon_only():
    """정규식 안의 ':' 는 그대로 유지"""
    parsed = parse_target("ops:(\\w+):8080")

    assert parsed.rooms == ("ops",)
    assert parsed.pattern.pattern == "(\\w+):8080"


def test_empty_room_ids_are_kept():
    """잘못된 입력도 검증하지 않고 그대로 분리"""
    parsed = parse_target("ops,,dev,")

    assert parsed.rooms == ("ops", "", "dev", "")


def test_empty_target_yields_single_empty_room():
    """room 목록은 비어있지 않다"""
    assert parse_target("").rooms == ("",)


def test_malformed_regex_raises():
    """정규식 컴파일 실패는 re.error"""
    with pytest.raises(re.error):
        parse_target("ops:host-(")


def test_parsed_target_is_frozen():
    """ParsedTarget 은 불변"""
    parsed = ParsedTarget(rooms=("ops",))

    with pytest.raises(AttributeError):
        parsed.rooms = ("dev",)
