"""生命周期工具函数模块.

提供 ES TimeValue 格式（阶段 min_age 使用）的校验与解析。
"""

import re


# 数字 + 时间单位（nanos, micros, ms, s, m, h, d），解析前统一转小写
_TIME_VALUE_PATTERN = re.compile(r"^(\d+)(nanos|micros|ms|s|m|h|d)$")

# 时间单位到毫秒的换算，nanos/micros 按整除处理
_UNIT_TO_MILLIS: dict[str, int] = {
    "ms": 1,
    "s": 1000,
    "m": 60 * 1000,
    "h": 60 * 60 * 1000,
    "d": 24 * 60 * 60 * 1000,
}

# 无单位的特殊取值
_SPECIAL_VALUES: dict[str, int] = {"-1": -1, "0": 0}


def validate_time_value(value: str) -> bool:
    """校验值是否为合法的 ES TimeValue.

    不区分大小写，允许首尾空白，另外接受无单位的 "0" 与 "-1"。

    Args:
        value: 待校验字符串，如 "0ms", "30d", "12h"

    Returns:
        True 表示合法，False 表示不合法

    Examples:
        >>> validate_time_value("30d")
        True
        >>> validate_time_value("-1")
        True
        >>> validate_time_value("1w")
        False
    """
    if not isinstance(value, str):
        return False
    normalized = value.strip().lower()
    if normalized in _SPECIAL_VALUES:
        return True
    return _TIME_VALUE_PATTERN.match(normalized) is not None


def parse_time_to_millis(value: str) -> int:
    """将 ES TimeValue 转换为毫秒数.

    Args:
        value: ES TimeValue 字符串

    Returns:
        毫秒数；"-1" 返回 -1

    Raises:
        ValueError: 当格式不合法时抛出

    Examples:
        >>> parse_time_to_millis("1h")
        3600000
        >>> parse_time_to_millis("1500micros")
        1
    """
    if not validate_time_value(value):
        raise ValueError(f"不合法的 ES 时间格式: {value!r}")

    normalized = value.strip().lower()
    if normalized in _SPECIAL_VALUES:
        return _SPECIAL_VALUES[normalized]

    match = _TIME_VALUE_PATTERN.match(normalized)
    assert match is not None
    amount = int(match.group(1))
    unit = match.group(2)

    if unit == "nanos":
        return amount // 1_000_000
    if unit == "micros":
        return amount // 1000
    return amount * _UNIT_TO_MILLIS[unit]
