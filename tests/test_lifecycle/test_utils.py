"""时间格式工具函数单元测试."""

import pytest

from ilmflow.lifecycle.utils import parse_time_to_millis, validate_time_value


class TestValidateTimeValue:
    """validate_time_value 函数测试."""

    @pytest.mark.parametrize(
        "value",
        ["0ms", "30d", "12h", "5m", "1M", "10s", "100micros", "100nanos", "0", "-1", " 7D "],
    )
    def test_valid_values(self, value: str) -> None:
        """测试合法的 ES TimeValue."""
        assert validate_time_value(value) is True

    @pytest.mark.parametrize("value", ["", "abc", "30", "1w", "1y", "1.5d", "-2d", "30 d"])
    def test_invalid_values(self, value: str) -> None:
        """测试不合法的时间格式."""
        assert validate_time_value(value) is False

    def test_non_string_input(self) -> None:
        """测试非字符串输入."""
        assert validate_time_value(None) is False  # type: ignore
        assert validate_time_value(30) is False  # type: ignore


class TestParseTimeToMillis:
    """parse_time_to_millis 函数测试."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("0ms", 0),
            ("250ms", 250),
            ("2s", 2000),
            ("1m", 60000),
            ("1M", 60000),
            ("1h", 3600000),
            ("30d", 30 * 86400000),
            ("1500micros", 1),
            ("2000000nanos", 2),
            ("0", 0),
            ("-1", -1),
        ],
    )
    def test_parse(self, value: str, expected: int) -> None:
        """测试换算为毫秒."""
        assert parse_time_to_millis(value) == expected

    def test_invalid_raises_error(self) -> None:
        """测试不合法格式抛出异常."""
        with pytest.raises(ValueError, match="不合法的 ES 时间格式"):
            parse_time_to_millis("1w")
