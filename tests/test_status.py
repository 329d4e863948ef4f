"""Unit tests for HTTP status diagnostics."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsprompt.status import STATUS_MESSAGES, describe_status, report_status

KNOWN_CODES = (400, 401, 402, 422, 429, 500, 503)


class TestDescribeStatus:
    """Tests for describe_status."""

    def test_table_covers_documented_codes(self):
        """Test that both languages cover exactly the documented codes."""
        for table in STATUS_MESSAGES.values():
            assert tuple(sorted(table)) == KNOWN_CODES

    @pytest.mark.parametrize(
        ("code", "fragment"),
        [
            (400, "Invalid Format"),
            (401, "Authentication Fails"),
            (402, "Insufficient Balance"),
            (422, "Invalid Parameters"),
            (429, "Rate Limit Reached"),
            (500, "Server Error"),
            (503, "Server Overloaded"),
        ],
    )
    def test_known_codes(self, code, fragment):
        """Test the fixed line for each documented code."""
        line = describe_status(code)
        assert line.startswith(f"{code} - ")
        assert fragment in line

    def test_known_code_chinese(self):
        """Test the Chinese table."""
        assert describe_status(401, "zh").startswith("401 - 认证失败")

    def test_unknown_language_falls_back_to_english(self):
        """Test that an unknown language uses the English table."""
        assert describe_status(401, "xx") == describe_status(401, "en")

    @given(st.integers(min_value=100, max_value=999).filter(lambda c: c not in KNOWN_CODES))
    def test_unhandled_code_includes_value(self, code: int):
        """Property test: the generic line always carries the numeric code."""
        for language in ("en", "zh"):
            line = describe_status(code, language)
            assert str(code) in line
            assert line not in STATUS_MESSAGES[language].values()


class TestReportStatus:
    """Tests for report_status."""

    def test_prints_line(self, console_output):
        """Test that the diagnostic is printed as plain text."""
        console, buffer = console_output

        report_status(404, console)

        assert buffer.getvalue() == "Unknown error: received unhandled HTTP status code 404.\n"
