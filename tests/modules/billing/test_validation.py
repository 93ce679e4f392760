from datetime import date, datetime, timezone

import pytest

from src.core.exceptions import ValidationError
from src.modules.billing.validation import (
    INVALID_DATE_MESSAGE,
    INVALID_PAGE_MESSAGE,
    INVERTED_RANGE_MESSAGE,
    MAX_OFFSET,
    MISSING_DATES_MESSAGE,
    PageRequest,
    parse_date_window,
    parse_iso_date,
    parse_page_request,
)


class TestParseDateWindow:
    """Tests for startDate/endDate validation."""

    def test_valid_range(self):
        window = parse_date_window("2024-03-01", "2024-03-31")
        assert window.start_date == date(2024, 3, 1)
        assert window.end_date == date(2024, 3, 31)

    def test_window_covers_whole_days_in_utc(self):
        window = parse_date_window("2024-03-01", "2024-03-31")
        assert window.starts_at == datetime(2024, 3, 1, 0, 0, 0, tzinfo=timezone.utc)
        assert window.ends_at == datetime(2024, 3, 31, 23, 59, 59, 999000, tzinfo=timezone.utc)

    def test_same_day_is_valid(self):
        window = parse_date_window("2024-03-15", "2024-03-15")
        assert window.starts_at < window.ends_at

    @pytest.mark.parametrize("start,end", [(None, "2024-03-31"), ("2024-03-01", None), ("", "")])
    def test_missing(self, start, end):
        with pytest.raises(ValidationError) as exc_info:
            parse_date_window(start, end)
        assert exc_info.value.message == MISSING_DATES_MESSAGE
        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize(
        "value",
        ["2024/03/01", "2024-13-01", "2024-02-30", "not-a-date", "2024-3-1", "20240301"],
    )
    def test_invalid_format(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_date_window(value, "2024-03-31")
        assert exc_info.value.message == INVALID_DATE_MESSAGE

    def test_invalid_end_date(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_date_window("2024-03-01", "2024-04-31")
        assert exc_info.value.message == INVALID_DATE_MESSAGE

    def test_end_before_start(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_date_window("2024-03-31", "2024-03-01")
        assert exc_info.value.message == INVERTED_RANGE_MESSAGE
        assert exc_info.value.field == "endDate"

    def test_leap_day(self):
        assert parse_iso_date("2024-02-29") == date(2024, 2, 29)


class TestParsePageRequest:
    """Tests for page/rowsPerPage validation."""

    def test_defaults(self):
        assert parse_page_request(None, None) == PageRequest(page=1, rows_per_page=20)

    def test_empty_values_use_defaults(self):
        assert parse_page_request("", "") == PageRequest(page=1, rows_per_page=20)

    def test_explicit_values(self):
        request = parse_page_request("3", "50")
        assert request.page == 3
        assert request.rows_per_page == 50
        assert request.offset == 100

    def test_offset_first_page(self):
        assert parse_page_request("1", "20").offset == 0

    @pytest.mark.parametrize("page", ["0", "-1", "abc", "1.5"])
    def test_invalid_page(self, page):
        with pytest.raises(ValidationError) as exc_info:
            parse_page_request(page, None)
        assert exc_info.value.message == INVALID_PAGE_MESSAGE

    @pytest.mark.parametrize("rows", ["0", "101", "-5", "ten"])
    def test_invalid_rows_per_page(self, rows):
        with pytest.raises(ValidationError) as exc_info:
            parse_page_request(None, rows)
        assert exc_info.value.message == "Invalid rowsPerPage. Must be between 1 and 100."

    @pytest.mark.parametrize("value", ["٣", "１０"])
    def test_non_ascii_digits_rejected(self, value):
        with pytest.raises(ValidationError):
            parse_page_request(None, value)
        with pytest.raises(ValidationError) as exc_info:
            parse_page_request(value, None)
        assert exc_info.value.message == INVALID_PAGE_MESSAGE

    def test_non_ascii_date_digits_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_iso_date("２０２４-03-01")
        assert exc_info.value.message == INVALID_DATE_MESSAGE

    def test_page_with_offset_beyond_64_bits(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_page_request("99999999999999999999", "20")
        assert exc_info.value.message == INVALID_PAGE_MESSAGE

    def test_largest_page_within_offset_range(self):
        request = parse_page_request(str(MAX_OFFSET + 1), "1")
        assert request.offset == MAX_OFFSET

    def test_rows_per_page_bounds(self):
        assert parse_page_request(None, "1").rows_per_page == 1
        assert parse_page_request(None, "100").rows_per_page == 100
