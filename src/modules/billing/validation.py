"""Query parameter parsing for billing reports."""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timezone

from src.core.config import settings
from src.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

MISSING_DATES_MESSAGE = "Missing required query parameters: startDate and endDate"
INVALID_DATE_MESSAGE = "Invalid date format. Use YYYY-MM-DD."
INVERTED_RANGE_MESSAGE = "endDate cannot be before startDate"
INVALID_PAGE_MESSAGE = "Invalid page number. Must be 1 or greater."

_ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")

# OFFSET is bound as a signed 64-bit integer
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class DateWindow:
    """Inclusive UTC window covering whole calendar days."""

    start_date: date
    end_date: date

    @property
    def starts_at(self) -> datetime:
        return datetime.combine(self.start_date, time.min, tzinfo=timezone.utc)

    @property
    def ends_at(self) -> datetime:
        # 23:59:59.999 so the whole final day is included
        return datetime.combine(self.end_date, time(23, 59, 59, 999000), tzinfo=timezone.utc)


@dataclass(frozen=True)
class PageRequest:
    page: int
    rows_per_page: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.rows_per_page


def parse_iso_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD calendar date or raise ValidationError."""
    value = value.strip()
    if not _ISO_DATE_RE.match(value):
        raise ValidationError(INVALID_DATE_MESSAGE)
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(INVALID_DATE_MESSAGE)


def parse_date_window(start_date: str | None, end_date: str | None) -> DateWindow:
    """
    Validate the startDate/endDate pair.

    Both are required, must be real calendar dates, and endDate may not precede
    startDate. Equal dates select a single day.
    """
    if not start_date or not end_date:
        logger.warning(
            "Missing startDate or endDate. Start: %s, End: %s", start_date, end_date
        )
        raise ValidationError(MISSING_DATES_MESSAGE)

    try:
        start = parse_iso_date(start_date)
        end = parse_iso_date(end_date)
    except ValidationError:
        logger.warning("Invalid date format. Start: %r, End: %r", start_date, end_date)
        raise

    if end < start:
        logger.warning("endDate %s is before startDate %s", end, start)
        raise ValidationError(INVERTED_RANGE_MESSAGE, field="endDate")

    return DateWindow(start_date=start, end_date=end)


def _parse_int(value: str) -> int | None:
    value = value.strip()
    if not _INTEGER_RE.match(value):
        return None
    return int(value)


def invalid_rows_per_page_message() -> str:
    return f"Invalid rowsPerPage. Must be between 1 and {settings.report_max_rows_per_page}."


def parse_page_request(page: str | None, rows_per_page: str | None) -> PageRequest:
    """Validate page (>= 1, default 1) and rowsPerPage (1..max, default from settings)."""
    page_number = 1
    if page:
        page_number = _parse_int(page)
        if page_number is None or page_number < 1:
            logger.warning("Invalid page parameter: %r", page)
            raise ValidationError(INVALID_PAGE_MESSAGE, field="page")

    size = settings.report_default_rows_per_page
    if rows_per_page:
        size = _parse_int(rows_per_page)
        if size is None or size < 1 or size > settings.report_max_rows_per_page:
            logger.warning("Invalid rowsPerPage parameter: %r", rows_per_page)
            raise ValidationError(invalid_rows_per_page_message(), field="rowsPerPage")

    if (page_number - 1) * size > MAX_OFFSET:
        logger.warning("page %r is out of range for rowsPerPage=%s", page, size)
        raise ValidationError(INVALID_PAGE_MESSAGE, field="page")

    return PageRequest(page=page_number, rows_per_page=size)
