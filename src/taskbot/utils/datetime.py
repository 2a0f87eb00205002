"""Date and datetime formats used by taskbot.

Two independent format pairs are kept on purpose:

- STORE formats are used for user input and for the data file. Anything
  produced with a STORE format can be parsed back without loss.
- PRINT formats are only used to render tasks for display and are never parsed.
"""

from datetime import date, datetime

from ..errors import InvalidDateFormatError


# User input and data file
STORE_DATE_FORMAT = "%d/%m/%Y"
STORE_DATETIME_FORMAT = "%d/%m/%Y %H%M"

# Display only
PRINT_DATE_FORMAT = "%b %d %Y"
PRINT_DATETIME_FORMAT = "%I:%M%p %b %d %Y"

# Human readable patterns quoted in error messages
DATE_PATTERN_HINT = "dd/mm/yyyy"
DATETIME_PATTERN_HINT = "dd/mm/yyyy HHmm"


def parse_date(text: str) -> date:
    """Parse a ``dd/mm/yyyy`` string into a date.

    Raises:
        InvalidDateFormatError: If the text does not match the pattern.
    """
    try:
        return datetime.strptime(text.strip(), STORE_DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateFormatError(
            f"Please enter a valid date format:\nday/month/year > {DATE_PATTERN_HINT}",
            expected=DATE_PATTERN_HINT,
            value=text,
        ) from None


def parse_datetime(text: str) -> datetime:
    """Parse a ``dd/mm/yyyy HHmm`` string into a naive datetime.

    Raises:
        InvalidDateFormatError: If the text does not match the pattern.
    """
    try:
        return datetime.strptime(text.strip(), STORE_DATETIME_FORMAT)
    except ValueError:
        raise InvalidDateFormatError(
            "Please enter a valid date and time format:\n"
            f"day/month/year 24hour time > {DATETIME_PATTERN_HINT}",
            expected=DATETIME_PATTERN_HINT,
            value=text,
        ) from None


def format_date_to_store(value: date) -> str:
    # strftime does not pad years below 1000 on every platform; strptime needs four digits
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def format_datetime_to_store(value: datetime) -> str:
    return f"{format_date_to_store(value)} {value.hour:02d}{value.minute:02d}"


def format_date_to_print(value: date) -> str:
    return value.strftime(PRINT_DATE_FORMAT)


def format_datetime_to_print(value: datetime) -> str:
    return value.strftime(PRINT_DATETIME_FORMAT)
