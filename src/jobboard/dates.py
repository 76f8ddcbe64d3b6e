"""Calendar-date helpers for timestamps exposed through the API."""


def to_iso_date(value: str) -> str:
    """Truncate a timestamp string to its leading ``yyyy-mm-dd`` part.

    No parsing and no timezone conversion: ``"2024-03-01T23:30:00-05:00"``
    becomes ``"2024-03-01"``.
    """
    return value[: len("yyyy-mm-dd")]
