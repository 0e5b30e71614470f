"""Field types shared by the request schemas."""
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator


def to_naive_utc(value: datetime) -> datetime:
    """Shift an offset-aware datetime to UTC and drop the offset; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


# Columns are naive UTC; an offset sent by the client must not be discarded unconverted
UTCDateTime = Annotated[datetime, AfterValidator(to_naive_utc)]
