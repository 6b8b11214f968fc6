from dataclasses import dataclass
from datetime import datetime
from typing import Union


@dataclass(frozen=True)
class Text:
    """A date as it was stored in text form (expected ISO-8601)."""
    value: str


@dataclass(frozen=True)
class Instant:
    """A date already held as a native timestamp."""
    value: datetime


DateValue = Union[Text, Instant]
