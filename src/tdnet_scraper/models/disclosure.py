"""
Disclosure record model.

One Disclosure is one row of the TDnet daily listing table and one row of
the output CSV.
"""

from typing import Dict, Tuple
from pydantic import BaseModel, Field


class Disclosure(BaseModel):
    """
    A single disclosure as published on the TDnet listing for a date.

    Values are kept exactly as displayed (trimmed); the time is not parsed.
    Immutable (frozen) value object compared by field values.

    Attributes:
        time: Disclosure time as displayed (e.g., '15:00')
        code: Security code, at most 4 characters
        name: Company name
        title: Disclosure title
        place: Exchange the disclosure is filed with (e.g., '東')

    Example:
        >>> d = Disclosure(time='15:00', code='7203', name='トヨタ自動車',
        ...                title='決算短信', place='東名')
        >>> d.to_row()
        {'time': '15:00', 'code': '7203', 'name': 'トヨタ自動車', 'title': '決算短信', 'place': '東名'}
    """

    time: str = Field(
        ...,
        description="Disclosure time as displayed on the listing",
        examples=["15:00"]
    )

    code: str = Field(
        ...,
        max_length=4,
        description="Security code (first 4 characters of the code cell)",
        examples=["7203"]
    )

    name: str = Field(
        ...,
        description="Company name",
        examples=["トヨタ自動車"]
    )

    title: str = Field(
        ...,
        description="Disclosure title",
        examples=["2024年3月期 決算短信〔日本基準〕(連結)"]
    )

    place: str = Field(
        ...,
        description="Exchange the disclosure originates from",
        examples=["東名"]
    )

    model_config = {
        "frozen": True,
    }

    @classmethod
    def column_names(cls) -> Tuple[str, ...]:
        """Column order used for CSV output."""
        return tuple(cls.model_fields.keys())

    def to_row(self) -> Dict[str, str]:
        return self.model_dump()

    def __str__(self) -> str:
        return f"{self.time} {self.code} {self.name}: {self.title} ({self.place})"
