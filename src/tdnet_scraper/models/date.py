"""
Date descriptor used to build listing URLs and output filenames.
"""

from datetime import date
from pydantic import BaseModel, Field


class FormattedDate(BaseModel):
    """
    Zero-padded year/month/day strings for one calendar date.

    Attributes:
        year: 4-digit year (e.g., '2024')
        month: 2-digit month (e.g., '01')
        day: 2-digit day (e.g., '05')

    Example:
        >>> from datetime import date
        >>> fd = FormattedDate.from_date(date(2024, 1, 5))
        >>> fd.compact
        '20240105'
        >>> fd.iso
        '2024-01-05'
    """

    year: str = Field(..., pattern=r'^\d{4}$', examples=["2024"])
    month: str = Field(..., pattern=r'^\d{2}$', examples=["01"])
    day: str = Field(..., pattern=r'^\d{2}$', examples=["05"])

    model_config = {
        "frozen": True,
    }

    @classmethod
    def from_date(cls, value: date) -> 'FormattedDate':
        """Build a descriptor from a date or datetime."""
        return cls(
            year=f"{value.year:04d}",
            month=f"{value.month:02d}",
            day=f"{value.day:02d}",
        )

    @property
    def compact(self) -> str:
        """YYYYMMDD form used in listing page names."""
        return f"{self.year}{self.month}{self.day}"

    @property
    def iso(self) -> str:
        """YYYY-MM-DD form used for output filenames."""
        return f"{self.year}-{self.month}-{self.day}"

    def __str__(self) -> str:
        return self.iso
