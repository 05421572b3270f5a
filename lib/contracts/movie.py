"""Movie record returned by the home service."""
from decimal import Decimal
from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer


def _as_number(value: Decimal) -> Union[int, float]:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


BoxOffice = Annotated[Decimal, PlainSerializer(_as_number, when_used="json")]


class Movie(BaseModel):
    """Plain value holder: title, director and box-office takings.

    Every field may be left empty and assigned later, so a record can be
    built either in one go or field by field.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    title: Optional[str] = None
    director: Optional[str] = None
    box_office: Optional[BoxOffice] = Field(default=None, alias="boxOffice")
