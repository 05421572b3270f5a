"""Visitor details optionally posted to the home service."""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Visitor(BaseModel):
    """Name and age a client may send in a JSON body."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    age: Optional[int] = None
