"""Person record model and its on-disk/wire field names."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class Record(BaseModel):
    """
    One person entry of the backing file.

    Attribute names are the in-memory names; the aliases are the fixed keys
    used both in the JSON file and in API responses.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: StrictInt
    image: StrictStr = Field(alias="jpg")
    last_name: StrictStr = Field(alias="name")
    first_name: StrictStr = Field(alias="vorname")
    address: StrictStr = Field(alias="adresse")
    card_number: StrictStr = Field(alias="pan_card_number")
    expiry_date: StrictStr = Field(alias="expiration_date")

    def to_wire(self) -> dict:
        """Serialize using the file/response keys, in declaration order."""
        return self.model_dump(by_alias=True)


def parse_record_id(raw: str | None) -> int | None:
    """
    Parse a path identifier: optional sign followed by ASCII digits.

    Returns None when the value is not an integer literal. int() alone would
    also accept surrounding whitespace, underscores and non-ASCII digits.
    """
    value = raw or ""
    digits = value[1:] if value[:1] in ("+", "-") else value
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    return int(value)
