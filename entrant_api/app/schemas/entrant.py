"""
Pydantic models for entrant data.

An entrant is a person identified by a system assigned integer id.
Clients send ``EntrantCreate`` payloads and receive ``Entrant``
records.  On the wire the names use camelCase (``firstName``,
``lastName``); the Python field names are accepted on input as well.
"""

from typing import Optional

from pydantic import BaseModel, Field


class EntrantCreate(BaseModel):
    """Schema for creating an entrant.

    Both names are optional here on purpose: blank and missing names
    are rejected by the record store, which reports the offending
    field.  An ``id`` sent by the client is ignored.
    """

    first_name: Optional[str] = Field(None, alias="firstName", examples=["Ada"])
    last_name: Optional[str] = Field(None, alias="lastName", examples=["Lovelace"])

    model_config = {
        "populate_by_name": True,
    }


class Entrant(BaseModel):
    """Schema for a stored entrant.

    Instances are frozen; the store never changes a record after it
    has been created.
    """

    id: int = Field(..., gt=0, examples=[1])
    first_name: str = Field(..., alias="firstName", examples=["Ada"])
    last_name: str = Field(..., alias="lastName", examples=["Lovelace"])

    model_config = {
        "populate_by_name": True,
        "frozen": True,
    }
