# clientdesk/models/client.py
"""
Client model for the managed-services customer base.
"""
from datetime import datetime
from typing import Dict, Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from ..core.constants import ClientStatus
from ..utils.clock import as_utc, utcnow


class Client(SQLModel):
    """
    Client model representing hosting/maintenance customers.

    Fields:
    - id: Assigned by the repository on create, immutable afterwards
    - company_name: Company name (required)
    - contact_name: Person to talk to
    - email: Contact email, unique across clients at creation time
    - phone / address: Contact data
    - status: active or inactive
    - custom_fields: Free-form extra attributes (string -> string)
    - notes: General notes
    - created_at / updated_at: UTC timestamps
    """

    id: Optional[int] = Field(default=None)
    company_name: str
    contact_name: str = Field(default="")
    email: str
    phone: str = Field(default="")
    address: str = Field(default="")
    status: ClientStatus = Field(default=ClientStatus.ACTIVE)
    custom_fields: Dict[str, str] = Field(default_factory=dict)
    notes: str = Field(default="")
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("created_at", "updated_at")
    @classmethod
    def timestamps_in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
