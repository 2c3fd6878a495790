# clientdesk/models/ticket.py
"""
Ticket models for the support system.
"""
from datetime import datetime
from typing import Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from ..core.constants import AuthorType, TicketPriority, TicketStatus
from ..utils.clock import as_utc, utcnow


class Ticket(SQLModel):
    """
    Represents a support ticket opened for a client.
    client_id is a soft reference to Client.
    """

    id: Optional[int] = Field(default=None)
    client_id: int
    subject: str
    description: str = Field(default="")
    status: TicketStatus = Field(default=TicketStatus.OPEN)
    priority: TicketPriority = Field(default=TicketPriority.MEDIUM)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("created_at", "updated_at")
    @classmethod
    def timestamps_in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class TicketMessage(SQLModel):
    """
    Individual messages within a ticket (chat history).
    Internal messages are notes between support staff, hidden from the portal.
    """

    id: Optional[int] = Field(default=None)
    ticket_id: int
    message: str
    author_type: AuthorType = Field(default=AuthorType.SUPPORT)
    is_internal: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("created_at")
    @classmethod
    def created_at_in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
