# clientdesk/api/tickets/models.py
from typing import Optional

from pydantic import BaseModel

from ...core.constants import AuthorType, TicketPriority, TicketStatus


class TicketCreate(BaseModel):
    client_id: int
    subject: str
    description: str = ""
    priority: TicketPriority = TicketPriority.MEDIUM


class TicketUpdate(BaseModel):
    subject: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None


class TicketReply(BaseModel):
    message: str
    author_type: AuthorType = AuthorType.SUPPORT
    is_internal: bool = False
