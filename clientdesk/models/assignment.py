# clientdesk/models/assignment.py
"""
ClientServiceAssignment model: a catalog service contracted by a client.
"""
from datetime import date
from typing import Optional

from sqlmodel import Field, SQLModel

from ..core.constants import AssignmentStatus


class ClientServiceAssignment(SQLModel):
    """
    Join between a Client and a ServiceOffering.

    client_id and service_id are soft references: nothing checks that the
    client or the offering exists, callers resolve them when reading.
    """

    id: Optional[int] = Field(default=None)
    client_id: int
    service_id: int
    start_date: date
    end_date: date
    status: AssignmentStatus = Field(default=AssignmentStatus.ACTIVE)
