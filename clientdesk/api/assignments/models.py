# clientdesk/api/assignments/models.py
from datetime import date
from typing import Optional

from pydantic import BaseModel

from ...core.constants import AssignmentStatus


class AssignmentCreate(BaseModel):
    client_id: int
    service_id: int
    start_date: date
    end_date: date
    status: Optional[AssignmentStatus] = None


class AssignmentUpdate(BaseModel):
    client_id: Optional[int] = None
    service_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[AssignmentStatus] = None
