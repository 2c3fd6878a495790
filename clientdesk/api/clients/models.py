# clientdesk/api/clients/models.py
from typing import Dict, Optional

from pydantic import BaseModel

from ...core.constants import ClientStatus


# --- Pydantic models (Client) ---
class ClientCreate(BaseModel):
    # Presence of company_name/email is checked by the service so the
    # caller gets the same message as any other consumer.
    company_name: Optional[str] = None
    contact_name: str = ""
    email: Optional[str] = None
    phone: str = ""
    address: str = ""
    status: Optional[ClientStatus] = None
    custom_fields: Optional[Dict[str, str]] = None
    notes: Optional[str] = None


class ClientUpdate(BaseModel):
    company_name: Optional[str] = None
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    status: Optional[ClientStatus] = None
    custom_fields: Optional[Dict[str, str]] = None
    notes: Optional[str] = None
