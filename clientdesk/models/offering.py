# clientdesk/models/offering.py
"""
ServiceOffering model: one entry of the service catalog.
"""
from decimal import Decimal
from typing import Dict, Optional

from sqlmodel import Field, SQLModel

from ..core.constants import BillingCycle


class ServiceOffering(SQLModel):
    """A sellable service (hosting plan, domain, WordPress maintenance...)."""

    id: Optional[int] = Field(default=None)
    name: str
    description: str = Field(default="")
    category: str  # ServiceCategory value, kept open for new categories
    price: Decimal = Field(default=Decimal("0"), ge=0)
    billing_cycle: BillingCycle = Field(default=BillingCycle.MONTHLY)
    is_active: bool = Field(default=True)
    custom_fields: Dict[str, str] = Field(default_factory=dict)
