# clientdesk/api/catalog/models.py
from decimal import Decimal
from typing import Dict, Optional

from pydantic import BaseModel, Field

from ...core.constants import BillingCycle


class ServiceOfferingCreate(BaseModel):
    name: str
    description: str = ""
    category: str
    price: Decimal = Field(default=Decimal("0"), ge=0)
    billing_cycle: BillingCycle = BillingCycle.MONTHLY
    is_active: Optional[bool] = None
    custom_fields: Optional[Dict[str, str]] = None


class ServiceOfferingUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    billing_cycle: Optional[BillingCycle] = None
    is_active: Optional[bool] = None
    custom_fields: Optional[Dict[str, str]] = None
