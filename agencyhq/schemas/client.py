from pydantic import BaseModel
from typing import Literal, Optional
from datetime import datetime

ClientStatus = Literal["active", "inactive"]
BrandVoice = Literal["", "formal", "informal", "divertido", "inspirador", "técnico", "amigável"]


class ClientProfile(BaseModel):
    """Fields a client may edit about themselves."""
    company_objective: Optional[str] = None
    products_services: Optional[str] = None
    target_audience: Optional[str] = None
    brand_voice: Optional[BrandVoice] = None
    brand_voice_custom: Optional[str] = None
    logo_url: Optional[str] = None


class ClientCreate(ClientProfile):
    company_name: str
    user_email: Optional[str] = None
    status: ClientStatus = "active"


class ClientUpdate(ClientProfile):
    company_name: Optional[str] = None
    user_email: Optional[str] = None
    status: Optional[ClientStatus] = None


class ClientResponse(ClientProfile):
    id: int
    company_name: str
    user_email: Optional[str] = None
    status: str
    created_date: datetime

    class Config:
        from_attributes = True


class ClientListItem(ClientResponse):
    posts_count: int = 0
