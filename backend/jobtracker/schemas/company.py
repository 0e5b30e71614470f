"""Company-related Pydantic schemas."""
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field


class CompanyCreate(BaseModel):
    """Schema for creating a company."""
    name: str = Field(min_length=1)
    avatar_color: str


class CompanyUpdate(BaseModel):
    """Partial update; only supplied fields change."""
    name: Optional[str] = Field(None, min_length=1)
    avatar_color: Optional[str] = None


class CompanyResponse(BaseModel):
    id: UUID
    owner_id: UUID
    name: str
    avatar_color: str
    initial: str
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class CompanySummary(BaseModel):
    """One row of the aggregated per-company view."""
    id: UUID
    name: str
    avatar_color: Optional[str] = None
    initial: str
    applications: int
    interviews: int
    last_applied: Optional[datetime] = None
