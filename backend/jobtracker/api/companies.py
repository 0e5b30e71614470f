"""
Companies API endpoints.
Handles company CRUD and the per-company summary view.
"""
import logging
from typing import Optional, List
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.database import get_db
from jobtracker.api.auth import get_current_identity
from jobtracker.schemas.auth import TokenClaims
from jobtracker.schemas.application import ApplicationResponse
from jobtracker.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyResponse,
    CompanySummary,
)
from jobtracker.services import companies as companies_service
from jobtracker.services.views import company_summary_view

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=List[CompanyResponse])
async def list_companies(
    search: Optional[str] = Query(None, description="Case-insensitive name substring"),
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    return await companies_service.list_companies(db, current_user.id, search)


# Declared before /{company_id} so "summary" is not parsed as an id
@router.get("/summary", response_model=List[CompanySummary])
async def get_company_summary(
    search: Optional[str] = Query(None, description="Filter on resolved company name"),
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    Application and interview counts per company, with the latest
    application date. Companies that were deleted are left out.
    """
    return await company_summary_view(db, current_user.id, search)


@router.post("/", response_model=CompanyResponse, status_code=201)
async def create_company(
    company: CompanyCreate,
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    Create a company.
    
    Returns:
        201: Created
        409: You already have a company with this name
    """
    return await companies_service.create_company(db, current_user.id, company)


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(
    company_id: UUID,
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    return await companies_service.get_company(db, current_user.id, company_id)


@router.patch("/{company_id}", response_model=CompanyResponse)
async def update_company(
    company_id: UUID,
    updates: CompanyUpdate,
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """Partial update. Renaming keeps the original initial."""
    return await companies_service.update_company(db, current_user.id, company_id, updates)


@router.delete("/{company_id}")
async def delete_company(
    company_id: UUID,
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    Delete a company.
    
    Applications and interviews that reference it are not deleted.
    """
    await companies_service.delete_company(db, current_user.id, company_id)
    return {"message": "Company deleted"}


@router.get("/{company_id}/applications", response_model=List[ApplicationResponse])
async def list_company_applications(
    company_id: UUID,
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """All applications for one of your companies, newest first."""
    return await companies_service.list_company_applications(db, current_user.id, company_id)
