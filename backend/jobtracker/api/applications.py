"""
Jobs API endpoints.
Handles job application CRUD.
"""
import logging
from typing import Optional, List
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.database import get_db
from jobtracker.api.auth import get_current_identity
from jobtracker.models.application import ApplicationStatus
from jobtracker.schemas.auth import TokenClaims
from jobtracker.schemas.application import (
    ApplicationCreate,
    ApplicationUpdate,
    ApplicationResponse,
)
from jobtracker.services import applications as applications_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=List[ApplicationResponse])
async def list_applications(
    search: Optional[str] = Query(None, description="Substring of company name or position title"),
    status: Optional[ApplicationStatus] = Query(None, description="Filter by current status"),
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    List your applications, newest application date first.
    """
    jobs = await applications_service.list_applications(
        db,
        current_user.id,
        search=search,
        status=status.value if status else None,
    )
    logger.info(f"Listed {len(jobs)} jobs (filters: search={search}, status={status})")
    return jobs


@router.post("/", response_model=ApplicationResponse, status_code=201)
async def create_application(
    job: ApplicationCreate,
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    Create a job application for one of your companies.
    
    company_name is copied from the company at this moment.
    
    Returns:
        201: Created
        404: Company not found
        422: Missing or malformed company_id
    """
    return await applications_service.create_application(db, current_user.id, job)


@router.get("/{job_id}", response_model=ApplicationResponse)
async def get_application(
    job_id: UUID,
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    return await applications_service.get_application(db, current_user.id, job_id)


@router.patch("/{job_id}", response_model=ApplicationResponse)
@router.put("/{job_id}", response_model=ApplicationResponse)
async def update_application(
    job_id: UUID,
    updates: ApplicationUpdate,
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    Partially update a job application (PATCH and PUT behave the same).
    
    Changing company_id re-copies the company name from the new company.
    
    Returns:
        200: Updated
        400: null sent for a required field
        404: Job or new company not found
        422: Malformed company_id
    """
    return await applications_service.update_application(db, current_user.id, job_id, updates)


@router.delete("/{job_id}")
async def delete_application(
    job_id: UUID,
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    await applications_service.delete_application(db, current_user.id, job_id)
    return {"message": "Job deleted"}
