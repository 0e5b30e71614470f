"""
Interviews API endpoints.

The list endpoint returns the joined view (live company/position data);
the single-interview endpoint returns the stored record with its frozen
snapshot plus the application as it is now.
"""
import logging
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.database import get_db
from jobtracker.api.auth import get_current_identity
from jobtracker.schemas.auth import TokenClaims
from jobtracker.schemas.interview import (
    InterviewCreate,
    InterviewUpdate,
    InterviewResponse,
    InterviewDetail,
    InterviewListItem,
)
from jobtracker.services import interviews as interviews_service
from jobtracker.services.views import interview_list_view

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=List[InterviewListItem])
async def list_interviews(
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """All your interviews, latest date first, enriched from application and company."""
    return await interview_list_view(db, current_user.id)


@router.get("/{interview_id}", response_model=InterviewDetail)
async def get_interview(
    interview_id: UUID,
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    return await interviews_service.get_interview_detail(db, current_user.id, interview_id)


@router.post("/", response_model=InterviewResponse, status_code=201)
async def create_interview(
    interview: InterviewCreate,
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """
    Schedule an interview for one of your applications.
    
    Returns:
        201: Created
        404: Job application (or its company) not found
    """
    return await interviews_service.create_interview(db, current_user.id, interview)


@router.put("/{interview_id}", response_model=InterviewResponse)
@router.patch("/{interview_id}", response_model=InterviewResponse)
async def update_interview(
    interview_id: UUID,
    updates: InterviewUpdate,
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """Partial update of the interview's own fields."""
    return await interviews_service.update_interview(db, current_user.id, interview_id, updates)


@router.delete("/{interview_id}")
async def delete_interview(
    interview_id: UUID,
    current_user: TokenClaims = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    await interviews_service.delete_interview(db, current_user.id, interview_id)
    return {"message": "Interview deleted"}
