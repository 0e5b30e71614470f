"""
Interview store.

An interview stores a snapshot of its application and company
(company_name, position_title, company_initial, company_color) taken at
creation. The snapshot is never refreshed; the list view in
services.views joins live data instead.
"""
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.models.application import Application
from jobtracker.models.company import Company
from jobtracker.models.interview import Interview
from jobtracker.schemas.interview import (
    InterviewCreate,
    InterviewUpdate,
    InterviewDetail,
    ApplicationSnapshot,
)
from jobtracker.services.ownership import scoped, get_owned, apply_updates

logger = logging.getLogger(__name__)


async def get_interview(db: AsyncSession, owner_id: UUID, interview_id: UUID) -> Interview:
    return await get_owned(db, Interview, owner_id, interview_id, "Interview")


async def get_interview_detail(
    db: AsyncSession,
    owner_id: UUID,
    interview_id: UUID
) -> InterviewDetail:
    """Stored interview plus its application, which may no longer exist."""
    interview = await get_interview(db, owner_id, interview_id)
    
    result = await db.execute(
        scoped(Application, owner_id).where(Application.id == interview.application_id)
    )
    application = result.scalar_one_or_none()
    
    detail = InterviewDetail.model_validate(interview)
    if application is not None:
        detail.application = ApplicationSnapshot.model_validate(application)
    return detail


async def create_interview(
    db: AsyncSession,
    owner_id: UUID,
    data: InterviewCreate
) -> Interview:
    """
    Schedule an interview, copying company and position details.
    
    Raises:
        NotFoundError: the application, or the company it points to,
            is not in the owner's scope
    """
    application = await get_owned(db, Application, owner_id, data.application_id, "Job application")
    company = await get_owned(db, Company, owner_id, application.company_id, "Company")
    
    interview = Interview(
        owner_id=owner_id,
        **data.model_dump(),
        company_name=application.company_name,
        position_title=application.position_title,
        company_initial=company.name[:1],
        company_color=company.avatar_color,
    )
    db.add(interview)
    await db.commit()
    await db.refresh(interview)
    
    logger.info(f"Created interview {interview.id} for job {application.id}")
    return interview


async def update_interview(
    db: AsyncSession,
    owner_id: UUID,
    interview_id: UUID,
    data: InterviewUpdate
) -> Interview:
    interview = await get_interview(db, owner_id, interview_id)
    updates = data.model_dump(exclude_unset=True)
    
    apply_updates(interview, updates)
    await db.commit()
    await db.refresh(interview)
    
    logger.info(f"Updated interview {interview.id} ({', '.join(sorted(updates))})")
    return interview


async def delete_interview(db: AsyncSession, owner_id: UUID, interview_id: UUID) -> None:
    interview = await get_interview(db, owner_id, interview_id)
    
    await db.delete(interview)
    await db.commit()
    
    logger.info(f"Deleted interview {interview_id}")
