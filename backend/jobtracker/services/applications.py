"""
Job application store.

company_name on an application is a copy of the company's name taken
when company_id is written (on create, or on an update that changes
company_id). Renaming the company does not touch it.
"""
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.models.application import Application
from jobtracker.models.company import Company
from jobtracker.schemas.application import ApplicationCreate, ApplicationUpdate
from jobtracker.services.ownership import scoped, get_owned, apply_updates

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = ("application_date", "follow_up_date")


def application_order():
    """Newest application date first, undated last, then newest record."""
    return (
        Application.application_date.desc().nulls_last(),
        Application.created_at.desc(),
    )


async def list_applications(
    db: AsyncSession,
    owner_id: UUID,
    search: Optional[str] = None,
    status: Optional[str] = None
) -> List[Application]:
    """
    List the owner's applications.
    
    Args:
        search: Case-insensitive substring matched against company name
            or position title
        status: Exact current_status to keep
    """
    query = scoped(Application, owner_id)
    
    if search:
        query = query.where(
            or_(
                Application.company_name.icontains(search, autoescape=True),
                Application.position_title.icontains(search, autoescape=True),
            )
        )
    if status:
        query = query.where(Application.current_status == status)
    
    result = await db.execute(query.order_by(*application_order()))
    return list(result.scalars().all())


async def get_application(db: AsyncSession, owner_id: UUID, application_id: UUID) -> Application:
    return await get_owned(db, Application, owner_id, application_id, "Job")


async def create_application(
    db: AsyncSession,
    owner_id: UUID,
    data: ApplicationCreate
) -> Application:
    """
    Raises:
        NotFoundError: company_id is not one of the owner's companies
    """
    company = await get_owned(db, Company, owner_id, data.company_id, "Company")
    
    application = Application(
        owner_id=owner_id,
        company_name=company.name,
        **data.model_dump(),
    )
    db.add(application)
    await db.commit()
    await db.refresh(application)
    
    logger.info(f"Created job {application.id}: {application.position_title} at {application.company_name}")
    return application


async def update_application(
    db: AsyncSession,
    owner_id: UUID,
    application_id: UUID,
    data: ApplicationUpdate
) -> Application:
    """
    Partially update an application.
    
    Raises:
        NotFoundError: application or new company not in the owner's scope
        ValidationFailure: null supplied for a required field
    """
    application = await get_application(db, owner_id, application_id)
    updates = data.model_dump(exclude_unset=True)
    
    if updates.get("company_id") is not None:
        company = await get_owned(db, Company, owner_id, updates["company_id"], "Company")
        updates["company_name"] = company.name
    
    apply_updates(application, updates, nullable=NULLABLE_FIELDS)
    await db.commit()
    await db.refresh(application)
    
    logger.info(f"Updated job {application.id} ({', '.join(sorted(updates))})")
    return application


async def delete_application(db: AsyncSession, owner_id: UUID, application_id: UUID) -> None:
    """Delete an application. Interviews referencing it are kept."""
    application = await get_application(db, owner_id, application_id)
    
    await db.delete(application)
    await db.commit()
    
    logger.info(f"Deleted job {application_id}")
