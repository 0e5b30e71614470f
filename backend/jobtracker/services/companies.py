"""
Company store. All operations are confined to the caller's owner scope.
"""
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.errors import ConflictError
from jobtracker.models.application import Application
from jobtracker.models.company import Company
from jobtracker.schemas.company import CompanyCreate, CompanyUpdate
from jobtracker.services.applications import application_order
from jobtracker.services.ownership import scoped, get_owned, apply_updates

logger = logging.getLogger(__name__)


def company_initial(name: str) -> str:
    """First character of the name, upper-cased."""
    return name[:1].upper()


async def _commit_unique_name(db: AsyncSession) -> None:
    """Commit, turning the (owner_id, name) constraint violation into a conflict."""
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("Company with this name already exists.")


async def list_companies(
    db: AsyncSession,
    owner_id: UUID,
    search: Optional[str] = None
) -> List[Company]:
    query = scoped(Company, owner_id)
    if search:
        query = query.where(Company.name.icontains(search, autoescape=True))
    query = query.order_by(Company.created_at.asc())
    
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_company(db: AsyncSession, owner_id: UUID, company_id: UUID) -> Company:
    return await get_owned(db, Company, owner_id, company_id, "Company")


async def create_company(db: AsyncSession, owner_id: UUID, data: CompanyCreate) -> Company:
    """
    Create a company for owner_id.
    
    The initial is derived once here; renaming the company later keeps it.
    
    Raises:
        ConflictError: owner already has a company with this name
    """
    company = Company(
        owner_id=owner_id,
        name=data.name,
        avatar_color=data.avatar_color,
        initial=company_initial(data.name),
    )
    db.add(company)
    await _commit_unique_name(db)
    await db.refresh(company)
    
    logger.info(f"Created company {company.id}: {company.name}")
    return company


async def update_company(
    db: AsyncSession,
    owner_id: UUID,
    company_id: UUID,
    data: CompanyUpdate
) -> Company:
    company = await get_company(db, owner_id, company_id)
    
    apply_updates(company, data.model_dump(exclude_unset=True))
    await _commit_unique_name(db)
    await db.refresh(company)
    
    logger.info(f"Updated company {company.id}")
    return company


async def delete_company(db: AsyncSession, owner_id: UUID, company_id: UUID) -> None:
    """Delete a company. Its applications and interviews are left in place."""
    company = await get_company(db, owner_id, company_id)
    
    await db.delete(company)
    await db.commit()
    
    logger.info(f"Deleted company {company_id}")


async def list_company_applications(
    db: AsyncSession,
    owner_id: UUID,
    company_id: UUID
) -> List[Application]:
    company = await get_company(db, owner_id, company_id)
    
    result = await db.execute(
        scoped(Application, owner_id)
        .where(Application.company_id == company.id)
        .order_by(*application_order())
    )
    return list(result.scalars().all())
