"""
Owner scoping for every store access.

Every query on an owned model goes through scoped(), so a record that
belongs to someone else is indistinguishable from one that does not exist.
"""
from datetime import datetime
from typing import Any, Dict, Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.errors import NotFoundError, ValidationFailure


def scoped(model, owner_id: UUID):
    """SELECT on model restricted to rows owned by owner_id."""
    return select(model).where(model.owner_id == owner_id)


async def get_owned(
    db: AsyncSession,
    model,
    owner_id: UUID,
    record_id: UUID,
    label: str
):
    """
    Fetch one owned record by id.
    
    Raises:
        NotFoundError: no such record in the owner's scope
    """
    result = await db.execute(
        scoped(model, owner_id).where(model.id == record_id)
    )
    record = result.scalar_one_or_none()
    
    if record is None:
        raise NotFoundError(f"{label} not found")
    
    return record


def apply_updates(record, updates: Dict[str, Any], nullable: Iterable[str] = ()) -> None:
    """
    Merge a partial update into record.
    
    Checks every field before touching any, so a rejected update leaves
    the record as it was.
    
    Raises:
        ValidationFailure: null supplied for a field that requires a value
    """
    nullable = set(nullable)
    for field, value in updates.items():
        if value is None and field not in nullable:
            raise ValidationFailure(f"{field} cannot be null")
    
    for field, value in updates.items():
        setattr(record, field, value)
    record.updated_at = datetime.utcnow()
