"""
Read-model composition: denormalized, owner-scoped views joined at read time.

Nothing here is persisted or cached. Two views with deliberately different
join semantics:

- interview_list_view LEFT joins interview -> application -> company, so an
  interview whose application or company was deleted is still listed with
  empty company/position fields.
- company_summary_view INNER joins the per-company application groups to
  their company, so groups whose company was deleted are dropped.

Every join is also restricted to the owner, so a dangling id can never pull
in another user's record.
"""
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select, and_, case, func
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.models.application import Application, ApplicationStatus
from jobtracker.models.company import Company
from jobtracker.models.interview import Interview
from jobtracker.schemas.company import CompanySummary
from jobtracker.schemas.interview import InterviewListItem

logger = logging.getLogger(__name__)


def live_initial(company: Optional[Company]) -> str:
    """First code point of the company's current name, upper-cased, or ''."""
    if company is None or not company.name:
        return ""
    return company.name[0].upper()


def _interview_row(
    interview: Interview,
    application: Optional[Application],
    company: Optional[Company]
) -> InterviewListItem:
    return InterviewListItem(
        id=interview.id,
        interview_type=interview.interview_type,
        interview_date=interview.interview_date,
        time=interview.time,
        duration=interview.duration,
        format=interview.format,
        meeting_link=interview.meeting_link,
        interviewer_name=interview.interviewer_name,
        interviewer_email=interview.interviewer_email,
        notes=interview.notes,
        created_at=interview.created_at,
        updated_at=interview.updated_at,
        application_id=application.id if application else None,
        company_name=application.company_name if application else "",
        position_title=application.position_title if application else "",
        company_initial=live_initial(company),
        company_color=company.avatar_color if company else None,
    )


async def interview_list_view(db: AsyncSession, owner_id: UUID) -> List[InterviewListItem]:
    """
    All of the owner's interviews enriched from their application and company.
    
    company_name/position_title come from the joined application and
    company_initial/company_color from the joined company, all as they are
    now. The interview's own stored snapshot is not used here.
    
    Sorted by interview_date descending.
    """
    query = (
        select(Interview, Application, Company)
        .select_from(Interview)
        .outerjoin(
            Application,
            and_(
                Application.id == Interview.application_id,
                Application.owner_id == owner_id,
            ),
        )
        .outerjoin(
            Company,
            and_(
                Company.id == Application.company_id,
                Company.owner_id == owner_id,
            ),
        )
        .where(Interview.owner_id == owner_id)
        .order_by(Interview.interview_date.desc(), Interview.created_at.desc())
    )
    
    result = await db.execute(query)
    rows = [_interview_row(*row) for row in result.all()]
    
    logger.debug(f"Interview list view for {owner_id}: {len(rows)} rows")
    return rows


async def company_summary_view(
    db: AsyncSession,
    owner_id: UUID,
    search: Optional[str] = None
) -> List[CompanySummary]:
    """
    Per-company aggregates over the owner's applications.
    
    For each company_id: number of applications, number currently in
    "Interview Scheduled", and the latest application date. Groups are then
    joined to their company; those whose company is gone are dropped. The
    optional search filters on the joined company name, after grouping.
    
    Sorted by company name ascending.
    """
    interview_count = func.sum(
        case(
            (Application.current_status == ApplicationStatus.INTERVIEW_SCHEDULED.value, 1),
            else_=0,
        )
    )
    groups = (
        select(
            Application.company_id.label("company_id"),
            func.count(Application.id).label("applications"),
            interview_count.label("interviews"),
            func.max(Application.application_date).label("last_applied"),
        )
        .where(Application.owner_id == owner_id)
        .group_by(Application.company_id)
        .subquery()
    )
    
    query = (
        select(Company, groups.c.applications, groups.c.interviews, groups.c.last_applied)
        .join(groups, groups.c.company_id == Company.id)
        .where(Company.owner_id == owner_id)
    )
    if search:
        query = query.where(Company.name.icontains(search, autoescape=True))
    query = query.order_by(Company.name.asc())
    
    result = await db.execute(query)
    
    return [
        CompanySummary(
            id=company.id,
            name=company.name,
            avatar_color=company.avatar_color,
            initial=company.name[:1],
            applications=applications,
            interviews=int(interviews or 0),
            last_applied=last_applied,
        )
        for company, applications, interviews, last_applied in result.all()
    ]
