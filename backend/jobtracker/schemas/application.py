"""Job application Pydantic schemas."""
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field

from jobtracker.models.application import (
    ApplicationStatus,
    PriorityLevel,
    JobType,
    WorkMode,
    YesNo,
)
from jobtracker.schemas.common import UTCDateTime


class ApplicationCreate(BaseModel):
    """
    Schema for creating a job application.
    
    company_name is not accepted: it is copied from the referenced company.
    """
    company_id: UUID
    position_title: str = Field(min_length=1)
    department: str = ""
    location: str = ""
    current_status: ApplicationStatus = ApplicationStatus.APPLIED
    application_date: Optional[UTCDateTime] = None
    priority_level: PriorityLevel = PriorityLevel.MEDIUM
    job_type: JobType = JobType.FULL_TIME
    work_mode: WorkMode = WorkMode.REMOTE
    salary_min: str = ""
    salary_max: str = ""
    job_posting_url: str = ""
    recruiter_name: str = ""
    recruiter_email: str = ""
    hr_contact: str = ""
    application_source: str = "Company Website"
    cover_letter_submitted: YesNo = YesNo.NO
    resume_version: str = ""
    notes: str = ""
    follow_up_date: Optional[UTCDateTime] = None
    
    model_config = ConfigDict(use_enum_values=True)


class ApplicationUpdate(BaseModel):
    """Partial update; fields left out of the payload are untouched."""
    company_id: Optional[UUID] = None
    position_title: Optional[str] = Field(None, min_length=1)
    department: Optional[str] = None
    location: Optional[str] = None
    current_status: Optional[ApplicationStatus] = None
    application_date: Optional[UTCDateTime] = None
    priority_level: Optional[PriorityLevel] = None
    job_type: Optional[JobType] = None
    work_mode: Optional[WorkMode] = None
    salary_min: Optional[str] = None
    salary_max: Optional[str] = None
    job_posting_url: Optional[str] = None
    recruiter_name: Optional[str] = None
    recruiter_email: Optional[str] = None
    hr_contact: Optional[str] = None
    application_source: Optional[str] = None
    cover_letter_submitted: Optional[YesNo] = None
    resume_version: Optional[str] = None
    notes: Optional[str] = None
    follow_up_date: Optional[UTCDateTime] = None
    
    model_config = ConfigDict(use_enum_values=True)


class ApplicationResponse(BaseModel):
    id: UUID
    owner_id: UUID
    company_id: UUID
    company_name: str
    position_title: str
    department: str
    location: str
    current_status: ApplicationStatus
    application_date: Optional[datetime] = None
    priority_level: PriorityLevel
    job_type: JobType
    work_mode: WorkMode
    salary_min: str
    salary_max: str
    job_posting_url: str
    recruiter_name: str
    recruiter_email: str
    hr_contact: str
    application_source: str
    cover_letter_submitted: YesNo
    resume_version: str
    notes: str
    follow_up_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)
