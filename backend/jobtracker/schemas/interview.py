"""Interview Pydantic schemas."""
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict

from jobtracker.models.interview import InterviewType, InterviewFormat
from jobtracker.schemas.common import UTCDateTime


class InterviewCreate(BaseModel):
    """Schema for scheduling an interview against an existing application."""
    application_id: UUID
    interview_type: InterviewType
    interview_date: UTCDateTime
    time: str
    duration: str
    format: InterviewFormat
    meeting_link: str = ""
    interviewer_name: str = ""
    interviewer_email: str = ""
    notes: str = ""
    
    model_config = ConfigDict(use_enum_values=True)


class InterviewUpdate(BaseModel):
    """
    Partial update of the interview's own fields.
    
    application_id and the company/position snapshot are fixed at creation.
    """
    interview_type: Optional[InterviewType] = None
    interview_date: Optional[UTCDateTime] = None
    time: Optional[str] = None
    duration: Optional[str] = None
    format: Optional[InterviewFormat] = None
    meeting_link: Optional[str] = None
    interviewer_name: Optional[str] = None
    interviewer_email: Optional[str] = None
    notes: Optional[str] = None
    
    model_config = ConfigDict(use_enum_values=True)


class InterviewResponse(BaseModel):
    """Interview as stored, including its frozen snapshot fields."""
    id: UUID
    owner_id: UUID
    application_id: UUID
    interview_type: InterviewType
    interview_date: datetime
    time: str
    duration: str
    format: InterviewFormat
    meeting_link: str
    interviewer_name: str
    interviewer_email: str
    notes: str
    company_name: str
    position_title: str
    company_initial: str
    company_color: str
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class ApplicationSnapshot(BaseModel):
    """Current company/position of the referenced application."""
    id: UUID
    company_name: str
    position_title: str
    
    model_config = ConfigDict(from_attributes=True)


class InterviewDetail(InterviewResponse):
    """Single interview with its application resolved, or None if it is gone."""
    application: Optional[ApplicationSnapshot] = None


class InterviewListItem(BaseModel):
    """
    Row of the interview list view.
    
    Company and position come from the live join, not from the
    stored snapshot.
    """
    id: UUID
    interview_type: InterviewType
    interview_date: datetime
    time: str
    duration: str
    format: InterviewFormat
    meeting_link: str
    interviewer_name: str
    interviewer_email: str
    notes: str
    created_at: datetime
    updated_at: datetime
    application_id: Optional[UUID] = None
    company_name: str = ""
    position_title: str = ""
    company_initial: str = ""
    company_color: Optional[str] = None
