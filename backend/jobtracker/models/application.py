from datetime import datetime
from enum import Enum
from sqlalchemy import Column, String, DateTime, ForeignKey, Text, Index
import uuid

from jobtracker.database import Base
from jobtracker.database_types import GUID


class ApplicationStatus(str, Enum):
    """Current status of a job application. Any value may move to any other."""
    APPLIED = "Applied"
    INTERVIEW_SCHEDULED = "Interview Scheduled"
    REJECTED = "Rejected"
    OFFER_RECEIVED = "Offer Received"


class PriorityLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class JobType(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    INTERNSHIP = "Internship"


class WorkMode(str, Enum):
    REMOTE = "Remote"
    ON_SITE = "On-site"
    HYBRID = "Hybrid"


class YesNo(str, Enum):
    YES = "Yes"
    NO = "No"


class Application(Base):
    __tablename__ = "applications"
    
    id = Column(GUID, primary_key=True, default=uuid.uuid4)
    owner_id = Column(GUID, ForeignKey("users.id"), nullable=False, index=True)
    
    # Weak reference: no FK constraint, deleting the company leaves this dangling
    company_id = Column(GUID, nullable=False, index=True)
    
    # Snapshot of Company.name taken when company_id was last written
    company_name = Column(String, nullable=False)
    position_title = Column(String, nullable=False)
    department = Column(String, nullable=False, default="")
    location = Column(String, nullable=False, default="")
    
    current_status = Column(String, nullable=False, default=ApplicationStatus.APPLIED.value)
    application_date = Column(DateTime, nullable=True)
    priority_level = Column(String, nullable=False, default=PriorityLevel.MEDIUM.value)
    job_type = Column(String, nullable=False, default=JobType.FULL_TIME.value)
    work_mode = Column(String, nullable=False, default=WorkMode.REMOTE.value)
    
    # Compensation is free text ("120k", "$55/h")
    salary_min = Column(String, nullable=False, default="")
    salary_max = Column(String, nullable=False, default="")
    
    job_posting_url = Column(String, nullable=False, default="")
    recruiter_name = Column(String, nullable=False, default="")
    recruiter_email = Column(String, nullable=False, default="")
    hr_contact = Column(String, nullable=False, default="")
    application_source = Column(String, nullable=False, default="Company Website")
    cover_letter_submitted = Column(String, nullable=False, default=YesNo.NO.value)
    resume_version = Column(String, nullable=False, default="")
    notes = Column(Text, nullable=False, default="")
    follow_up_date = Column(DateTime, nullable=True)
    
    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    
    __table_args__ = (
        Index('idx_applications_owner_date', 'owner_id', 'application_date'),
    )
