from datetime import datetime
from enum import Enum
from sqlalchemy import Column, String, DateTime, ForeignKey, Text
import uuid

from jobtracker.database import Base
from jobtracker.database_types import GUID


class InterviewType(str, Enum):
    HR_ROUND = "HR Round"
    TECHNICAL = "Technical"
    SYSTEM_DESIGN = "System Design"
    FINAL_ROUND = "Final Round"


class InterviewFormat(str, Enum):
    VIDEO_CALL = "Video Call"
    PHONE_CALL = "Phone Call"
    ON_SITE = "On-site"


class Interview(Base):
    __tablename__ = "interviews"
    
    id = Column(GUID, primary_key=True, default=uuid.uuid4)
    owner_id = Column(GUID, ForeignKey("users.id"), nullable=False, index=True)
    
    # Weak reference to applications.id, resolved lazily at read time
    application_id = Column(GUID, nullable=False, index=True)
    
    interview_type = Column(String, nullable=False)
    interview_date = Column(DateTime, nullable=False, index=True)
    time = Column(String, nullable=False)
    duration = Column(String, nullable=False)
    format = Column(String, nullable=False)
    meeting_link = Column(String, nullable=False, default="")
    interviewer_name = Column(String, nullable=False, default="")
    interviewer_email = Column(String, nullable=False, default="")
    notes = Column(Text, nullable=False, default="")
    
    # Write-time copies of the application and its company.
    # Captured once at creation and never refreshed.
    company_name = Column(String, nullable=False)
    position_title = Column(String, nullable=False)
    company_initial = Column(String(4), nullable=False)
    company_color = Column(String, nullable=False)
    
    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
