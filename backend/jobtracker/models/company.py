"""Company model: a prospective employer tracked by one user."""
from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
import uuid

from jobtracker.database import Base
from jobtracker.database_types import GUID


class Company(Base):
    __tablename__ = "companies"
    
    id = Column(GUID, primary_key=True, default=uuid.uuid4)
    owner_id = Column(GUID, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    avatar_color = Column(String, nullable=False)
    
    # First letter of the name at creation time; not recomputed on rename
    initial = Column(String(4), nullable=False, default="")
    
    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    
    __table_args__ = (
        # Names are unique per owner, not globally
        UniqueConstraint('owner_id', 'name', name='uq_company_owner_name'),
    )
