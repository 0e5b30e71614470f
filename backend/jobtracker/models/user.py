from datetime import datetime
from sqlalchemy import Column, String, DateTime
import uuid

from jobtracker.database import Base
from jobtracker.database_types import GUID


class User(Base):
    __tablename__ = "users"
    
    id = Column(GUID, primary_key=True, default=uuid.uuid4)
    email = Column(String, unique=True, nullable=False, index=True)
    username = Column(String(255), nullable=True)
    
    # One-way bcrypt hash; plaintext is never stored
    password_hash = Column(String, nullable=False)
    
    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
