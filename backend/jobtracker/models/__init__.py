"""Database models"""
from jobtracker.models.user import User
from jobtracker.models.company import Company
from jobtracker.models.application import Application, ApplicationStatus
from jobtracker.models.interview import Interview, InterviewType, InterviewFormat

__all__ = [
    "User",
    "Company",
    "Application",
    "ApplicationStatus",
    "Interview",
    "InterviewType",
    "InterviewFormat",
]
