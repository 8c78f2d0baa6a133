"""Persistence for users, questionnaire responses and documents."""

from .connection import Database
from .models import Base, CaseInfoRecord, DocumentRecord, QuestionnaireResponseRecord, UserRecord
from .repository import DocumentRepository, QuestionnaireRepository, UserRepository

__all__ = [
    "Base",
    "CaseInfoRecord",
    "Database",
    "DocumentRecord",
    "DocumentRepository",
    "QuestionnaireRepository",
    "QuestionnaireResponseRecord",
    "UserRecord",
    "UserRepository",
]
