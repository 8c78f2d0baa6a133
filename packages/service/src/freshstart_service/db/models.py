"""
Database models for users, questionnaire responses and generated documents.

Tables:
- users: Account name and email used on generated documents
- case_info: Per-user case details such as the filing county
- questionnaire_responses: Raw questionnaire answers and completion status
- documents: Generated and uploaded documents with their content
"""

from datetime import datetime
from typing import Any, Dict
from uuid import uuid4

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _new_id() -> str:
    return str(uuid4())


class UserRecord(Base):
    """Application user."""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(200), nullable=True)
    email = Column(String(320), nullable=True)
    created_at = Column(DateTime, default=datetime.now, nullable=False)


class CaseInfoRecord(Base):
    """Case details collected outside the questionnaires."""
    __tablename__ = "case_info"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    county = Column(String(50), nullable=True)  # county id, e.g. "cook"
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)


class QuestionnaireResponseRecord(Base):
    """A user's answers to one questionnaire."""
    __tablename__ = "questionnaire_responses"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    questionnaire_type = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False, default="in_progress")  # "in_progress", "completed"
    responses = Column(JSON, nullable=False, default=dict)

    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)


class DocumentRecord(Base):
    """Generated document storage.

    ``content`` holds base64 for PDFs and raw text for plain-text documents.
    """
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String(50), nullable=False, index=True)
    file_name = Column(String(255), nullable=False)
    content = Column(Text, nullable=True)
    mime_type = Column(String(50), nullable=False, default="application/pdf")
    status = Column(String(20), nullable=False, default="ready")  # "ready", "failed"

    generated_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    questionnaire_response_id = Column(
        String(36),
        ForeignKey("questionnaire_responses.id", ondelete="SET NULL"),
        nullable=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses. Content is omitted."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "type": self.type,
            "file_name": self.file_name,
            "mime_type": self.mime_type,
            "status": self.status,
            "generated_at": self.generated_at.isoformat() if self.generated_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "questionnaire_response_id": self.questionnaire_response_id,
        }
