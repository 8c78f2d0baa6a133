"""Repositories over the service's SQLAlchemy models.

Each repository wraps an open session; committing is left to
:meth:`Database.session`.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from freshstart_core.models import DocumentStatus

from .models import CaseInfoRecord, DocumentRecord, QuestionnaireResponseRecord, UserRecord


class UserRepository:
    def __init__(self, session: Session):
        self._session = session

    def get(self, user_id: str) -> Optional[UserRecord]:
        return self._session.get(UserRecord, user_id)

    def get_case_info(self, user_id: str) -> Optional[CaseInfoRecord]:
        stmt = select(CaseInfoRecord).where(CaseInfoRecord.user_id == user_id)
        return self._session.scalars(stmt).first()


class QuestionnaireRepository:
    def __init__(self, session: Session):
        self._session = session

    def get(self, response_id: str) -> Optional[QuestionnaireResponseRecord]:
        return self._session.get(QuestionnaireResponseRecord, response_id)


class DocumentRepository:
    """Create, update and list document records."""

    def __init__(self, session: Session):
        self._session = session

    def get(self, document_id: str) -> Optional[DocumentRecord]:
        return self._session.get(DocumentRecord, document_id)

    def create(
        self,
        *,
        user_id: str,
        type: str,
        file_name: str,
        content: str,
        mime_type: str,
        generated_at: datetime,
        questionnaire_response_id: Optional[str] = None,
        status: str = DocumentStatus.READY.value,
    ) -> DocumentRecord:
        """Insert a document and flush so its id is assigned."""
        record = DocumentRecord(
            user_id=user_id,
            type=type,
            file_name=file_name,
            content=content,
            mime_type=mime_type,
            status=status,
            generated_at=generated_at,
            updated_at=generated_at,
            questionnaire_response_id=questionnaire_response_id,
        )
        self._session.add(record)
        self._session.flush()
        return record

    def update_content(
        self,
        record: DocumentRecord,
        *,
        file_name: str,
        content: str,
        mime_type: str,
        generated_at: datetime,
    ) -> DocumentRecord:
        """Overwrite a document in place with regenerated content."""
        record.file_name = file_name
        record.content = content
        record.mime_type = mime_type
        record.status = DocumentStatus.READY.value
        record.generated_at = generated_at
        record.updated_at = generated_at
        self._session.flush()
        return record

    def list_ready_for_user(self, user_id: str) -> list[DocumentRecord]:
        """Ready documents for a user, newest first."""
        stmt = (
            select(DocumentRecord)
            .where(
                DocumentRecord.user_id == user_id,
                DocumentRecord.status == DocumentStatus.READY.value,
            )
            .order_by(DocumentRecord.generated_at.desc())
        )
        return list(self._session.scalars(stmt))

    def list_by_type(self, user_id: str, document_type: str) -> list[DocumentRecord]:
        """A user's documents of one type, newest first."""
        stmt = (
            select(DocumentRecord)
            .where(DocumentRecord.user_id == user_id, DocumentRecord.type == document_type)
            .order_by(DocumentRecord.generated_at.desc())
        )
        return list(self._session.scalars(stmt))
