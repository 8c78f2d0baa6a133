"""Build a user's downloadable document package from stored records."""

from collections.abc import Callable
from datetime import datetime

import structlog

from freshstart_core.exceptions import PackagingError
from freshstart_core.packaging import NO_DOCUMENTS_MESSAGE, DocumentPackage, PackageDocument, build_package

from .db import Database, DocumentRepository, UserRepository

logger = structlog.get_logger()


class PackageService:
    """Bundle every ready document a user owns into one ZIP archive."""

    def __init__(self, database: Database, *, clock: Callable[[], datetime] = datetime.now):
        self.database = database
        self._clock = clock

    def package_all(self, user_id: str) -> DocumentPackage:
        """Build the package for ``user_id``.

        Raises:
            PackagingError: If the user has no ready documents.
        """
        with self.database.session() as session:
            records = DocumentRepository(session).list_ready_for_user(user_id)
            if not records:
                raise PackagingError(NO_DOCUMENTS_MESSAGE, user_id=user_id)

            users = UserRepository(session)
            user = users.get(user_id)
            case_info = users.get_case_info(user_id)
            documents = [
                PackageDocument(
                    file_name=record.file_name,
                    type=record.type,
                    content=record.content,
                    mime_type=record.mime_type,
                    generated_at=record.generated_at,
                )
                for record in records
            ]

        logger.info("document_package_requested", user_id=user_id, documents=len(documents))
        return build_package(
            documents,
            user_name=(user.name if user else None) or "User",
            user_email=(user.email if user else None) or "",
            county=case_info.county if case_info else None,
            created_at=self._clock(),
        )
