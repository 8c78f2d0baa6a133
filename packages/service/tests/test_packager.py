"""Tests for PackageService."""

import base64
import io
import zipfile
from datetime import datetime

import pytest

from freshstart_core.exceptions import PackagingError
from freshstart_core.packaging import CHECKLIST_NAME, COVER_SHEET_NAME, INSTRUCTIONS_NAME
from freshstart_service.db import CaseInfoRecord, Database, DocumentRepository, UserRecord
from freshstart_service.packager import PackageService

PACKAGED_AT = datetime(2015, 6, 6, 10, 0)


@pytest.fixture
def packager(database: Database) -> PackageService:
    return PackageService(database, clock=lambda: PACKAGED_AT)


@pytest.fixture
def add_document(database: Database):
    """Store a document record for a user."""

    def add(user_id: str, file_name: str, content: str, **kwargs) -> str:
        fields = {
            "type": "petition",
            "mime_type": "application/pdf",
            "generated_at": datetime(2015, 6, 5, 15, 45),
        }
        fields.update(kwargs)
        with database.session() as session:
            return DocumentRepository(session).create(
                user_id=user_id, file_name=file_name, content=content, **fields
            ).id

    return add


def open_archive(content: bytes) -> zipfile.ZipFile:
    return zipfile.ZipFile(io.BytesIO(content))


class TestPackageService:
    """Test suite for packaging stored documents."""

    def test_no_documents(self, packager, user_id):
        with pytest.raises(PackagingError, match="No documents found") as exc_info:
            packager.package_all(user_id)
        assert exc_info.value.details == {"user_id": user_id}

    def test_failed_documents_are_not_packaged(self, packager, user_id, add_document):
        """Only ready documents count toward a package."""
        add_document(user_id, "broken.pdf", "", status="failed")

        with pytest.raises(PackagingError):
            packager.package_all(user_id)

    def test_package_contents(self, packager, database, user_id, add_document):
        pdf = base64.b64encode(b"%PDF-1.4 petition").decode("ascii")
        add_document(user_id, "Petition_for_Dissolution_2015-06-05.pdf", pdf)
        add_document(
            user_id,
            "custom_2015-06-05.txt",
            "plain answers",
            type="custom",
            mime_type="text/plain",
        )
        with database.session() as session:
            session.add(CaseInfoRecord(user_id=user_id, county="cook"))

        package = packager.package_all(user_id)

        assert package.file_name == "FreshStart_IL_Documents_2015-06-06.zip"
        archive = open_archive(package.content)
        assert set(archive.namelist()) == {
            "documents/Petition_for_Dissolution_2015-06-05.pdf",
            "documents/custom_2015-06-05.txt",
            COVER_SHEET_NAME,
            INSTRUCTIONS_NAME,
            CHECKLIST_NAME,
        }
        assert archive.read("documents/Petition_for_Dissolution_2015-06-05.pdf") == b"%PDF-1.4 petition"
        assert archive.read("documents/custom_2015-06-05.txt") == b"plain answers"

        cover = archive.read(COVER_SHEET_NAME).decode("utf-8")
        assert "Prepared for: Jane Doe" in cover
        assert "Email: jane@example.com" in cover
        assert "Filing County: Cook County" in cover

        checklist = archive.read(CHECKLIST_NAME).decode("utf-8")
        assert "[ ] Petition for Dissolution of Marriage" in checklist

    def test_entries_are_stamped_with_package_time(self, packager, user_id, add_document):
        add_document(user_id, "notes.txt", "text", type="custom", mime_type="text/plain")

        archive = open_archive(packager.package_all(user_id).content)

        assert {info.date_time for info in archive.infolist()} == {(2015, 6, 6, 10, 0, 0)}

    def test_other_users_documents_excluded(self, packager, user_id, other_user_id, add_document):
        add_document(user_id, "mine.txt", "mine", type="custom", mime_type="text/plain")
        add_document(other_user_id, "theirs.txt", "theirs", type="custom", mime_type="text/plain")

        package = packager.package_all(user_id)

        assert package.included == ["mine.txt"]

    def test_user_without_name(self, database, packager, add_document):
        """The cover sheet falls back to a generic name."""
        with database.session() as session:
            user = UserRecord(email=None)
            session.add(user)
            session.flush()
            anonymous_id = user.id
        add_document(anonymous_id, "notes.txt", "text", type="custom", mime_type="text/plain")

        archive = open_archive(packager.package_all(anonymous_id).content)

        cover = archive.read(COVER_SHEET_NAME).decode("utf-8")
        assert "Prepared for: User" in cover
        assert "Filing County" not in cover

    def test_undecodable_pdf_is_skipped(self, packager, user_id, add_document):
        """A corrupt PDF record is reported as skipped, not packaged."""
        add_document(user_id, "good.txt", "ok", type="custom", mime_type="text/plain")
        add_document(user_id, "bad.pdf", "***not base64***")

        package = packager.package_all(user_id)

        assert package.included == ["good.txt"]
        assert package.skipped == ["bad.pdf"]
