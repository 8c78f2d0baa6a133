"""Shared fixtures for freshstart_service tests."""

import io
from datetime import datetime
from pathlib import Path

import pytest
from reportlab.pdfgen import canvas

from freshstart_service.config import DocumentConfig
from freshstart_service.db import Database, QuestionnaireResponseRecord, UserRecord
from freshstart_service.orchestrator import DocumentGenerationService

GENERATED_AT = datetime(2015, 6, 5, 15, 45)


def build_template(*field_names: str) -> bytes:
    """A one-page AcroForm PDF with the named text fields."""
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, invariant=1)
    for index, name in enumerate(field_names):
        c.acroForm.textfield(name=name, x=50, y=740 - index * 24, width=300, height=18)
    c.showPage()
    c.save()
    return buffer.getvalue()


@pytest.fixture
def database():
    """Fresh in-memory database with all tables created."""
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def user_id(database: Database) -> str:
    with database.session() as session:
        user = UserRecord(name="Jane Doe", email="jane@example.com")
        session.add(user)
        session.flush()
        return user.id


@pytest.fixture
def other_user_id(database: Database) -> str:
    with database.session() as session:
        user = UserRecord(name="Other Person", email="other@example.com")
        session.add(user)
        session.flush()
        return user.id


@pytest.fixture
def add_response(database: Database):
    """Store a questionnaire response and return its id."""

    def add(user_id: str, responses: dict, *, status: str = "completed", questionnaire_type: str = "petition") -> str:
        with database.session() as session:
            record = QuestionnaireResponseRecord(
                user_id=user_id,
                questionnaire_type=questionnaire_type,
                status=status,
                responses=responses,
            )
            session.add(record)
            session.flush()
            return record.id

    return add


@pytest.fixture
def petition_responses() -> dict:
    return {
        "petitioner-first-name": "Jane",
        "petitioner-last-name": "Doe",
        "petitioner-county": "cook",
        "spouse-first-name": "John",
        "spouse-last-name": "Doe",
        "marriage-date": "2010-06-12",
        "grounds-type": "irreconcilable",
        "has-children": "no",
    }


@pytest.fixture
def forms_dir(tmp_path: Path) -> Path:
    """An empty official forms directory."""
    path = tmp_path / "forms"
    path.mkdir()
    return path


@pytest.fixture
def document_config(forms_dir: Path) -> DocumentConfig:
    return DocumentConfig(forms_dir=forms_dir)


@pytest.fixture
def service(database: Database, document_config: DocumentConfig) -> DocumentGenerationService:
    return DocumentGenerationService(database, document_config, clock=lambda: GENERATED_AT)


@pytest.fixture
def generated_at() -> datetime:
    return GENERATED_AT


@pytest.fixture
def template_builder():
    """Builder for AcroForm templates, see :func:`build_template`."""
    return build_template
