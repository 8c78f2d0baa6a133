"""Document generation orchestrator.

A generation request is validated against the stored questionnaire
response, then handed to an ordered list of strategies:

1. :class:`OfficialFormStrategy` fills an official court form (official mode only)
2. :class:`SummaryPdfStrategy` renders the summary PDF for known document types
3. :class:`PlainTextStrategy` formats every answer as plain text and cannot fail

The first strategy to succeed wins and its output is persisted as a ready
document, either as a new record or over an existing one being regenerated.

Example:
    service = DocumentGenerationService(Database(config.db), config.documents)
    outcome = service.generate(
        GenerationRequest(
            user_id=user.id,
            questionnaire_response_id=response.id,
            document_type="petition",
            generation_mode="official",
        )
    )
    print(outcome.message, outcome.document.file_name)
"""

import base64
import json
from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import structlog

from freshstart_core.exceptions import (
    DocumentRenderError,
    FreshStartError,
    NotFoundError,
    OwnershipError,
    ValidationError,
)
from freshstart_core.formatting import full_name
from freshstart_core.models import (
    DocumentKind,
    DocumentMetadata,
    DocumentStatus,
    GenerationMode,
    MimeType,
    PetitionData,
    resolve_document_kind,
)
from freshstart_core.official_forms import OfficialFormType, fill_official_form, is_form_type_supported
from freshstart_core.rendering import (
    build_text_document,
    render_financial_affidavit,
    render_parenting_plan,
    render_petition,
    render_settlement_agreement,
)
from freshstart_core.responses import QuestionnaireResponses, ResponseReader, has_children
from freshstart_core.transform import normalize_financial_responses

from .config import DocumentConfig
from .db import Database, DocumentRecord, DocumentRepository, QuestionnaireRepository, UserRepository
from .interfaces import (
    DocumentSummary,
    DocumentTypeInfo,
    GenerationContext,
    GenerationOutcome,
    GenerationRequest,
    GenerationStrategy,
    RenderedDocument,
    StrategyAttempt,
    StrategyResult,
)

logger = structlog.get_logger()

COMPLETED = "completed"
PRENUP_DOCUMENT_TYPE = "prenup"

OFFICIAL_FORM_MESSAGE = "Official Illinois court form generated successfully."
SUMMARY_PDF_MESSAGE = "PDF document generated successfully."
SUMMARY_FALLBACK_MESSAGE = (
    "PDF document generated successfully (summary fallback; official form unavailable)."
)
TEXT_MESSAGE = "Document generated successfully."
TEXT_FALLBACK_MESSAGE = "Document generated as text (PDF generation unavailable - fallback)."

PETITION_TYPES = {"petition", "petition-no-children", "petition-with-children"}

DOCUMENT_TO_OFFICIAL_FORM: dict[str, OfficialFormType] = {
    "petition": OfficialFormType.PETITION_NO_CHILDREN,
    "petition-no-children": OfficialFormType.PETITION_NO_CHILDREN,
    "petition-with-children": OfficialFormType.PETITION_WITH_CHILDREN,
    "financial-affidavit": OfficialFormType.FINANCIAL_AFFIDAVIT,
    "financial_affidavit": OfficialFormType.FINANCIAL_AFFIDAVIT,
    "financial_affidavit_short": OfficialFormType.FINANCIAL_AFFIDAVIT,
    "parenting-plan": OfficialFormType.PARENTING_PLAN,
    "parenting_plan": OfficialFormType.PARENTING_PLAN,
}

SUMMARY_FILE_PREFIXES = {
    DocumentKind.PETITION: "Petition_for_Dissolution",
    DocumentKind.FINANCIAL_AFFIDAVIT: "Financial_Affidavit",
    DocumentKind.PARENTING_PLAN: "Parenting_Plan",
    DocumentKind.MARITAL_SETTLEMENT: "Marital_Settlement_Agreement",
}

DOCUMENT_TYPES = (
    DocumentTypeInfo(
        type="petition",
        name="Petition for Dissolution of Marriage",
        supports_official_form=True,
        official_form_types=["petition-no-children", "petition-with-children"],
        description="Initial petition to file for divorce",
    ),
    DocumentTypeInfo(
        type="financial-affidavit",
        name="Financial Affidavit",
        supports_official_form=True,
        official_form_types=["financial-affidavit"],
        description="Disclosure of income, expenses, assets, and debts",
    ),
    DocumentTypeInfo(
        type="parenting-plan",
        name="Parenting Plan",
        supports_official_form=True,
        official_form_types=["parenting-plan"],
        description="Custody and parenting time schedule",
    ),
    DocumentTypeInfo(
        type="marital-settlement",
        name="Marital Settlement Agreement",
        supports_official_form=False,
        description="Agreement on property division and support",
    ),
)


def list_document_types() -> list[DocumentTypeInfo]:
    """Generatable document types and their official form support."""
    return [info.model_copy(deep=True) for info in DOCUMENT_TYPES]


def file_date(moment: datetime) -> str:
    return moment.date().isoformat()


def official_form_for(document_type: str, responses: QuestionnaireResponses) -> Optional[OfficialFormType]:
    """Official form for a document type; petitions pick a variant by children."""
    form_type = DOCUMENT_TO_OFFICIAL_FORM.get(document_type)
    if form_type is None:
        return None
    if document_type in PETITION_TYPES:
        if has_children(responses):
            return OfficialFormType.PETITION_WITH_CHILDREN
        return OfficialFormType.PETITION_NO_CHILDREN
    return form_type


def parent_names(responses: QuestionnaireResponses, user_name: Optional[str]) -> tuple[str, str]:
    reader = ResponseReader(responses)
    parent1 = full_name(reader.text("petitioner-first-name"), reader.text("petitioner-last-name"))
    parent2 = full_name(reader.text("spouse-first-name"), reader.text("spouse-last-name"))
    return parent1 or user_name or "Petitioner", parent2 or "Respondent"


def prenup_file_names(records: Sequence[DocumentRecord]) -> list[str]:
    """Display names for uploaded prenup documents.

    Uploads store JSON metadata as their content; ``originalFileName`` wins
    over the stored file name when present.
    """
    names = []
    for record in records:
        try:
            metadata = json.loads(record.content) if record.content else {}
        except (json.JSONDecodeError, TypeError):
            metadata = {}
        original = metadata.get("originalFileName") if isinstance(metadata, dict) else None
        names.append(original or record.file_name)
    return names


# =============================================================================
# STRATEGIES
# =============================================================================


class OfficialFormStrategy:
    """Fill the official Illinois form mapped to the document type."""

    name = "official"

    def __init__(self, forms_dir: Union[str, Path], *, flatten: bool = True):
        self.forms_dir = Path(forms_dir)
        self.flatten = flatten

    def generate(self, context: GenerationContext) -> StrategyResult[RenderedDocument]:
        request = context.request
        if request.generation_mode is not GenerationMode.OFFICIAL:
            return StrategyResult.skipped("summary mode requested", strategy_name=self.name)

        form_type = official_form_for(request.document_type, context.responses)
        if form_type is None or not is_form_type_supported(form_type.value):
            return StrategyResult.skipped(
                f"no official form for {request.document_type}", strategy_name=self.name
            )

        parent1, parent2 = parent_names(context.responses, context.user_name)
        flatten = self.flatten if request.flatten is None else request.flatten
        logger.info("official_form_attempted", form_type=form_type.value, flatten=flatten)
        try:
            pdf_bytes = fill_official_form(
                form_type,
                context.responses,
                forms_dir=self.forms_dir,
                flatten=flatten,
                parent1_name=parent1,
                parent2_name=parent2,
                prepared_on=context.generated_at.date(),
            )
        except Exception as e:
            logger.warning("official_form_failed", form_type=form_type.value, error=str(e))
            details = e.details if isinstance(e, FreshStartError) else {"exception": type(e).__name__}
            return StrategyResult.failure(str(e), details=details, strategy_name=self.name)

        label = form_type.value.replace("-", "_")
        return StrategyResult.success(
            RenderedDocument(
                file_name=f"Official_{label}_{file_date(context.generated_at)}.pdf",
                content=pdf_bytes,
                mime_type=MimeType.PDF,
                message=OFFICIAL_FORM_MESSAGE,
                is_official_form=True,
            ),
            strategy_name=self.name,
        )


SummaryRenderer = Callable[[GenerationContext, DocumentMetadata, bool], bytes]


def _render_petition(context: GenerationContext, metadata: DocumentMetadata, compress: bool) -> bytes:
    return render_petition(PetitionData.from_responses(context.responses), metadata, compress=compress)


def _render_affidavit(context: GenerationContext, metadata: DocumentMetadata, compress: bool) -> bytes:
    data = normalize_financial_responses(context.responses, context.request.user_id)
    return render_financial_affidavit(data, metadata, compress=compress)


def _render_parenting_plan(context: GenerationContext, metadata: DocumentMetadata, compress: bool) -> bytes:
    return render_parenting_plan(context.responses, metadata, compress=compress)


def _render_settlement(context: GenerationContext, metadata: DocumentMetadata, compress: bool) -> bytes:
    return render_settlement_agreement(context.responses, metadata, compress=compress)


SUMMARY_RENDERERS: dict[DocumentKind, SummaryRenderer] = {
    DocumentKind.PETITION: _render_petition,
    DocumentKind.FINANCIAL_AFFIDAVIT: _render_affidavit,
    DocumentKind.PARENTING_PLAN: _render_parenting_plan,
    DocumentKind.MARITAL_SETTLEMENT: _render_settlement,
}


class SummaryPdfStrategy:
    """Render the FreshStart summary PDF for a known document type."""

    name = "summary"

    def __init__(
        self,
        *,
        compress: bool = False,
        renderers: Optional[dict[DocumentKind, SummaryRenderer]] = None,
    ):
        self.compress = compress
        self.renderers = dict(SUMMARY_RENDERERS if renderers is None else renderers)

    def generate(self, context: GenerationContext) -> StrategyResult[RenderedDocument]:
        kind = resolve_document_kind(context.request.document_type)
        renderer = self.renderers.get(kind) if kind else None
        if renderer is None:
            return StrategyResult.skipped(
                f"no summary renderer for {context.request.document_type}", strategy_name=self.name
            )

        metadata = DocumentMetadata(
            user_name=context.user_name,
            user_email=context.user_email,
            generated_at=context.generated_at,
            uploaded_prenup_documents=context.uploaded_prenup_documents,
        )
        try:
            pdf_bytes = renderer(context, metadata, self.compress)
        except Exception as e:
            error = DocumentRenderError(
                f"Failed to render {kind.value}: {e}",
                document_type=context.request.document_type,
            )
            logger.warning("summary_render_failed", document_type=kind.value, error=str(e))
            return StrategyResult.failure(error.message, details=error.details, strategy_name=self.name)

        return StrategyResult.success(
            RenderedDocument(
                file_name=f"{SUMMARY_FILE_PREFIXES[kind]}_{file_date(context.generated_at)}.pdf",
                content=pdf_bytes,
                mime_type=MimeType.PDF,
                message=SUMMARY_FALLBACK_MESSAGE if context.is_fallback else SUMMARY_PDF_MESSAGE,
            ),
            strategy_name=self.name,
        )


class PlainTextStrategy:
    """Format every questionnaire answer as a plain-text document."""

    name = "text"

    def generate(self, context: GenerationContext) -> StrategyResult[RenderedDocument]:
        document_type = context.request.document_type
        text = build_text_document(document_type, context.responses, context.generated_at)
        return StrategyResult.success(
            RenderedDocument(
                file_name=f"{document_type}_{file_date(context.generated_at)}.txt",
                content=text.encode("utf-8"),
                mime_type=MimeType.TEXT,
                message=TEXT_FALLBACK_MESSAGE if context.is_fallback else TEXT_MESSAGE,
            ),
            strategy_name=self.name,
        )


def default_strategies(config: DocumentConfig) -> list[GenerationStrategy]:
    return [
        OfficialFormStrategy(config.forms_dir, flatten=config.flatten_official_forms),
        SummaryPdfStrategy(compress=config.page_compression),
        PlainTextStrategy(),
    ]


# =============================================================================
# SERVICE
# =============================================================================


class DocumentGenerationService:
    """Validate generation requests, run the strategy chain and persist the result.

    Args:
        database: Database holding responses and documents.
        config: Document settings; defaults are loaded from the environment.
        strategies: Ordered strategies to try. Defaults to official, summary, text.
        clock: Source of the generation timestamp.
    """

    def __init__(
        self,
        database: Database,
        config: Optional[DocumentConfig] = None,
        *,
        strategies: Optional[Sequence[GenerationStrategy]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.database = database
        self.config = config or DocumentConfig()
        self.strategies = list(strategies) if strategies is not None else default_strategies(self.config)
        self._clock = clock

    def generate(self, request: GenerationRequest) -> GenerationOutcome:
        """Generate (or regenerate) one document.

        Raises:
            ValidationError: Required fields are missing or the questionnaire
                is not completed.
            NotFoundError: The questionnaire response or document does not exist.
            OwnershipError: The response or document belongs to another user.
        """
        if not request.questionnaire_response_id or not request.document_type:
            raise ValidationError(
                "Missing required fields: questionnaire_response_id, document_type",
                field="questionnaire_response_id" if not request.questionnaire_response_id else "document_type",
                constraint="required",
            )

        with self.database.session() as session:
            response = QuestionnaireRepository(session).get(request.questionnaire_response_id)
            if response is None:
                raise NotFoundError(
                    "Questionnaire response not found",
                    resource="questionnaire_response",
                    identifier=request.questionnaire_response_id,
                )
            if response.user_id != request.user_id:
                raise OwnershipError(
                    resource="questionnaire_response",
                    identifier=response.id,
                    user_id=request.user_id,
                )
            if response.status != COMPLETED:
                raise ValidationError(
                    "Questionnaire must be completed before generating documents",
                    field="status",
                    value=response.status,
                    constraint="status == completed",
                )

            documents = DocumentRepository(session)
            existing = self._existing_document(documents, request)
            user = UserRepository(session).get(request.user_id)

            prenups: list[str] = []
            if resolve_document_kind(request.document_type) is DocumentKind.MARITAL_SETTLEMENT:
                prenups = prenup_file_names(documents.list_by_type(request.user_id, PRENUP_DOCUMENT_TYPE))

            context = GenerationContext(
                request=request,
                responses=dict(response.responses or {}),
                user_name=user.name if user else None,
                user_email=user.email if user else None,
                generated_at=self._clock(),
                uploaded_prenup_documents=prenups,
            )
            logger.info(
                "document_generation_started",
                document_type=request.document_type,
                mode=request.generation_mode.value,
                regenerate=existing is not None,
            )
            rendered, strategy_name, attempts = self.run_strategies(context)

            if rendered.mime_type is MimeType.PDF:
                content = base64.b64encode(rendered.content).decode("ascii")
            else:
                content = rendered.content.decode("utf-8")

            if existing is not None:
                record = documents.update_content(
                    existing,
                    file_name=rendered.file_name,
                    content=content,
                    mime_type=rendered.mime_type.value,
                    generated_at=context.generated_at,
                )
            else:
                record = documents.create(
                    user_id=request.user_id,
                    type=request.document_type,
                    file_name=rendered.file_name,
                    content=content,
                    mime_type=rendered.mime_type.value,
                    generated_at=context.generated_at,
                    questionnaire_response_id=response.id,
                )

            summary = DocumentSummary(
                id=record.id,
                file_name=record.file_name,
                type=record.type,
                status=DocumentStatus(record.status),
                generated_at=record.generated_at,
                mime_type=rendered.mime_type,
                is_official_form=rendered.is_official_form,
                strategy=strategy_name,
                fallback=context.is_fallback,
            )

        logger.info(
            "document_generated",
            document_id=summary.id,
            strategy=strategy_name,
            mime_type=summary.mime_type.value,
            fallback=summary.fallback,
            size=len(rendered.content),
        )
        return GenerationOutcome(
            document=summary,
            message=rendered.message,
            created=existing is None,
            attempts=attempts,
        )

    def run_strategies(
        self,
        context: GenerationContext,
    ) -> tuple[RenderedDocument, str, list[StrategyAttempt]]:
        """Try each strategy in order until one produces a document."""
        attempts: list[StrategyAttempt] = []
        for strategy in self.strategies:
            result = strategy.generate(context)
            attempts.append(
                StrategyAttempt(strategy=strategy.name, status=result.status, error=result.error)
            )
            if result.is_success:
                return result.data, strategy.name, attempts
            if result.is_error:
                context.failed_strategies.append(strategy.name)
                logger.warning(
                    "generation_strategy_failed",
                    strategy=strategy.name,
                    error=result.error,
                )

        raise DocumentRenderError(
            "No generation strategy produced a document",
            document_type=context.request.document_type,
            details={"attempts": [attempt.model_dump(mode="json") for attempt in attempts]},
            recoverable=False,
        )

    def _existing_document(
        self,
        documents: DocumentRepository,
        request: GenerationRequest,
    ) -> Optional[DocumentRecord]:
        if not request.document_id:
            return None
        existing = documents.get(request.document_id)
        if existing is None:
            raise NotFoundError("Document not found", resource="document", identifier=request.document_id)
        if existing.user_id != request.user_id:
            raise OwnershipError(resource="document", identifier=existing.id, user_id=request.user_id)
        return existing
