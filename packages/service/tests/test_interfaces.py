"""Tests for strategy results and request types."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from freshstart_core.models import GenerationMode, MimeType
from freshstart_service.interfaces import (
    GenerationContext,
    GenerationRequest,
    GenerationStrategy,
    RenderedDocument,
    StrategyResult,
    StrategyStatus,
)
from freshstart_service.orchestrator import OfficialFormStrategy, PlainTextStrategy, SummaryPdfStrategy


class TestStrategyResult:
    """Test suite for StrategyResult constructors and status properties."""

    def test_success(self):
        document = RenderedDocument(
            file_name="a.txt", content=b"a", mime_type=MimeType.TEXT, message="ok"
        )
        result = StrategyResult.success(document, strategy_name="text", warnings=["short"])

        assert result.status == StrategyStatus.SUCCESS
        assert result.is_success is True
        assert result.is_error is False
        assert result.data is document
        assert result.warnings == ["short"]
        assert result.error is None

    def test_failure(self):
        """Failures carry the message and details but no data."""
        result = StrategyResult.failure(
            "Template not found", details={"form_type": "parenting-plan"}, strategy_name="official"
        )

        assert result.is_error is True
        assert result.is_success is False
        assert result.error == "Template not found"
        assert result.error_details == {"form_type": "parenting-plan"}
        assert result.data is None

    def test_skipped(self):
        """Skipped is distinct from an error."""
        result = StrategyResult.skipped("summary mode requested", strategy_name="official")

        assert result.is_skipped is True
        assert result.is_error is False
        assert result.error == "summary mode requested"

    def test_completed_at_is_set(self):
        assert isinstance(StrategyResult.skipped("n/a").completed_at, datetime)


class TestGenerationStrategyProtocol:
    """Test suite for structural strategy typing."""

    @pytest.mark.parametrize(
        "strategy",
        [OfficialFormStrategy("forms"), SummaryPdfStrategy(), PlainTextStrategy()],
    )
    def test_builtin_strategies_conform(self, strategy):
        assert isinstance(strategy, GenerationStrategy)

    def test_plain_object_does_not_conform(self):
        assert not isinstance(object(), GenerationStrategy)


class TestGenerationRequest:
    """Test suite for GenerationRequest normalization."""

    def test_defaults(self):
        request = GenerationRequest(user_id="user-1")

        assert request.questionnaire_response_id == ""
        assert request.document_type == ""
        assert request.document_id is None
        assert request.generation_mode is GenerationMode.SUMMARY
        assert request.flatten is None

    def test_text_fields_are_stripped(self):
        request = GenerationRequest(
            user_id="user-1",
            questionnaire_response_id="  resp-1 ",
            document_type=None,
            document_id="   ",
            generation_mode="official",
        )

        assert request.questionnaire_response_id == "resp-1"
        assert request.document_type == ""
        assert request.document_id is None
        assert request.generation_mode is GenerationMode.OFFICIAL

    def test_invalid_mode(self):
        with pytest.raises(ValidationError):
            GenerationRequest(user_id="user-1", generation_mode="handwritten")

    def test_context_fallback_flag(self):
        """A context becomes a fallback once any strategy has failed."""
        context = GenerationContext(
            request=GenerationRequest(user_id="user-1"),
            generated_at=datetime(2015, 6, 5),
        )
        assert context.is_fallback is False

        context.failed_strategies.append("official")
        assert context.is_fallback is True
