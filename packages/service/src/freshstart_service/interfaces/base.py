"""Generation strategy interfaces for the document service.

A document is produced by trying an ordered list of strategies until one
succeeds: the official court form filler, the summary PDF renderer, and
finally the plain-text fallback. Each strategy reports its outcome as a
:class:`StrategyResult` instead of raising, so the fallback order is plain
data that can be inspected and tested.

Example Usage:
    ```python
    from freshstart_service.interfaces.base import GenerationStrategy, StrategyResult

    class ReceiptStrategy:
        '''A strategy that only handles receipts.'''

        name = "receipt"

        def generate(self, context: GenerationContext) -> StrategyResult[RenderedDocument]:
            if context.request.document_type != "receipt":
                return StrategyResult.skipped("not a receipt", strategy_name=self.name)
            return StrategyResult.success(render_receipt(context), strategy_name=self.name)

    # ReceiptStrategy is compatible with GenerationStrategy without inheriting from it
    ```
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, Optional, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from .types import GenerationContext, RenderedDocument


# =============================================================================
# TYPE VARIABLES
# =============================================================================

ResultT = TypeVar("ResultT")
"""Type variable for result data types."""


# =============================================================================
# ENUMERATIONS
# =============================================================================

class StrategyStatus(str, Enum):
    """Status codes for a single strategy attempt."""

    SUCCESS = "success"
    """Strategy produced a document."""

    ERROR = "error"
    """Strategy applied but failed; the next strategy is tried."""

    SKIPPED = "skipped"
    """Strategy does not apply to this request."""


# =============================================================================
# RESULT MODELS
# =============================================================================

class StrategyResult(BaseModel, Generic[ResultT]):
    """Standardized wrapper for a strategy attempt.

    Attributes:
        status: The attempt status (success, error, skipped)
        data: The produced document when status is SUCCESS
        error: Error or skip reason, None on success
        error_details: Additional error context
        strategy_name: Name of the strategy that produced this result
        completed_at: When the attempt finished
        warnings: Non-fatal issues encountered during the attempt
    """

    status: StrategyStatus = Field(
        default=StrategyStatus.SUCCESS,
        description="Outcome of the strategy attempt"
    )
    data: Optional[Any] = Field(
        default=None,
        description="The generated document"
    )
    error: Optional[str] = Field(
        default=None,
        description="Error message or skip reason"
    )
    error_details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context and details"
    )
    strategy_name: Optional[str] = Field(
        default=None,
        description="Name of the strategy that produced this result"
    )
    completed_at: datetime = Field(
        default_factory=datetime.now,
        description="Timestamp when the attempt completed"
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Non-fatal warnings from the attempt"
    )

    @property
    def is_success(self) -> bool:
        """Check if the strategy produced a document."""
        return self.status == StrategyStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if the strategy applied but failed."""
        return self.status == StrategyStatus.ERROR

    @property
    def is_skipped(self) -> bool:
        return self.status == StrategyStatus.SKIPPED

    @classmethod
    def success(
        cls,
        data: Any,
        *,
        strategy_name: Optional[str] = None,
        warnings: Optional[list[str]] = None,
    ) -> StrategyResult[Any]:
        """Create a successful result with the given document.

        Args:
            data: The generated document
            strategy_name: Name of the strategy
            warnings: Any warnings to include

        Returns:
            A StrategyResult with SUCCESS status
        """
        return cls(
            status=StrategyStatus.SUCCESS,
            data=data,
            strategy_name=strategy_name,
            warnings=warnings or [],
        )

    @classmethod
    def failure(
        cls,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        strategy_name: Optional[str] = None,
    ) -> StrategyResult[Any]:
        """Create an error result with the given message.

        Args:
            message: The error message
            details: Additional error context
            strategy_name: Name of the strategy

        Returns:
            A StrategyResult with ERROR status
        """
        return cls(
            status=StrategyStatus.ERROR,
            error=message,
            error_details=details,
            strategy_name=strategy_name,
        )

    @classmethod
    def skipped(cls, reason: str, *, strategy_name: Optional[str] = None) -> StrategyResult[Any]:
        """Create a result for a strategy that does not apply."""
        return cls(
            status=StrategyStatus.SKIPPED,
            error=reason,
            strategy_name=strategy_name,
        )


# =============================================================================
# STRATEGY PROTOCOL
# =============================================================================

@runtime_checkable
class GenerationStrategy(Protocol):
    """Protocol defining the contract for document generation strategies.

    Any class with a ``name`` attribute and a matching ``generate`` method
    is a strategy; no explicit inheritance required.

    Notes:
        - Implementations MUST NOT raise for rendering failures. They return
          a result with ERROR status so the next strategy can run.
        - Implementations return SKIPPED when the request is not theirs to
          handle (wrong mode, unsupported document type).
    """

    name: str

    def generate(self, context: GenerationContext) -> StrategyResult[RenderedDocument]:
        """Attempt to produce a document for ``context``.

        Args:
            context: The validated request, its responses and render metadata

        Returns:
            StrategyResult wrapping a RenderedDocument on success
        """
        ...
