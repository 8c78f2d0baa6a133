"""Custom exceptions for the FreshStart IL document pipeline.

This module provides a hierarchy of exception classes for consistent error
handling across normalization, rendering, official form filling, and
packaging. All exceptions inherit from FreshStartError, making it easy to
catch all application-specific errors.

Example:
    try:
        pdf_bytes = fill_official_form(form_type, responses, forms_dir=forms_dir)
    except OfficialFormError as e:
        if e.recoverable:
            # Fall back to the summary renderer
            pdf_bytes = render_petition(responses)
        else:
            raise
    except FreshStartError as e:
        logger.error("generation_failed", error=str(e))
"""

from typing import Any, Optional


class FreshStartError(Exception):
    """Base exception for all FreshStart application errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
        recoverable: Whether the error is potentially recoverable.

    Example:
        >>> raise FreshStartError("Something went wrong", details={"code": 500})
        FreshStartError: Something went wrong
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        """Initialize FreshStartError.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context about the error.
            recoverable: Whether a fallback path may still produce a result.
                Defaults to False.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message

    def __repr__(self) -> str:
        """Return detailed representation of the error."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"recoverable={self.recoverable!r})"
        )


class ValidationError(FreshStartError):
    """Error raised when a generation request fails precondition checks.

    Raised for missing required request fields or a questionnaire that is
    not yet completed. Validation errors are surfaced to the caller and no
    generation is attempted.

    Attributes:
        field: The field that failed validation.
        value: The invalid value (if safe to include).
        constraint: Description of the violated constraint.

    Example:
        >>> raise ValidationError(
        ...     "Questionnaire must be completed before generating documents",
        ...     field="status",
        ...     value="in_progress",
        ...     constraint="status == completed",
        ... )
        ValidationError: Questionnaire must be completed before generating documents
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Any = None,
        constraint: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message, details=details, recoverable=recoverable)
        self.field = field
        self.value = value
        self.constraint = constraint

        if field:
            self.details["field"] = field
        if value is not None:
            self.details["value"] = str(value)
        if constraint:
            self.details["constraint"] = constraint


class NotFoundError(FreshStartError):
    """Error raised when a referenced record does not exist.

    Attributes:
        resource: Kind of record that was looked up.
        identifier: The identifier that was not found.
    """

    def __init__(
        self,
        message: str,
        *,
        resource: Optional[str] = None,
        identifier: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details=details, recoverable=False)
        self.resource = resource
        self.identifier = identifier

        if resource:
            self.details["resource"] = resource
        if identifier:
            self.details["identifier"] = identifier


class OwnershipError(FreshStartError):
    """Error raised when a user touches a record owned by someone else.

    Attributes:
        resource: Kind of record that was accessed.
        identifier: Identifier of the record.
        user_id: The requesting user.

    Example:
        >>> raise OwnershipError(
        ...     "Forbidden",
        ...     resource="document",
        ...     identifier="doc-1",
        ...     user_id="user-2",
        ... )
        OwnershipError: Forbidden
    """

    def __init__(
        self,
        message: str = "Forbidden",
        *,
        resource: Optional[str] = None,
        identifier: Optional[str] = None,
        user_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details=details, recoverable=False)
        self.resource = resource
        self.identifier = identifier
        self.user_id = user_id

        if resource:
            self.details["resource"] = resource
        if identifier:
            self.details["identifier"] = identifier
        if user_id:
            self.details["user_id"] = user_id


class DocumentRenderError(FreshStartError):
    """Error raised when a summary PDF renderer fails.

    Recoverable by default: the orchestrator falls back to a plain-text
    document when a renderer raises.

    Attributes:
        document_type: The document type being rendered.
    """

    def __init__(
        self,
        message: str,
        *,
        document_type: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(message, details=details, recoverable=recoverable)
        self.document_type = document_type

        if document_type:
            self.details["document_type"] = document_type


class OfficialFormError(FreshStartError):
    """Error raised when an official court form cannot be filled.

    Covers unsupported form types, missing templates, and missing required
    values. Recoverable by default since the summary renderer can stand in.

    Attributes:
        form_type: The official form type requested.
        template_path: Path of the template that was used (if any).

    Example:
        >>> raise OfficialFormError(
        ...     "Template not found",
        ...     form_type="petition-no-children",
        ...     template_path="forms/petition-dissolution-no-children.pdf",
        ... )
        OfficialFormError: Template not found
    """

    def __init__(
        self,
        message: str,
        *,
        form_type: Optional[str] = None,
        template_path: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(message, details=details, recoverable=recoverable)
        self.form_type = form_type
        self.template_path = template_path

        if form_type:
            self.details["form_type"] = form_type
        if template_path:
            self.details["template_path"] = template_path


class PackagingError(FreshStartError):
    """Error raised when a document package cannot be built.

    Attributes:
        user_id: The user whose documents were being packaged.
    """

    def __init__(
        self,
        message: str,
        *,
        user_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details=details, recoverable=False)
        self.user_id = user_id

        if user_id:
            self.details["user_id"] = user_id


class ConfigurationError(FreshStartError):
    """Error raised when configuration is invalid or missing.

    Attributes:
        config_key: The configuration key that is invalid.
        expected: Description of expected value/format.
        actual: The actual value found (if safe to include).

    Example:
        >>> raise ConfigurationError(
        ...     "Official forms directory does not exist",
        ...     config_key="FRESHSTART_DOCUMENTS_FORMS_DIR",
        ...     expected="existing directory",
        ... )
        ConfigurationError: Official forms directory does not exist
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details=details, recoverable=False)
        self.config_key = config_key
        self.expected = expected
        self.actual = actual

        if config_key:
            self.details["config_key"] = config_key
        if expected:
            self.details["expected"] = expected
        if actual:
            self.details["actual"] = actual


__all__ = [
    "FreshStartError",
    "ValidationError",
    "NotFoundError",
    "OwnershipError",
    "DocumentRenderError",
    "OfficialFormError",
    "PackagingError",
    "ConfigurationError",
]
