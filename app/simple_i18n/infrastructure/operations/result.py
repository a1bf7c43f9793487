"""Operation result dataclass.

Returned by result-style translation calls (``try_translate``) so hosts can
branch on a status instead of catching exceptions.
"""

from dataclasses import dataclass
from typing import Any, Optional

from simple_i18n.infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Outcome of a translation call.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- localized error text, or a short success note
        data: Optional[Any] -- translated text on success, error details on failure
        error_code: Optional[str] -- error class name on failure
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS result carrying ``data``."""
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create a failed result.

        Args:
            status: PERMANENT_ERROR for invalid input or configuration,
                NOT_FOUND for missing keys and documents
            message: Localized error message
            error_code: Optional machine error code
            data: Optional details of the failure
        """
        return cls(status=status, message=message, error_code=error_code, data=data)
