"""Operation result types and status enums."""

from simple_i18n.infrastructure.operations.result import OperationResult
from simple_i18n.infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
