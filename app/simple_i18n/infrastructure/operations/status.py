"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of
translation calls for hosts that prefer results over exceptions.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        PERMANENT_ERROR: Invalid input or configuration; retrying will not help
        NOT_FOUND: Translation key or locale document not found
    """

    SUCCESS = "success"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
