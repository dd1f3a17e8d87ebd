import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from fastapi import status

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class NotFoundError(ServiceError):
    def __init__(self, entity: str) -> None:
        super().__init__(f"{entity} not found", status.HTTP_404_NOT_FOUND)


class InvalidDataError(ServiceError):
    def __init__(self, message: str = "Invalid data", details: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details)


@contextmanager
def unexpected_errors(operation: str) -> Iterator[None]:
    """Turn anything that is not a ServiceError into a logged 500 "Failed to <operation>"."""
    try:
        yield
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("step=%s status=failed", operation.replace(" ", "_"))
        raise ServiceError(f"Failed to {operation}") from exc


def error_body(exc: ServiceError) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": exc.message}
    if exc.details is not None:
        body["details"] = exc.details
    return body
