"""Custom exceptions for the lifecycle record store."""

from typing import Any, Dict, Optional


class StoreError(Exception):
    """Base exception for all record store errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [self.message]
        if self.error_code:
            parts.append(f"(code: {self.error_code})")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ConfigurationError(StoreError):
    """Raised when a store or transition graph is misconfigured."""

    def __init__(self, message: str, config_key: Optional[str] = None) -> None:
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, "CONFIGURATION_ERROR", details)


class ValidationError(StoreError):
    """Raised when record input fails validation."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class RecordError(StoreError):
    """Raised when there's a record management issue."""

    def __init__(self, message: str, record_ref: Optional[Any] = None) -> None:
        details = {"record": record_ref} if record_ref is not None else {}
        super().__init__(message, "RECORD_ERROR", details)


class RecordNotFoundError(RecordError):
    """Raised when no record matches the requested id or label."""

    def __init__(self, record_ref: Any, lookup: str = "id") -> None:
        super().__init__(f"Record not found by {lookup}: {record_ref}", record_ref)
        self.details["lookup"] = lookup
        self.error_code = "RECORD_NOT_FOUND"


class DuplicateRecordError(RecordError):
    """Raised when a create would violate label uniqueness."""

    def __init__(self, label: str, existing_id: Any) -> None:
        super().__init__(f"Record already exists with label: {label}", label)
        self.details["existing_id"] = existing_id
        self.error_code = "DUPLICATE_RECORD"


class TransitionError(StoreError):
    """Raised when a status change cannot be applied."""

    def __init__(
        self,
        message: str,
        record_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = dict(details or {})
        if record_id is not None:
            details["record_id"] = record_id
        super().__init__(message, "TRANSITION_ERROR", details)


class InvalidTransitionError(TransitionError):
    """Raised when the graph does not allow moving from the current status to the target."""

    def __init__(self, record_id: Any, current_status: str, target_status: str) -> None:
        self.record_id = record_id
        self.current_status = current_status
        self.target_status = target_status
        self.already_in_target = current_status == target_status
        if self.already_in_target:
            message = f"Record {record_id} is already '{current_status}'"
        else:
            message = (
                f"Record {record_id} cannot move from '{current_status}' "
                f"to '{target_status}'"
            )
        super().__init__(
            message,
            record_id,
            {
                "current_status": current_status,
                "target_status": target_status,
                "already_in_target": self.already_in_target,
            },
        )
        self.error_code = "INVALID_TRANSITION"


class InvalidStatusError(InvalidTransitionError):
    """Raised when a status value is not part of the store's graph."""

    def __init__(
        self,
        status: Any,
        graph_name: str,
        record_id: Optional[Any] = None,
        current_status: Optional[str] = None,
    ) -> None:
        self.record_id = record_id
        self.current_status = current_status
        status = getattr(status, "value", status)
        self.target_status = str(status)
        self.already_in_target = False
        details: Dict[str, Any] = {"status": str(status), "graph": graph_name}
        if current_status is not None:
            details["current_status"] = current_status
        TransitionError.__init__(
            self,
            f"Unknown status '{status}' for graph '{graph_name}'",
            record_id,
            details,
        )
        self.error_code = "INVALID_STATUS"
