"""Base model classes and generics for the lifecycle record store."""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..utils.date_utils import utcnow

# Type variables for generics
T = TypeVar('T')


class StoreBaseModel(BaseModel):
    """Base model with common configuration for all store models."""

    model_config = ConfigDict(
        # Keep enum objects in memory, serialize values only when needed
        use_enum_values=False,
        # Allow population by field name or alias
        populate_by_name=True,
        # Validate assignment after model creation
        validate_assignment=True,
        extra='forbid',
    )


class TimestampedModel(StoreBaseModel):
    """Base model for entities with a creation timestamp."""

    created_at: datetime = Field(
        default_factory=utcnow,
        description="When the entity was created"
    )


class OperationResult(StoreBaseModel, Generic[T]):
    """Generic result wrapper for operations."""

    success: bool = Field(description="Whether the operation succeeded")
    data: Optional[T] = Field(default=None, description="Operation result data")
    message: Optional[str] = Field(default=None, description="Success or error message")
    error_code: Optional[str] = Field(default=None, description="Error code if operation failed")

    @property
    def failed(self) -> bool:
        return not self.success


class StatsModel(StoreBaseModel):
    """Base model for statistics responses."""

    generated_at: datetime = Field(
        default_factory=utcnow,
        description="When these statistics were generated"
    )
