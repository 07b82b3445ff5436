"""Input validation helpers."""

import copy
from typing import Any, Dict, Optional

from ..core.exceptions import ValidationError


def validate_label(label: Any) -> str:
    """Check that a record label is a string; the value is kept exactly as given."""
    if not isinstance(label, str):
        raise ValidationError("Label must be a string", "label")
    return label


def validate_metadata(metadata: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Validate record metadata and detach it from the caller; ``None`` stays ``None``."""
    if metadata is None:
        return None
    if not isinstance(metadata, dict):
        raise ValidationError("Metadata must be a dictionary", "metadata")
    for key in metadata:
        if not isinstance(key, str):
            raise ValidationError("Metadata keys must be strings", "metadata")
    return copy.deepcopy(metadata)
