"""Base model class for fastql models with serialization support."""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class FastqlBaseModel(BaseModel):
    """Base model for fastql models with built-in serialization.

    Provides common functionality for all fastql models including:
    - Serialization to dictionary via to_dict()
    - Consistent configuration
    """
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to a JSON-friendly dictionary.

        Enums are emitted as their values.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return self.model_dump(mode="json", by_alias=False, exclude_none=True)
