"""Base model for all daxis Pydantic models.

This module provides a base model class that enforces consistent serialization
behavior across all daxis models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class DaxisBaseModel(BaseModel):
    """Base model class for all daxis Pydantic models.

    Unknown keys are rejected so typos in matrix files surface as validation
    errors instead of being silently ignored.
    """

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        use_enum_values=True,
        validate_assignment=True,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary with consistent serialization parameters.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")

    def to_dict_full(self) -> dict[str, Any]:
        """Convert model to dictionary including all fields (even unset ones)."""
        return self.model_dump(by_alias=True, exclude_unset=False, mode="json")
