from typing import Any, FrozenSet, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from appcontext.domain.enums import DEFAULT_MAPPING_TYPE


class Mapping(BaseModel):
    """Normalized, immutable definition of one named object.

    The generic fields are read by the application context itself. Any other
    field of the raw definition (``class``, ``factory``, ``value``, ...) is
    kept as an extra field for the mapping type strategy to read via ``get``.

    Attributes:
        name: Key of the mapping in the context.
        type: Name of the mapping type strategy that builds the object.
        arguments: Ordered argument keys handed to the resolver chain.
        cache: Whether the constructed instance is memoized.
        tags: Labels used for bulk retrieval.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = Field(..., description="Key of the mapping in the context.")
    type: str = Field(default=DEFAULT_MAPPING_TYPE, description="Mapping type strategy name.")
    arguments: Tuple[Any, ...] = Field(default=(), description="Ordered argument keys.")
    cache: bool = Field(default=False, description="Memoize the constructed instance.")
    tags: FrozenSet[str] = Field(default_factory=frozenset, description="Labels for bulk retrieval.")

    def get(self, field: str, default: Any = None) -> Any:
        """Return a generic or strategy-specific field value.

        Args:
            field: Field name, e.g. ``"class"``.
            default: Value returned when the field is absent.
        """
        if field in type(self).model_fields:
            return getattr(self, field)
        return (self.model_extra or {}).get(field, default)

    def has_field(self, field: str) -> bool:
        return field in type(self).model_fields or field in (self.model_extra or {})


class ValidationResult(BaseModel):
    """Outcome of a mapping type's structural validation for one mapping.

    Attributes:
        mapping_name: The validated mapping.
        errors: Human readable problems; empty when the mapping is valid.
    """

    mapping_name: str = Field(..., description="Name of the validated mapping.")
    errors: List[str] = Field(default_factory=list, description="Validation problems found.")

    def is_valid(self) -> bool:
        return not self.errors

    def __str__(self) -> str:
        if self.is_valid():
            return f"{self.mapping_name}: valid"
        return f"{self.mapping_name}: {', '.join(self.errors)}"
