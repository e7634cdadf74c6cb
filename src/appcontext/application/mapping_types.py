"""Application layer - Bundled mapping type strategies."""

import logging
from abc import abstractmethod
from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from appcontext.domain import (
    IMappingType,
    Mapping,
    MappingDefinitionError,
    MappingTypeName,
    ResolveFunction,
    ValidationResult,
)

logger = logging.getLogger(__name__)

_OPTIONAL_FIELDS = ("arguments", "cache", "tags")


class BaseMappingType(IMappingType):
    """Shared preprocessing, validation and argument handling for strategies.

    Subclasses set ``name`` and implement ``_check_fields`` and ``_build``.
    Arguments are resolved in declaration order before ``_build`` is called.
    """

    name: str = ""

    def preprocess(self, raw_mapping: Dict[str, Any]) -> Mapping:
        """Coerce the generic fields and freeze the mapping.

        ``None`` values for ``arguments``, ``cache`` and ``tags`` fall back to
        their defaults, and a single string tag is treated as one tag.

        Raises:
            MappingDefinitionError: If a generic field has the wrong shape.
        """
        fields = {key: value for key, value in raw_mapping.items() if not (key in _OPTIONAL_FIELDS and value is None)}
        if isinstance(fields.get("tags"), str):
            fields["tags"] = [fields["tags"]]

        try:
            return Mapping(**fields)
        except PydanticValidationError as e:
            raise MappingDefinitionError(str(raw_mapping.get("name")), str(e)) from e

    def validate(self, mapping: Mapping) -> ValidationResult:
        errors: List[str] = []
        for position, key in enumerate(mapping.arguments):
            if not isinstance(key, str) or not key:
                errors.append(f"argument #{position} must be a non-empty string, got {key!r}")
        errors.extend(self._check_fields(mapping))
        return ValidationResult(mapping_name=mapping.name, errors=errors)

    def create_object(self, mapping: Mapping, resolve: ResolveFunction) -> Any:
        arguments = [resolve(key) for key in mapping.arguments]
        logger.debug("Creating '%s' with %s mapping type", mapping.name, self.name)
        return self._build(mapping, arguments)

    def _check_fields(self, mapping: Mapping) -> List[str]:
        """Return the strategy-specific problems of ``mapping``."""
        return []

    @abstractmethod
    def _build(self, mapping: Mapping, arguments: List[Any]) -> Any:
        """Build the object from the resolved ``arguments``."""

    def _require_callable(self, mapping: Mapping, field: str) -> List[str]:
        if not mapping.has_field(field):
            return [f"'{field}' is required for {self.name} mappings"]
        if not callable(mapping.get(field)):
            return [f"'{field}' must be callable, got {mapping.get(field)!r}"]
        return []


class SingletonMappingType(BaseMappingType):
    """Instantiates the mapping's ``class`` with the resolved arguments.

    Example:
        >>> context = AppContext(
        ...     {"clock": {"class": Clock}, "scheduler": {"class": Scheduler, "arguments": ["clock"]}},
        ...     default_mapping_types(),
        ... )
        >>> context.get("scheduler").clock
        <Clock ...>
    """

    name = MappingTypeName.SINGLETON.value

    def _check_fields(self, mapping: Mapping) -> List[str]:
        return self._require_callable(mapping, "class")

    def _build(self, mapping: Mapping, arguments: List[Any]) -> Any:
        return mapping.get("class")(*arguments)


class FactoryMappingType(BaseMappingType):
    """Calls the mapping's ``factory`` with the resolved arguments."""

    name = MappingTypeName.FACTORY.value

    def _check_fields(self, mapping: Mapping) -> List[str]:
        return self._require_callable(mapping, "factory")

    def _build(self, mapping: Mapping, arguments: List[Any]) -> Any:
        return mapping.get("factory")(*arguments)


class ValueMappingType(BaseMappingType):
    """Returns the mapping's ``value`` untouched. Takes no arguments."""

    name = MappingTypeName.VALUE.value

    def _check_fields(self, mapping: Mapping) -> List[str]:
        errors = []
        if not mapping.has_field("value"):
            errors.append("'value' is required for value mappings")
        if mapping.arguments:
            errors.append("value mappings take no arguments")
        return errors

    def _build(self, mapping: Mapping, arguments: List[Any]) -> Any:
        return mapping.get("value")


def default_mapping_types() -> List[IMappingType]:
    """Return fresh instances of every bundled mapping type."""
    return [SingletonMappingType(), FactoryMappingType(), ValueMappingType()]
