from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from appcontext.domain.models import Mapping, ValidationResult

ResolveFunction = Callable[[Any], Any]


class IMappingType(ABC):
    """Abstract interface for a named object construction strategy."""

    name: str

    @abstractmethod
    def preprocess(self, raw_mapping: Dict[str, Any]) -> Mapping:
        """Normalize a raw mapping definition.

        Args:
            raw_mapping: Raw definition, already carrying ``name`` and ``type``.

        Returns:
            The immutable normalized mapping.

        Raises:
            MappingDefinitionError: If a field cannot be normalized.
        """

    @abstractmethod
    def validate(self, mapping: Mapping) -> ValidationResult:
        """Check that a normalized mapping is structurally sound for this type.

        Args:
            mapping: The normalized mapping.
        """

    @abstractmethod
    def create_object(self, mapping: Mapping, resolve: ResolveFunction) -> Any:
        """Build the object described by a mapping.

        Args:
            mapping: The normalized mapping.
            resolve: Turns an argument key into its value.

        Returns:
            The constructed object.
        """


class IResolver(ABC):
    """Abstract interface for argument resolution."""

    @abstractmethod
    def can_resolve(self, key: Any) -> bool:
        """Return whether this resolver claims the key."""

    @abstractmethod
    def resolve(self, key: Any) -> Any:
        """Return the value for a claimed key."""

    @abstractmethod
    def validate(self, key: Any) -> bool:
        """Return whether a claimed key would resolve successfully."""


class IAppContext(ABC):
    """Abstract interface for application context lookups."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the object mapped under ``key``, constructing it if needed.

        Raises:
            ConfigurationNotDefinedError: If no mapping exists for ``key``.
        """

    @abstractmethod
    def has(self, key: str) -> bool:
        """Return whether a mapping exists for ``key``."""

    @abstractmethod
    def get_with_tags(self, *tags: str) -> List[Any]:
        """Return the objects of every mapping carrying all the given tags."""

    @abstractmethod
    def get_mapping(self, key: str) -> Optional[Mapping]:
        """Return the normalized mapping for ``key`` or ``None``."""
