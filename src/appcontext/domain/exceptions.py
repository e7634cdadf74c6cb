from typing import TYPE_CHECKING, Any, List, Sequence, Tuple

if TYPE_CHECKING:
    from appcontext.domain.models import ValidationResult


class AppContextException(Exception):
    """Base exception for application context errors."""


class TypeNotFoundError(AppContextException):
    """Raised when a mapping references a mapping type that is not registered.

    Attributes:
        mapping_name: Name of the offending mapping.
        type_name: The unknown type name.
    """

    def __init__(self, mapping_name: str, type_name: str) -> None:
        self.mapping_name = mapping_name
        self.type_name = type_name
        super().__init__(f"Mapping '{mapping_name}' has unknown type '{type_name}'")


class MappingDefinitionError(AppContextException):
    """Raised when a raw mapping cannot be normalized.

    This occurs when a generic field has the wrong shape, e.g. ``arguments``
    is not a sequence or ``cache`` is not a boolean.

    Attributes:
        mapping_name: Name of the offending mapping.
        reason: Why normalization failed.
    """

    def __init__(self, mapping_name: str, reason: str) -> None:
        self.mapping_name = mapping_name
        self.reason = reason
        super().__init__(f"Mapping '{mapping_name}' is malformed. Reason: {reason}")


class ValidationError(AppContextException):
    """Raised when one or more mappings fail their type's structural validation.

    Attributes:
        results: Every invalid validation result, in mapping order.
    """

    def __init__(self, results: Sequence["ValidationResult"]) -> None:
        self.results = list(results)
        details = "; ".join(str(result) for result in self.results)
        super().__init__(f"Invalid mappings: {details}")


class InvalidArgumentsError(AppContextException):
    """Raised when declared arguments cannot be resolved by the resolver chain.

    Attributes:
        pairs: Every ``(mapping_name, argument_key)`` pair that failed.
    """

    def __init__(self, pairs: Sequence[Tuple[str, Any]]) -> None:
        self.pairs: List[Tuple[str, Any]] = [tuple(pair) for pair in pairs]
        details = ", ".join(f"{name} -> {key!r}" for name, key in self.pairs)
        super().__init__(f"Unresolvable arguments: {details}")


class ConfigurationNotDefinedError(AppContextException):
    """Raised when ``get`` is called with a key that has no mapping.

    Attributes:
        key: The requested key.
    """

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Configuration for {key} is not defined")


class UnresolvableArgumentError(AppContextException):
    """Raised when no resolver in a chain claims an argument key.

    Attributes:
        key: The argument key nobody claimed.
    """

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"No resolver can resolve argument {key!r}")
