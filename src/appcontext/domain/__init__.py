"""
Domain layer - Core models, contracts and errors.

This layer contains the fundamental rules and models for the application context.
It has no dependencies on other layers.
"""

from .enums import DEFAULT_MAPPING_TYPE, MappingTypeName
from .exceptions import (
    AppContextException,
    ConfigurationNotDefinedError,
    InvalidArgumentsError,
    MappingDefinitionError,
    TypeNotFoundError,
    UnresolvableArgumentError,
    ValidationError,
)
from .interfaces import IAppContext, IMappingType, IResolver, ResolveFunction
from .models import Mapping, ValidationResult

__all__ = [
    # Enums
    "MappingTypeName",
    "DEFAULT_MAPPING_TYPE",
    # Exceptions
    "AppContextException",
    "TypeNotFoundError",
    "MappingDefinitionError",
    "ValidationError",
    "InvalidArgumentsError",
    "ConfigurationNotDefinedError",
    "UnresolvableArgumentError",
    # Interfaces
    "IAppContext",
    "IMappingType",
    "IResolver",
    "ResolveFunction",
    # Models
    "Mapping",
    "ValidationResult",
]
