"""
appcontext: Declarative, lazily resolved application context.

Public API exports for the appcontext package.
"""

# Application exports
from appcontext.application.app_context import CONTEXT_KEY, AppContext
from appcontext.application.mapping_types import (
    BaseMappingType,
    FactoryMappingType,
    SingletonMappingType,
    ValueMappingType,
    default_mapping_types,
)
from appcontext.application.resolver_chain import ResolverChain
from appcontext.application.resolvers import (
    EnvironmentResolver,
    Resolver,
    SpecialKeyResolver,
    ValueResolver,
)

# Domain exports
from appcontext.domain.enums import MappingTypeName
from appcontext.domain.exceptions import (
    AppContextException,
    ConfigurationNotDefinedError,
    InvalidArgumentsError,
    MappingDefinitionError,
    TypeNotFoundError,
    UnresolvableArgumentError,
    ValidationError,
)
from appcontext.domain.interfaces import IAppContext, IMappingType, IResolver
from appcontext.domain.models import Mapping, ValidationResult

__version__ = "0.1.0"

__all__ = [
    # Context
    "AppContext",
    "CONTEXT_KEY",
    # Mapping types
    "BaseMappingType",
    "SingletonMappingType",
    "FactoryMappingType",
    "ValueMappingType",
    "default_mapping_types",
    "MappingTypeName",
    # Resolvers
    "ResolverChain",
    "Resolver",
    "SpecialKeyResolver",
    "ValueResolver",
    "EnvironmentResolver",
    # Interfaces
    "IAppContext",
    "IMappingType",
    "IResolver",
    # Models
    "Mapping",
    "ValidationResult",
    # Exceptions
    "AppContextException",
    "TypeNotFoundError",
    "MappingDefinitionError",
    "ValidationError",
    "InvalidArgumentsError",
    "ConfigurationNotDefinedError",
    "UnresolvableArgumentError",
]
