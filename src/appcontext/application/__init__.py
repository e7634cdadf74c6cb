"""
Application layer - Context orchestration and bundled strategies.

This layer wires mapping types and resolvers into the application context.
It depends only on the Domain layer.
"""

from .app_context import CONTEXT_KEY, AppContext
from .mapping_types import (
    BaseMappingType,
    FactoryMappingType,
    SingletonMappingType,
    ValueMappingType,
    default_mapping_types,
)
from .resolver_chain import ResolverChain
from .resolvers import EnvironmentResolver, Resolver, SpecialKeyResolver, ValueResolver

__all__ = [
    "AppContext",
    "CONTEXT_KEY",
    "ResolverChain",
    # Resolvers
    "Resolver",
    "SpecialKeyResolver",
    "ValueResolver",
    "EnvironmentResolver",
    # Mapping types
    "BaseMappingType",
    "SingletonMappingType",
    "FactoryMappingType",
    "ValueMappingType",
    "default_mapping_types",
]
