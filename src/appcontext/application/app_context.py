import logging
import threading
from typing import Any, Dict, Iterable, List, Optional, Tuple

from appcontext.application.resolver_chain import ResolverChain
from appcontext.application.resolvers import Resolver, SpecialKeyResolver
from appcontext.domain import (
    DEFAULT_MAPPING_TYPE,
    ConfigurationNotDefinedError,
    IAppContext,
    IMappingType,
    InvalidArgumentsError,
    IResolver,
    Mapping,
    TypeNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

CONTEXT_KEY = "ctx"


class AppContext(IAppContext):
    """Application context built from a declarative mapping of named objects.

    The mapping is normalized and fully validated on construction. Objects are
    built lazily on ``get`` and memoized only when their mapping sets ``cache``.

    Arguments are resolved through an ordered chain: the extra resolvers given
    on construction, then the reserved ``"ctx"`` key (the context itself), then
    every other key as a dependency looked up with ``get``.

    Dependency cycles are not detected. A cycle among uncached mappings
    recurses until Python raises ``RecursionError``.

    Attributes:
        _mapping_types: Mapping type strategies by name.
        _resolver: The argument resolver chain.
        _mappings: Normalized mappings by name, in declaration order.
        _cache: Instances of cached mappings by name.
        _lock: Guards construction of cached mappings.
    """

    def __init__(
        self,
        mappings: Dict[str, Dict[str, Any]],
        mapping_types: Iterable[IMappingType],
        argument_resolvers: Optional[Iterable[IResolver]] = None,
    ) -> None:
        """Build and validate the context.

        Args:
            mappings: Raw definitions by name. Not modified.
            mapping_types: Strategies available to the mappings.
            argument_resolvers: Resolvers consulted before the built-in ones.

        Raises:
            TypeNotFoundError: If a mapping references an unknown type.
            MappingDefinitionError: If a mapping cannot be normalized.
            ValidationError: If any mapping fails structural validation.
            InvalidArgumentsError: If any declared argument cannot be resolved.

        Example:
            >>> context = AppContext(
            ...     {
            ...         "config": {"type": "value", "value": {"dsn": "sqlite://"}},
            ...         "database": {"class": Database, "arguments": ["config"], "cache": True},
            ...     },
            ...     default_mapping_types(),
            ... )
            >>> context.get("database") is context.get("database")
            True
        """
        self._cache: Dict[str, Any] = {}
        self._lock = threading.RLock()
        self._mapping_types: Dict[str, IMappingType] = {
            mapping_type.name: mapping_type for mapping_type in mapping_types
        }
        self._resolver = self._create_resolver_chain(argument_resolvers or [])
        self._mappings = self._preprocess_mappings(mappings)
        self._validate()

    def _create_resolver_chain(self, argument_resolvers: Iterable[IResolver]) -> ResolverChain:
        context_resolver = SpecialKeyResolver(CONTEXT_KEY, lambda key: self)
        dependency_resolver = Resolver(
            can_resolve=lambda key: True,
            resolve=self.get,
            validate=self.has,
        )
        return ResolverChain([*argument_resolvers, context_resolver, dependency_resolver])

    def _preprocess_mappings(self, mappings: Dict[str, Dict[str, Any]]) -> Dict[str, Mapping]:
        preprocessed: Dict[str, Mapping] = {}
        for name, raw_mapping in mappings.items():
            type_name = raw_mapping.get("type") or DEFAULT_MAPPING_TYPE
            mapping_type = self._mapping_types.get(type_name)
            if mapping_type is None:
                raise TypeNotFoundError(name, type_name)
            preprocessed[name] = mapping_type.preprocess({**raw_mapping, "name": name, "type": type_name})

        logger.debug("Preprocessed %d mappings", len(preprocessed))
        return preprocessed

    def _validate(self) -> None:
        """Run structural then argument validation, collecting every failure."""
        bad_results = [
            result
            for result in (self._get_type_for(mapping).validate(mapping) for mapping in self._mappings.values())
            if not result.is_valid()
        ]
        if bad_results:
            logger.warning("%d mappings failed validation", len(bad_results))
            raise ValidationError(bad_results)

        bad_argument_pairs: List[Tuple[str, Any]] = [
            (mapping.name, key)
            for mapping in self._mappings.values()
            for key in mapping.arguments
            if not self._resolver.validate(key)
        ]
        if bad_argument_pairs:
            logger.warning("%d declared arguments cannot be resolved", len(bad_argument_pairs))
            raise InvalidArgumentsError(bad_argument_pairs)

    def _get_type_for(self, mapping: Mapping) -> IMappingType:
        return self._mapping_types[mapping.type]

    def get_mapping(self, key: str) -> Optional[Mapping]:
        return self._mappings.get(key)

    def has(self, key: str) -> bool:
        try:
            return key in self._mappings
        except TypeError:
            return False

    def get(self, key: str) -> Any:
        """Return the object mapped under ``key``.

        Cached instances are returned as is. Otherwise the mapping's type
        builds a new object, resolving its arguments through the chain, and
        the result is stored when the mapping sets ``cache``.

        Args:
            key: Mapping name.

        Returns:
            The constructed or cached object.

        Raises:
            ConfigurationNotDefinedError: If no mapping exists for ``key``.
        """
        try:
            if key in self._cache:
                return self._cache[key]
            mapping = self._mappings.get(key)
        except TypeError as e:
            raise ConfigurationNotDefinedError(key) from e

        if mapping is None:
            raise ConfigurationNotDefinedError(key)

        if not mapping.cache:
            return self._create(mapping)

        with self._lock:
            # Another thread may have built it while we waited.
            if key in self._cache:
                return self._cache[key]
            instance = self._create(mapping)
            self._cache[key] = instance
            logger.debug("Cached instance of '%s'", key)
            return instance

    def _create(self, mapping: Mapping) -> Any:
        return self._get_type_for(mapping).create_object(mapping, self._resolver.resolve)

    def get_with_tags(self, *tags: str) -> List[Any]:
        """Return the objects of every mapping tagged with all of ``tags``.

        Objects come back in mapping declaration order. Calling it without
        tags returns every mapped object.

        Example:
            >>> handlers = context.get_with_tags("http", "public")
        """
        requested = set(tags)
        return [self.get(name) for name, mapping in self._mappings.items() if requested <= mapping.tags]
