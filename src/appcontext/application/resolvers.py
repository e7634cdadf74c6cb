"""Application layer - Argument resolvers."""

import os
from typing import Any, Callable, Dict, Optional

from appcontext.domain import IResolver


class Resolver(IResolver):
    """Resolver assembled from three plain callables.

    Example:
        >>> upper = Resolver(
        ...     can_resolve=lambda key: key.isupper(),
        ...     resolve=lambda key: key.lower(),
        ...     validate=lambda key: True,
        ... )
        >>> upper.resolve("ABC")
        'abc'
    """

    def __init__(
        self,
        can_resolve: Callable[[Any], bool],
        resolve: Callable[[Any], Any],
        validate: Callable[[Any], bool],
    ) -> None:
        self._can_resolve = can_resolve
        self._resolve = resolve
        self._validate = validate

    def can_resolve(self, key: Any) -> bool:
        return bool(self._can_resolve(key))

    def resolve(self, key: Any) -> Any:
        return self._resolve(key)

    def validate(self, key: Any) -> bool:
        return bool(self._validate(key))


class SpecialKeyResolver(Resolver):
    """Resolver that claims exactly one reserved key.

    Attributes:
        key: The reserved key.
    """

    def __init__(
        self,
        key: Any,
        resolve: Callable[[Any], Any],
        validate: Optional[Callable[[Any], bool]] = None,
    ) -> None:
        self.key = key
        super().__init__(
            can_resolve=lambda candidate: candidate == key,
            resolve=resolve,
            validate=validate or (lambda _: True),
        )


class ValueResolver(IResolver):
    """Resolves keys from a fixed dictionary of values."""

    def __init__(self, values: Dict[Any, Any]) -> None:
        self._values = values

    def can_resolve(self, key: Any) -> bool:
        try:
            return key in self._values
        except TypeError:
            return False

    def resolve(self, key: Any) -> Any:
        return self._values[key]

    def validate(self, key: Any) -> bool:
        return True


class EnvironmentResolver(IResolver):
    """Resolves ``env:NAME`` style keys from environment variables.

    The environment is read at resolution time, so a variable set after the
    context was built is still seen by later constructions.

    Attributes:
        prefix: Key prefix claimed by this resolver.
    """

    def __init__(self, prefix: str = "env:", environ: Optional[Dict[str, str]] = None) -> None:
        """Initialize the resolver.

        Args:
            prefix: Key prefix claimed by this resolver.
            environ: Variables to read from. Defaults to ``os.environ``.
        """
        self.prefix = prefix
        self._environ = environ if environ is not None else os.environ

    def _variable_name(self, key: str) -> str:
        return key[len(self.prefix) :]

    def can_resolve(self, key: Any) -> bool:
        return isinstance(key, str) and key.startswith(self.prefix)

    def resolve(self, key: Any) -> Any:
        return self._environ[self._variable_name(key)]

    def validate(self, key: Any) -> bool:
        return self._variable_name(key) in self._environ
