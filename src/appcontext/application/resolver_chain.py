"""Application layer - Ordered, first-match resolver chain."""

import logging
from typing import Any, Iterable, List, Optional

from appcontext.domain import IResolver, UnresolvableArgumentError

logger = logging.getLogger(__name__)


class ResolverChain(IResolver):
    """Delegates every key to the first resolver that claims it.

    Precedence is positional: an earlier resolver shadows any later one for
    the keys it claims. Resolvers are never combined.

    Attributes:
        _resolvers: The resolvers, in precedence order.
    """

    def __init__(self, resolvers: Iterable[IResolver]) -> None:
        self._resolvers: List[IResolver] = list(resolvers)

    def find(self, key: Any) -> Optional[IResolver]:
        """Return the first resolver claiming ``key``, or ``None``."""
        for resolver in self._resolvers:
            if resolver.can_resolve(key):
                return resolver
        return None

    def can_resolve(self, key: Any) -> bool:
        return self.find(key) is not None

    def resolve(self, key: Any) -> Any:
        """Resolve ``key`` with the first resolver that claims it.

        Raises:
            UnresolvableArgumentError: If no resolver claims the key.
        """
        resolver = self.find(key)
        if resolver is None:
            raise UnresolvableArgumentError(key)
        logger.debug("Resolving argument %r with %s", key, type(resolver).__name__)
        return resolver.resolve(key)

    def validate(self, key: Any) -> bool:
        """Validate ``key`` with the first resolver that claims it.

        Returns:
            ``False`` when no resolver claims the key.
        """
        resolver = self.find(key)
        if resolver is None:
            return False
        return resolver.validate(key)
