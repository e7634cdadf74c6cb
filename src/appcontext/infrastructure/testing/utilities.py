from typing import Any, Dict, Iterable, Optional

from appcontext.application import AppContext, ValueResolver, default_mapping_types
from appcontext.domain import IMappingType, IResolver


class TestAppContext(AppContext):
    """Application context for tests with instance override capabilities.

    Overrides shadow both direct lookups and argument resolution: ``get``
    returns the override, and any mapping declaring the key as an argument
    receives it. Override keys need not be mapped, which lets tests stand in
    for collaborators the mapping leaves out.

    This is useful for:
    - Mocking external services (databases, APIs, etc.)
    - Replacing implementations with test doubles
    - Checking the wiring of one mapping in isolation

    Attributes:
        _overrides: Instances returned in place of the mapped objects.

    Example:
        >>> mappings = {
        ...     "mailer": {"class": SmtpMailer, "cache": True},
        ...     "signup": {"class": SignupService, "arguments": ["mailer"]},
        ... }
        >>> def test_signup_sends_mail():
        ...     mock_mailer = MockMailer()
        ...     with TestAppContext(mappings, overrides={"mailer": mock_mailer}) as context:
        ...         context.get("signup").register("ana@example.com")
        ...     assert mock_mailer.sent
    """

    __test__ = False  # Tell pytest not to collect this class as a test

    def __init__(
        self,
        mappings: Dict[str, Dict[str, Any]],
        mapping_types: Optional[Iterable[IMappingType]] = None,
        argument_resolvers: Optional[Iterable[IResolver]] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize the test context.

        Args:
            mappings: Raw definitions by name.
            mapping_types: Strategies to use. Defaults to the bundled ones.
            argument_resolvers: Extra resolvers, consulted after the overrides.
            overrides: Instances by key, taking precedence over everything else.
        """
        self._overrides: Dict[str, Any] = dict(overrides or {})
        self._override_resolver = ValueResolver(self._overrides)
        super().__init__(
            mappings,
            mapping_types if mapping_types is not None else default_mapping_types(),
            [self._override_resolver, *(argument_resolvers or [])],
        )

    def override(self, key: str, instance: Any) -> None:
        """Return ``instance`` for ``key`` from now on.

        Args:
            key: Mapping name or argument key to shadow.
            instance: The stand-in object.
        """
        self._overrides[key] = instance

    def reset_overrides(self) -> None:
        """Remove all overrides. Instances cached meanwhile are kept.

        The mappings are validated again, since an argument may only have
        been resolvable through an override.

        Raises:
            InvalidArgumentsError: If an argument relied on a removed override.
        """
        self._overrides.clear()
        self._validate()

    def get(self, key: str) -> Any:
        if self._override_resolver.can_resolve(key):
            return self._overrides[key]
        return super().get(key)

    def __enter__(self) -> "TestAppContext":
        """Context manager entry - returns self."""
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        """Context manager exit - automatically clean up overrides.

        Revalidation is skipped while an exception propagates, so it is not
        masked by an ``InvalidArgumentsError``.
        """
        if exc_type is not None:
            self._overrides.clear()
            return False
        self.reset_overrides()
        return False


def create_mock_context(mappings: Dict[str, Dict[str, Any]], **overrides: Any) -> TestAppContext:
    """Create a test context using the bundled mapping types and given overrides.

    Args:
        mappings: Raw definitions by name.
        **overrides: Instances by key.

    Returns:
        TestAppContext with the overrides installed.

    Example:
        >>> context = create_mock_context(mappings, mailer=MockMailer(), clock=FrozenClock())
        >>> service = context.get("signup")
    """
    return TestAppContext(mappings, overrides=overrides)
