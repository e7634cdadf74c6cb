import functools
import inspect
from typing import Any, Callable, List

from fastapi import Depends

from appcontext.domain import IAppContext


def create_fastapi_dependency(context: IAppContext, key: str) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that gets an object from the context.

    Whether each request gets a fresh object follows the mapping's ``cache``
    flag.

    Args:
        context: The application context to get the object from.
        key: The mapping name to get.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> context = AppContext(
        ...     {"users": {"class": UserRepository, "arguments": ["database"], "cache": True}, ...},
        ...     default_mapping_types(),
        ... )
        >>> get_users = create_fastapi_dependency(context, "users")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_users)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Get the object from the context."""
        return context.get(key)

    return dependency


def create_tagged_dependency(context: IAppContext, *tags: str) -> Callable[[], List[Any]]:
    """Create a FastAPI Depends() callable returning every object carrying ``tags``.

    Example:
        >>> get_health_checks = create_tagged_dependency(context, "health")
        >>>
        >>> @app.get("/health")
        >>> def health(checks: list = Depends(get_health_checks)):
        ...     return {check.name: check.run() for check in checks}
    """

    def tagged_dependency() -> List[Any]:
        return context.get_with_tags(*tags)

    return tagged_dependency


def inject_dependencies(context: IAppContext, *keys: str) -> Callable:
    """Decorator that injects context objects into an async endpoint function.

    Each key is bound to the endpoint parameter in the same position, unless
    the caller already passed that parameter by keyword.

    Args:
        context: The application context to get objects from.
        *keys: Mapping names, in parameter order.

    Returns:
        A decorator function.

    Example:
        >>> @app.get("/users")
        >>> @inject_dependencies(context, "users", "audit_log")
        >>> async def list_users(users: UserRepository, audit_log: AuditLog):
        ...     audit_log.record("list users")
        ...     return await users.get_all()
    """

    def decorator(func: Callable) -> Callable:
        """Wrap the function with dependency injection logic."""
        param_names = list(inspect.signature(func).parameters.keys())
        dependencies = [create_fastapi_dependency(context, key) for key in keys]

        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            """Get the objects and call the original function."""
            for param_name, dependency in zip(param_names, dependencies):
                if param_name not in kwargs:
                    kwargs[param_name] = dependency()

            return await func(*args, **kwargs)

        # FastAPI must not read the injected parameters as request inputs.
        wrapper.__signature__ = inspect.Signature(
            [
                parameter
                for name, parameter in inspect.signature(func).parameters.items()
                if name not in param_names[: len(dependencies)]
            ]
        )
        return wrapper

    return decorator


def depends_on(context: IAppContext, key: str) -> Any:
    """Shortcut for ``Depends(create_fastapi_dependency(context, key))``.

    Example:
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = depends_on(context, "users")):
        ...     return await repo.get_all()
    """
    return Depends(create_fastapi_dependency(context, key))
