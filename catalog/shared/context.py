"""
Request-scoped context.

Each middleware layer extends the context with new entries instead of
mutating it, so a value seen by one stage is never rewritten underneath it.
Keys are objects compared by identity and carry the expected value type;
two keys that share a name never collide.

The chain lives on ``request.state.context``.
"""

from typing import Any, Generic, Optional, TypeVar

from starlette.requests import Request

T = TypeVar("T")

_MISSING = object()


class MissingContextValueError(LookupError):
    """Raised when a context value is absent or has the wrong type.

    Handlers only read keys that an upstream stage guarantees, so this
    indicates a wiring bug rather than a client error.
    """


class ContextKey(Generic[T]):
    """A typed, identity-compared context key."""

    __slots__ = ("name", "value_type")

    def __init__(self, name: str, value_type: type[T]) -> None:
        self.name = name
        self.value_type = value_type

    def __repr__(self) -> str:
        return f"ContextKey({self.name!r}, {self.value_type.__name__})"


class RequestContext:
    """Immutable, append-only key/value chain."""

    __slots__ = ("_parent", "_key", "_value")

    def __init__(
        self,
        parent: Optional["RequestContext"] = None,
        key: Optional[ContextKey] = None,
        value: Any = None,
    ) -> None:
        self._parent = parent
        self._key = key
        self._value = value

    @classmethod
    def empty(cls) -> "RequestContext":
        return cls()

    def with_value(self, key: ContextKey[T], value: T) -> "RequestContext":
        """Return a new context extended with key → value."""
        return RequestContext(self, key, value)

    def _find(self, key: ContextKey) -> Any:
        node: Optional[RequestContext] = self
        while node is not None:
            if node._key is key:
                return node._value
            node = node._parent
        return _MISSING

    def get(self, key: ContextKey[T], default: Optional[T] = None) -> Optional[T]:
        found = self._find(key)
        if found is _MISSING or not isinstance(found, key.value_type):
            return default
        return found

    def value(self, key: ContextKey[T]) -> T:
        """Return the newest value bound to key.

        Raises:
            MissingContextValueError: If the key is unbound or its value
                is not an instance of the key's type.
        """
        found = self._find(key)
        if found is _MISSING:
            raise MissingContextValueError(f"{key!r} is not set on the request context")
        if not isinstance(found, key.value_type):
            raise MissingContextValueError(
                f"{key!r} holds {type(found).__name__}, expected {key.value_type.__name__}"
            )
        return found


REQUEST_ID_KEY: ContextKey[str] = ContextKey("request_id", str)
STARTED_AT_KEY: ContextKey[float] = ContextKey("started_at", float)
STATUS_KEY: ContextKey[int] = ContextKey("status", int)


def get_context(request: Request) -> RequestContext:
    """Return the context attached to request, or an empty one."""
    return getattr(request.state, "context", None) or RequestContext.empty()


def bind(request: Request, key: ContextKey[T], value: T) -> RequestContext:
    """Extend the request's context with key → value and attach the result."""
    ctx = get_context(request).with_value(key, value)
    request.state.context = ctx
    return ctx


def set_status(request: Request, status_code: int) -> None:
    """Record the HTTP status the response should be emitted with."""
    bind(request, STATUS_KEY, status_code)


def get_status(request: Request) -> Optional[int]:
    """Return the status set for this request, if any."""
    return get_context(request).get(STATUS_KEY)
