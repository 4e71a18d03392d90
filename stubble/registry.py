"""The Registry tracks the doubles created for one test and discards them when it ends."""
import functools
import logging
from threading import RLock
from types import TracebackType
from typing import Callable, Dict, Mapping, Optional, Type, TypeVar

from typing_extensions import Concatenate, ParamSpec, Self

from .config import DoubleConfigWrapper, DoubleInitConfig
from .doubles import Double, _clear, create_double
from .model import ResponseAny
from .types import MethodName

LOG = logging.getLogger(__name__)

R = TypeVar("R")
P = ParamSpec("P")


def initialize(config: Optional[DoubleInitConfig] = None) -> "Registry":
    """Initialize a new registry instance."""
    LOG.debug("initializing a new registry instance")
    return Registry(config)


def _synchronized(
    func: Callable[Concatenate["Registry", P], R]
) -> Callable[Concatenate["Registry", P], R]:
    """Decorator to synchronize method access with a reentrant lock."""

    @functools.wraps(func)
    def wrapper(self: "Registry", *args: P.args, **kwargs: P.kwargs) -> R:
        with self._lock:
            return func(self, *args, **kwargs)

    return wrapper


class Registry:
    """Creates doubles for a single test and tracks them until close()."""

    def __init__(self, config: Optional[DoubleInitConfig] = None):
        # keyed by id() so doubles never need to be hashable or comparable
        self._doubles: Dict[int, Double] = {}
        self._config = DoubleConfigWrapper()

        self._lock = RLock()

        if config is not None:
            self._config._from_dict(config)

    @property
    def config(self) -> DoubleConfigWrapper:
        return self._config

    @_synchronized
    def create_double(
        self,
        name: Optional[str] = None,
        initial_stubs: Optional[Mapping[MethodName, ResponseAny]] = None,
    ) -> Double:
        """Create a double and track it for the lifetime of this registry.

        Parameters:
            name: optional display name, only used in diagnostics.
            initial_stubs: method names mapped to the response each one should give.
        """
        new_double = create_double(name, initial_stubs, self._config)
        self._doubles[id(new_double)] = new_double
        return new_double

    def double(
        self,
        name: Optional[str] = None,
        stubs: Optional[Mapping[MethodName, ResponseAny]] = None,
        /,
        **kwargs: ResponseAny,
    ) -> Double:
        """Create a tracked double, stubbing methods from a mapping and/or keyword arguments."""
        initial_stubs: Dict[MethodName, ResponseAny] = dict(stubs or {})
        initial_stubs.update(kwargs)
        return self.create_double(name, initial_stubs)

    @_synchronized
    def close(self) -> None:
        """Discard every tracked double.
        Stub tables are cleared, so a double that outlives its test answers
        nothing and any call on it raises UnstubbedMethodError.
        """
        if self._doubles:
            LOG.debug("closing registry, discarding %d doubles", len(self._doubles))
        for tracked in list(self._doubles.values()):
            _clear(tracked)
        self._doubles.clear()

    @_synchronized
    def __len__(self) -> int:
        return len(self._doubles)

    @_synchronized
    def __contains__(self, obj) -> bool:
        """Check if a double was created by this registry and not yet discarded."""
        return self._doubles.get(id(obj)) is obj

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()
