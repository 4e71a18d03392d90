"""Doubles are opaque fake objects that answer only the methods stubbed on them."""

import logging
from typing import Any, Dict, List, Mapping, Optional

from .config import DEFAULT_CONFIG, DoubleConfigWrapper
from .errors import UnstubbedMethodError
from .model import Response, ResponseAny, as_response, resolve_response
from .types import MethodName

LOG = logging.getLogger(__name__)

_NAME_ATTR = "_stubble_name"
_STUBS_ATTR = "_stubble_stubs"
_CONFIG_ATTR = "_stubble_config"
_INTERNAL_ATTRS = frozenset((_NAME_ATTR, _STUBS_ATTR, _CONFIG_ATTR))


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


class _StubbedMethod:
    """A method looked up on a double. Resolution against the stub table happens at call time."""

    __slots__ = ("_double", "_method_name")

    def __init__(self, double: "Double", method_name: MethodName) -> None:
        self._double = double
        self._method_name = method_name

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return invoke(self._double, self._method_name, *args, **kwargs)

    def __repr__(self) -> str:
        return f"<stubbed method {self._method_name!r} of {self._double!r}>"


class Double:
    """
    An opaque stand-in object with no relation to any real class.

    Any attribute looked up on a double is a method; calling it returns the
    stubbed response, or raises UnstubbedMethodError when nothing is stubbed
    under that name. A double has no public attributes of its own, so every
    identifier is available as a method name. Names that are not identifiers
    ("open?") are reachable through invoke() or getattr().
    """

    __slots__ = (_NAME_ATTR, _STUBS_ATTR, _CONFIG_ATTR)

    def __init__(
        self,
        name: Optional[str] = None,
        initial_stubs: Optional[Mapping[MethodName, ResponseAny]] = None,
        config: Optional[DoubleConfigWrapper] = None,
    ) -> None:
        object.__setattr__(self, _NAME_ATTR, name)
        object.__setattr__(self, _STUBS_ATTR, {})
        object.__setattr__(self, _CONFIG_ATTR, config or DEFAULT_CONFIG)
        if initial_stubs:
            for method_name in initial_stubs.keys():
                stub(self, method_name, initial_stubs[method_name])

    def __getattr__(self, name: str) -> _StubbedMethod:
        # only reached when normal lookup fails, i.e. for anything but our own slots
        if name in _INTERNAL_ATTRS:
            raise AttributeError(name)
        # keep python protocols (copy, pickle, hasattr(d, "__iter__")) working
        if _is_dunder(name) and name not in _stubs_of(self):
            raise AttributeError(name)
        return _StubbedMethod(self, name)

    def __reduce__(self):
        # copies and unpickled doubles get their own stub table
        return (Double, (_name_of(self), dict(_stubs_of(self)), _config_of(self)))

    def __copy__(self) -> "Double":
        return Double(_name_of(self), _stubs_of(self), _config_of(self))

    def __repr__(self) -> str:
        name = _name_of(self)
        if name is None:
            return f"<Double ({_config_of(self).anonymous_name})>"
        return f'<Double "{name}">'


def _name_of(double: Double) -> Optional[str]:
    return object.__getattribute__(double, _NAME_ATTR)


def _stubs_of(double: Double) -> Dict[MethodName, Response]:
    return object.__getattribute__(double, _STUBS_ATTR)


def _config_of(double: Double) -> DoubleConfigWrapper:
    return object.__getattribute__(double, _CONFIG_ATTR)


def create_double(
    name: Optional[str] = None,
    initial_stubs: Optional[Mapping[MethodName, ResponseAny]] = None,
    config: Optional[DoubleConfigWrapper] = None,
) -> Double:
    """Create a new double.

    Parameters:
        name: optional display name, only used in diagnostics.
        initial_stubs: method names mapped to the response each one should give.
        config: configuration shared with the creating registry, if any.
    """
    new_double = Double(name, initial_stubs, config)
    LOG.debug("created %r with stubs %s", new_double, sorted(_stubs_of(new_double)))
    return new_double


def double(
    name: Optional[str] = None,
    stubs: Optional[Mapping[MethodName, ResponseAny]] = None,
    /,
    **kwargs: ResponseAny,
) -> Double:
    """Create a new double, stubbing methods from a mapping and/or keyword arguments.

    double("MovieTicket", title="Inception", price=12.5)
    double("Theater", {"open?": True})
    """
    initial_stubs: Dict[MethodName, ResponseAny] = dict(stubs or {})
    initial_stubs.update(kwargs)
    return create_double(name, initial_stubs)


def stub(double: Double, method_name: MethodName, response: ResponseAny, /) -> None:
    """Install or replace the response for method_name on double.

    Plain values are returned as is on every call. Pass a Response (such as
    Producer) to compute the value per call.
    """
    stubs = _stubs_of(double)
    if method_name in stubs:
        LOG.debug("replacing stub %r on %r", method_name, double)
    else:
        LOG.debug("stubbing %r on %r", method_name, double)
    stubs[method_name] = as_response(response).fresh()


def invoke(double: Double, method_name: MethodName, /, *args: Any, **kwargs: Any) -> Any:
    """Call method_name on double with the given arguments.

    Returns:
        The value the installed response gives for these arguments.
    Raises:
        UnstubbedMethodError: if nothing is stubbed under method_name.
    """
    response = _stubs_of(double).get(method_name)
    if response is None:
        LOG.debug("%r received unexpected message %r", double, method_name)
        raise UnstubbedMethodError(
            _name_of(double),
            method_name,
            args,
            kwargs,
            anonymous_name=_config_of(double).anonymous_name,
        )

    result = resolve_response(response, args, kwargs)
    if _config_of(double).log_invocations:
        LOG.debug("%r.%s%r -> %r", double, method_name, args, result)
    return result


def stubbed_methods(double: Double) -> List[MethodName]:
    """The method names currently stubbed on double, in stubbing order."""
    return list(_stubs_of(double))


def double_name(double: Double) -> Optional[str]:
    return _name_of(double)


def _clear(double: Double) -> None:
    _stubs_of(double).clear()
