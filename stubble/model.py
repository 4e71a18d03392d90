"""Response definitions describe what a stubbed method does when it is called."""

import abc
from typing import Any, Generic, Sequence, TypeVar, Union

from attr import define, evolve, field
from typing_extensions import TypeAlias

from .types import Args, Kwargs, ProducerFunction

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Response(abc.ABC, Generic[T_co]):
    """
    A response definition installed for one method name on one double.
    """

    @abc.abstractmethod
    def respond(self, args: Args, kwargs: Kwargs) -> T_co:
        ...

    def fresh(self) -> "Response[T_co]":
        """The response to install in a stub table. Stateless responses are shared as is."""
        return self


@define(frozen=True)
class Literal(Response[T_co]):
    """Return the same value on every call, regardless of arguments."""

    value: Any

    def respond(self, args: Args, kwargs: Kwargs) -> Any:
        return self.value


@define(frozen=True)
class Producer(Response[T_co]):
    """Call func with the invocation arguments and return its result."""

    func: ProducerFunction

    def respond(self, args: Args, kwargs: Kwargs) -> Any:
        return self.func(*args, **kwargs)


@define
class Sequential(Response[T_co]):
    """
    Return each value in turn on consecutive calls, then keep returning the
    last value once the sequence is exhausted.
    """

    values: Sequence[Any] = field(converter=tuple)
    _calls: int = field(default=0, init=False)

    @values.validator
    def _check_values(self, attribute, value) -> None:
        if not value:
            raise ValueError("Sequential requires at least one value")

    def respond(self, args: Args, kwargs: Kwargs) -> Any:
        index = min(self._calls, len(self.values) - 1)
        self._calls += 1
        return self.values[index]

    def fresh(self) -> "Sequential[T_co]":
        # each stub table entry counts its own calls
        return evolve(self)


Stubbable = Union[Response[T], T]
# Union of Response and Any is just Any, but a Response gets special handling by the stub table.
ResponseAny: TypeAlias = Union[Response, Any]


def as_response(value: Stubbable[T]) -> Response[T]:
    """
    Wrap a plain value in a Literal. Response instances are returned as is.
    Callables are treated as plain values; wrap them in Producer to have them called.
    """
    if isinstance(value, Response):
        return value
    else:
        return Literal(value)


def resolve_response(response: Response[T], args: Args, kwargs: Kwargs) -> T:
    """
    Resolve a response definition into the value a call returns. Any exception
    raised while producing the value propagates to the caller unchanged.
    """
    return response.respond(args, kwargs)
