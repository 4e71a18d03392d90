"""Fluent stubbing for doubles that already exist.

allow(theater).to_receive("open?").and_return(True)
allow(ticket).to_receive("title").and_return("Dune", "Arrival")
allow(theater).to_receive("sell_ticket").and_call(lambda title, price: f"{title} at ${price}")
allow(theater).to_receive("close").and_raise(RuntimeError("fire alarm"))
"""

from typing import Any, Type, Union

from .doubles import Double, stub
from .model import Literal, Producer, Sequential
from .types import MethodName, ProducerFunction


class _PendingStub:
    """A method name waiting for its response. Nothing is installed until a terminal call."""

    def __init__(self, target: Double, method_name: MethodName) -> None:
        self._target = target
        self._method_name = method_name

    def and_return(self, *values: Any) -> None:
        """Return the value on every call, or each value in turn when several are given.
        With no values the method returns None.
        """
        if len(values) > 1:
            stub(self._target, self._method_name, Sequential(values))
        else:
            stub(self._target, self._method_name, Literal(values[0] if values else None))

    def and_call(self, func: ProducerFunction) -> None:
        """Call func with the invocation arguments and return its result."""
        stub(self._target, self._method_name, Producer(func))

    def and_raise(self, exc: Union[BaseException, Type[BaseException]]) -> None:
        """Raise exc (an exception class or instance) on every call."""

        def _raise(*args: Any, **kwargs: Any) -> Any:
            raise exc

        stub(self._target, self._method_name, Producer(_raise))

    def __repr__(self) -> str:
        return f"<pending stub {self._method_name!r} on {self._target!r}>"


class _Allowance:
    def __init__(self, target: Double) -> None:
        self._target = target

    def to_receive(self, method_name: MethodName) -> _PendingStub:
        return _PendingStub(self._target, method_name)


def allow(target: Double) -> _Allowance:
    """Start stubbing a method on an existing double."""
    if not isinstance(target, Double):
        raise TypeError(f"allow() expects a Double, got {type(target).__name__}")
    return _Allowance(target)
