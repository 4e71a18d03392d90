"""
stubble creates test doubles: opaque stand-in objects that answer only the
methods a test explicitly stubs on them.

A double has no relation to any real class. Stub methods when creating it:

from stubble import double
ticket = double("MovieTicket", title="Inception", price=12.5)
ticket.title()  # 'Inception'

or at any time afterwards, replacing what was there before:

from stubble import allow
theater = double("Theater")
allow(theater).to_receive("open?").and_return(True)
allow(theater).to_receive("show_movie").and_call(lambda title: f"Now showing: {title}")

Calling anything that was not stubbed fails loudly with UnstubbedMethodError
(an AssertionError), so typos and missing setup surface as test failures:

double("MovieTicket").price()
# UnstubbedMethodError: Double "MovieTicket" received unexpected message 'price' with (no args)

To discard doubles at the end of each test, create them from a Registry and
close it in teardown, or use the `doubles` fixture from stubble.pytest_plugin.
"""

__version__ = "1.0.0"

from .allow import allow
from .doubles import Double, create_double, double, invoke, stub, stubbed_methods
from .errors import UnstubbedMethodError
from .model import Literal, Producer, Sequential
from .registry import Registry, initialize

__all__ = [
    "allow",
    "create_double",
    "double",
    "invoke",
    "stub",
    "stubbed_methods",
    "Double",
    "initialize",
    "Literal",
    "Producer",
    "Registry",
    "Sequential",
    "UnstubbedMethodError",
]
