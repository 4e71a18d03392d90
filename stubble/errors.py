from typing import Optional

from .types import Args, Kwargs, MethodName

ANONYMOUS_NAME = "anonymous"


def _format_args(args: Args, kwargs: Kwargs) -> str:
    parts = [repr(arg) for arg in args]
    parts.extend(f"{key}={value!r}" for key, value in kwargs.items())
    if not parts:
        return "(no args)"
    return "(" + ", ".join(parts) + ")"


class UnstubbedMethodError(AssertionError):
    """
    A double received a call for a method name that has no stub installed.

    This is an AssertionError so test runners report it as an ordinary test failure.
    """

    def __init__(
        self,
        double_name: Optional[str],
        method_name: MethodName,
        args: Args = (),
        kwargs: Optional[Kwargs] = None,
        anonymous_name: str = ANONYMOUS_NAME,
    ) -> None:
        self.double_name = double_name
        self.method_name = method_name
        self.args_received = tuple(args)
        self.kwargs_received = dict(kwargs or {})
        self.anonymous_name = anonymous_name
        display = f'"{double_name}"' if double_name is not None else f"({anonymous_name})"
        super().__init__(
            f"Double {display} received unexpected message {method_name!r} with "
            f"{_format_args(self.args_received, self.kwargs_received)}"
        )

    def __reduce__(self):
        # self.args only holds the message, so rebuild from the fields
        return (
            type(self),
            (
                self.double_name,
                self.method_name,
                self.args_received,
                self.kwargs_received,
                self.anonymous_name,
            ),
        )
