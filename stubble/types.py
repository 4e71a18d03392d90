from typing import Any, Callable, Dict, Tuple

from typing_extensions import TypeAlias

Arg = Any
Args: TypeAlias = Tuple[Arg, ...]
Kwargs: TypeAlias = Dict[str, Arg]

# Methods are identified by name only. Names need not be valid identifiers ("open?").
MethodName: TypeAlias = str

ProducerFunction: TypeAlias = Callable[..., Any]
