from typing import Any, Mapping, Optional, TypeVar, Union

from typing_extensions import TypedDict

from .errors import ANONYMOUS_NAME

# Unbound, invariant type variable
T = TypeVar("T")


class DoubleConfig(TypedDict, total=False):
    """Configuration entries that apply to the doubles created by a registry."""

    # Placeholder shown in diagnostics for doubles created without a name.
    anonymous_name: str
    # Debug-log every call that resolves against a stub.
    log_invocations: bool


DoubleInitConfig = Union[Mapping[str, Any], DoubleConfig]

_DEFAULTS: DoubleConfig = {
    "anonymous_name": ANONYMOUS_NAME,
    "log_invocations": False,
}


class DoubleConfigWrapper:
    """Manages the configuration shared by the doubles of a registry."""

    def __init__(self):
        self._impl: Mapping[str, Any] = dict(_DEFAULTS)

    def _from_dict(self, config_dict: DoubleInitConfig):
        """Configure from a dictionary-like mapping.
        Keys missing from config_dict keep their default values.

        Parameters:
            config_dict: the configuration data to apply.
        """
        merged = dict(_DEFAULTS)
        merged.update(config_dict)
        self._impl = merged

    def __contains__(self, key: str):
        return key in self._impl

    def get(self, key: str, default: Optional[T] = None) -> T:
        return self._impl.get(key, default)

    def __getitem__(self, key: str) -> Any:
        item: Optional[Any] = self.get(key)
        if item is None:
            raise KeyError(key)
        return item

    @property
    def anonymous_name(self) -> str:
        return self._impl["anonymous_name"]

    @property
    def log_invocations(self) -> bool:
        return bool(self._impl["log_invocations"])


DEFAULT_CONFIG = DoubleConfigWrapper()
