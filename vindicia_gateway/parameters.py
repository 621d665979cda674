"""
Parameter storage shared by requests and value objects.

Every request and every embedded value object keeps its fields in a
ParameterBag keyed by the provider's camelCase parameter names. Typed
accessors on the owning class read and write through the bag.
"""
import re
from typing import Any, Dict, Iterator, Mapping, Optional

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

# generic setters that take (key, value) and so never stand in for a key
_UNTYPED_SETTERS = frozenset({"set_parameter"})


def setter_name(key: str) -> str:
    """Map a camelCase parameter key to the name of its typed setter."""
    return "set_" + _CAMEL_BOUNDARY.sub("_", key).lower()


def is_blank(value: Any) -> bool:
    """True for values that count as "not provided"."""
    return value is None or value == ""


class ParameterBag:
    """Ordered mapping of parameter name to value."""

    def __init__(self, parameters: Optional[Mapping[str, Any]] = None):
        self._parameters: Dict[str, Any] = {}
        if parameters:
            self.initialize(parameters)

    def initialize(self, parameters: Optional[Mapping[str, Any]] = None) -> "ParameterBag":
        """Replace the bag's contents with the given mapping."""
        self._parameters = dict(parameters or {})
        return self

    def get(self, name: str, default: Any = None) -> Any:
        return self._parameters.get(name, default)

    def set(self, name: str, value: Any) -> "ParameterBag":
        self._parameters[name] = value
        return self

    def has(self, name: str) -> bool:
        return name in self._parameters

    def remove(self, name: str) -> "ParameterBag":
        self._parameters.pop(name, None)
        return self

    def all(self) -> Dict[str, Any]:
        """Return a shallow copy of all parameters."""
        return dict(self._parameters)

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def __repr__(self) -> str:
        return f"ParameterBag({self._parameters!r})"


class Parameterized:
    """
    Base for anything that owns a ParameterBag.

    initialize() routes each key through its typed setter when one exists,
    so nested structures (e.g. a plan given as a dict) are converted into
    their value objects.
    """

    def __init__(self, parameters: Optional[Mapping[str, Any]] = None):
        self.parameters = ParameterBag()
        self.initialize(parameters)

    def initialize(self, parameters: Optional[Mapping[str, Any]] = None):
        self.parameters.initialize()
        for key, value in (parameters or {}).items():
            name = setter_name(key)
            setter = None if name in _UNTYPED_SETTERS else getattr(self, name, None)
            if callable(setter):
                setter(value)
            else:
                self.set_parameter(key, value)
        return self

    def get_parameters(self) -> Dict[str, Any]:
        return self.parameters.all()

    def get_parameter(self, key: str, default: Any = None) -> Any:
        return self.parameters.get(key, default)

    def set_parameter(self, key: str, value: Any):
        self.parameters.set(key, value)
        return self


class ValueObject(Parameterized):
    """
    Structured parameters embedded inside a request.

    Subclasses raise InvalidItemError from validate() and turn themselves
    into the provider's wire shape in serialize().
    """

    def validate(self) -> None:
        """Check the object's own required-field rules."""
        return None

    def serialize(self) -> Dict[str, Any]:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.get_parameters() == other.get_parameters()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_parameters()!r})"
