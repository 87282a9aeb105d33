from enum import Enum


class Lifetime(str, Enum):
    """Defines the lifetime of a value produced by a binder.

    Attributes:
        TRANSIENT: New value created on each resolution.
        SINGLETON: Value created once and shared by every resolution.
    """

    TRANSIENT = "transient"
    SINGLETON = "singleton"

    def __str__(self) -> str:
        return self.value


class CreationKind(str, Enum):
    """Closed set of creation strategies a binder can hold."""

    VALUE = "value"
    FACTORY = "factory"
    CONSTRUCTOR = "constructor"

    def __str__(self) -> str:
        return self.value
