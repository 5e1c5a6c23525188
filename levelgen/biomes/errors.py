"""Exceptions raised when biome model values are constructed with bad input."""

from __future__ import annotations

from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when a constructor argument is rejected.

    Attributes:
        param_name: Name of the constructor parameter that was rejected.
    """

    def __init__(self, message: str, param_name: str) -> None:
        super().__init__(message)
        self.param_name = param_name

    def __str__(self) -> str:
        return f"{self.args[0]} (parameter '{self.param_name}')"

    def __reduce__(self) -> tuple[Any, ...]:
        # Subclasses take different __init__ arguments, so rebuild from state.
        return (_restore_error, (type(self), self.args[0], self.param_name))


def _restore_error(
    cls: type[InvalidArgumentError], message: str, param_name: str
) -> InvalidArgumentError:
    error = cls.__new__(cls)
    InvalidArgumentError.__init__(error, message, param_name)
    return error


class MissingArgumentError(InvalidArgumentError):
    """Raised when a required argument is None."""

    def __init__(self, param_name: str) -> None:
        super().__init__("Value cannot be None", param_name)


class IdenticalBiomesError(InvalidArgumentError):
    """Raised when an affinity would relate a biome to itself."""

    def __init__(self, param_name: str = "right") -> None:
        super().__init__("Biomes must be different", param_name)
