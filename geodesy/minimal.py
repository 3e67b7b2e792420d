"""A minimal context provider: built-in adaptors, user operators and macros."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

# Canonically named, built in coordinate adaptors, as (name, definition) pairs.
BUILTIN_ADAPTORS: tuple[tuple[str, str], ...] = (
    ("geo:in", "adapt from=neuf_deg"),
    ("geo:out", "adapt to=neuf_deg"),
    ("gis:in", "adapt from=enuf_deg"),
    ("gis:out", "adapt to=enuf_deg"),
    ("neu:in", "adapt from=neuf"),
    ("neu:out", "adapt to=neuf"),
    ("enu:in", "adapt from=enuf"),
    ("enu:out", "adapt to=enuf"),
)

OpConstructor = Callable[..., Any]

_NO_GRIDS_MESSAGE = (
    "Grid access by identifier not supported by the Minimal context provider"
)


# ----- Errors -------------------------------------------------------------------


class GeodesyError(Exception):
    """Base class of all errors raised by context providers."""


class NotFoundError(GeodesyError, LookupError):
    """A named item (operator constructor, resource, blob, grid) was not found."""

    def __init__(self, name: str, detail: str = "") -> None:
        super().__init__(f"Not found: {name}{detail}")
        self.name = name
        self.detail = detail


class BadParamError(GeodesyError, ValueError):
    """A parameter or name was malformed."""

    def __init__(self, parameter: str, value: str) -> None:
        super().__init__(f"Bad parameter: {parameter} ({value})")
        self.parameter = parameter
        self.value = value


# ----- The minimal provider -----------------------------------------------------


def _extension(name: str) -> str:
    """File extension of ``name`` without the leading dot, or an empty string."""
    return Path(name).suffix.lstrip(".")


class Minimal:
    """A minimalistic context provider.

    Supports only built in and run-time defined operators and resources.
    Usually sufficient for cartographic uses and for test authoring.
    """

    def __init__(self, builtin_adaptors: bool = True) -> None:
        self._constructors: dict[str, OpConstructor] = {}
        self._resources: dict[str, str] = {}
        if builtin_adaptors:
            for name, definition in BUILTIN_ADAPTORS:
                self.register_resource(name, definition)

    def globals(self) -> dict[str, str]:
        """Globally defined default values."""
        return {"ellps": "GRS80"}

    def register_op(self, name: str, constructor: OpConstructor) -> None:
        """Register a user defined operator constructor under ``name``."""
        self._constructors[name] = constructor

    def get_op(self, name: str) -> OpConstructor:
        """The constructor registered under ``name``."""
        try:
            return self._constructors[name]
        except KeyError:
            raise NotFoundError(name, ": User defined constructor") from None

    def register_resource(self, name: str, definition: str) -> None:
        """Register a user defined resource (macro, parameter set...)."""
        self._resources[name] = definition

    def get_resource(self, name: str) -> str:
        """The definition of the resource registered under ``name``."""
        try:
            return self._resources[name]
        except KeyError:
            raise NotFoundError(name, ": User defined resource") from None

    def get_blob(self, name: str) -> bytes:
        """Read the blob ``./geodesy/<extension>/<name>``."""
        path = Path(".", "geodesy", _extension(name), name)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise GeodesyError(f"Cannot read blob {name}: {exc}") from exc

    def get_grid(self, name: str) -> Any:
        """Grids are not available from this provider: always raises."""
        if not name:
            raise BadParamError("grid name", repr(name))
        raise GeodesyError(f"{_NO_GRIDS_MESSAGE} (requested: {name})")