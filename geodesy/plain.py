"""A context provider that also reads macros and blobs from data directories."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from pathlib import Path

from geodesy.minimal import BadParamError, Minimal, NotFoundError, _extension

_SECTION = "resources"


def _data_local_dir() -> Path | None:
    """The per-user local data directory of the platform, if one can be found."""
    home = Path.home()
    if sys.platform.startswith("win"):
        local = os.environ.get("LOCALAPPDATA")
        return Path(local) if local else None
    if sys.platform == "darwin":
        return home / "Library" / "Application Support"
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return home / ".local" / "share"


def _default_paths() -> list[Path]:
    paths = [Path(".", "geodesy")]
    user_dir = _data_local_dir()
    if user_dir is not None:
        paths.append(user_dir / "geodesy")
    return paths


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text()
    except (OSError, UnicodeDecodeError):
        return None


def _lookup_in_register(register: str, suffix: str) -> str | None:
    """The item tagged ``<suffix>`` in a register text, up to the next tag."""
    tag = f"<{suffix}>"
    start = register.find(tag)
    if start < 0:
        return None
    start += len(tag)
    end = register.find("<", start)
    if end < 0:
        return register[start:].strip()
    return register[start:end].strip()


class Plain(Minimal):
    """A context provider supporting run-time defined operators and resources,
    plus macros and blobs found in a list of data directories.

    Resources named ``prefix:suffix`` are looked up, for each data directory
    in turn, first in ``resources/prefix_suffix.resource``, then as the
    ``<suffix>`` item of ``resources/prefix.register``.
    """

    def __init__(
        self,
        builtin_adaptors: bool = True,
        paths: Iterable[str | os.PathLike[str]] | None = None,
    ) -> None:
        super().__init__(builtin_adaptors)
        self.paths: list[Path] = (
            _default_paths() if paths is None else [Path(p) for p in paths]
        )

    def get_resource(self, name: str) -> str:
        """The definition of ``name``: run-time registered, or from the data paths."""
        try:
            return super().get_resource(name)
        except NotFoundError:
            pass

        parts = name.split(":")
        if len(parts) != 2:
            raise BadParamError("needing prefix:suffix format", name)
        prefix, suffix = parts

        resource = f"{prefix}_{suffix}.resource"
        register = f"{prefix}.register"

        for path in self.paths:
            text = _read_text(path / _SECTION / resource)
            if text is not None:
                return text.strip()

            text = _read_text(path / _SECTION / register)
            if text is not None:
                item = _lookup_in_register(text, suffix)
                if item is not None:
                    return item

        raise NotFoundError(name, ": User defined resource")

    def get_blob(self, name: str) -> bytes:
        """Read ``<path>/<extension>/<name>`` from the first data path holding it."""
        ext = _extension(name)
        for path in self.paths:
            try:
                return (path / ext / name).read_bytes()
            except OSError:
                continue
        raise NotFoundError(name, ": Blob")