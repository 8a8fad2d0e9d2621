"""Exclusive creation of guarded headers and source templates."""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from .config import ModuleContext
from .errors import AlreadyExistsError, WriteError
from .naming import GuardStyle, disk_name, guard_token, include_path
from .template import (
    CLOSE_TEMPLATE,
    INCLUDE_TEMPLATE,
    OPEN_TEMPLATE,
    PRAGMA_TEMPLATE,
    TemplateRenderer,
)

__all__ = ["FileWriter"]


LOGGER = logging.getLogger(__name__)


class FileWriter:
    """Create header and source files that never overwrite existing content.

    Every file is opened with exclusive creation. If anything fails after the
    file exists, the handle is closed and the partial file removed before the
    error propagates, so a failed call leaves nothing behind.
    """

    def __init__(
        self,
        base_dir: str | Path | None = None,
        *,
        once_guard: bool = False,
        module: str | None = None,
        guard_style: GuardStyle | str = GuardStyle.LETTERS,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.once_guard = once_guard
        self.module = module
        self.guard_style = GuardStyle(guard_style)
        self.renderer = renderer or TemplateRenderer()

    @classmethod
    def for_context(cls, context: ModuleContext, base_dir: str | Path | None = None) -> "FileWriter":
        return cls(
            base_dir,
            once_guard=context.once_guard,
            module=context.name,
            guard_style=context.guard_style,
        )

    def resolve(self, name: str) -> Path:
        """Return the absolute path ``name`` is created at."""

        base = self.base_dir if self.base_dir is not None else Path.cwd()
        return Path(os.path.abspath(base / disk_name(name)))

    def create_file(self, name: str) -> tuple[TextIO, Path]:
        """Open a new file for ``name``, failing if it already exists."""

        try:
            path = self.resolve(name)
        except OSError as exc:
            raise WriteError(disk_name(name), exc.strerror or str(exc)) from exc
        try:
            handle = open(path, "x", encoding="utf-8", errors="surrogateescape", newline="\n")
        except FileExistsError as exc:
            raise AlreadyExistsError(str(path)) from exc
        except OSError as exc:
            raise WriteError(str(path), exc.strerror or str(exc)) from exc
        return handle, path

    def guard(self, name: str) -> str:
        return guard_token(name, self.module, self.guard_style)

    def _render(self, template: str, **values: str) -> str:
        return self.renderer.render_string(template, values)

    def _include_lines(self, deps: Iterable[str]) -> Iterator[str]:
        for dep in deps:
            yield self._render(INCLUDE_TEMPLATE, path=include_path(dep, self.module))

    def _include_chunks(self, name: str, deps: tuple[str, ...]) -> Iterator[str]:
        guard = self.guard(name)
        if self.once_guard:
            yield PRAGMA_TEMPLATE
        yield self._render(OPEN_TEMPLATE, guard=guard)
        yield from self._include_lines(deps)
        if deps:
            yield "\n"
        yield self._render(CLOSE_TEMPLATE, guard=guard)

    def render_include(self, name: str, *deps: str) -> str:
        """Return the text :meth:`create_include_file` would write."""

        return "".join(self._include_chunks(name, deps))

    def render_source(self, *deps: str) -> str:
        """Return the text :meth:`create_source_file` would write."""

        return "".join(self._include_lines(deps))

    def create_include_file(self, name: str, *deps: str) -> Path:
        """Create a guarded header for ``name`` including each of ``deps``."""

        return self._emit(name, self._include_chunks(name, deps))

    def create_source_file(self, name: str, *deps: str) -> Path:
        """Create a source template for ``name`` made only of include lines."""

        return self._emit(name, self._include_lines(deps))

    def _emit(self, name: str, chunks: Iterable[str]) -> Path:
        handle, path = self.create_file(name)
        try:
            for chunk in chunks:
                handle.write(chunk)
            handle.close()
        except BaseException as exc:
            with contextlib.suppress(OSError):
                handle.close()
            with contextlib.suppress(FileNotFoundError):
                path.unlink()
            LOGGER.warning("removed partially written %s", path)
            if isinstance(exc, OSError):
                raise WriteError(str(path), exc.strerror or str(exc)) from exc
            raise
        LOGGER.info("created %s", path)
        return path
