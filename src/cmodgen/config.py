"""Resolution of command line flags into an immutable module context."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError
from .naming import GuardStyle

__all__ = ["DEFAULT_PREFIX", "PRIVATE_PREFIX", "ModuleContext", "TEMPLATES"]


LOGGER = logging.getLogger(__name__)

DEFAULT_PREFIX = "pub"
PRIVATE_PREFIX = "priv"
TEMPLATES = ("modern", "legacy")


@dataclass(frozen=True, slots=True)
class ModuleContext:
    """Everything the engine needs to know about one generation run.

    Attributes
    ----------
    name:
        The module name used to qualify include paths and to name the export
        header and source template. ``None`` when no module is known.
    once_guard:
        Emit ``#pragma once`` ahead of the guard macros.
    public_only:
        Generate the public tier only, skipping the private tier and the
        module source file.
    prefix:
        Prefix of the first tier. ``"pub"`` unless a custom prefix was given.
    custom_prefix:
        ``True`` in add mode, where a single tier named by :attr:`prefix` is
        generated instead of the public/private pair.
    guard_style:
        Normalization rule for guard tokens.
    template:
        Name of the plan template, ``"modern"`` or ``"legacy"``.
    strict:
        Reject plans in which two files share a guard token.
    """

    name: str | None = None
    once_guard: bool = False
    public_only: bool = False
    prefix: str = DEFAULT_PREFIX
    custom_prefix: bool = False
    guard_style: GuardStyle = GuardStyle.LETTERS
    template: str = "modern"
    strict: bool = False

    @classmethod
    def resolve(
        cls,
        *,
        name: str | None = None,
        use_dir: bool = False,
        once: bool = False,
        public_only: bool = False,
        add: str | None = None,
        guard_style: GuardStyle | str = GuardStyle.LETTERS,
        template: str = "modern",
        strict: bool = False,
        cwd: str | Path | None = None,
    ) -> "ModuleContext":
        """Build a :class:`ModuleContext` from raw flag values.

        Parameters
        ----------
        name:
            Explicit module name. Mutually exclusive with ``use_dir``.
        use_dir:
            Take the module name from the base name of the working directory.
        once:
            Emit ``#pragma once``.
        public_only:
            Skip the private tier.
        add:
            Custom prefix for add mode. ``None`` means the flag was not given;
            an empty value is rejected.
        cwd:
            Directory used by ``use_dir``; the process working directory when
            omitted.

        Raises
        ------
        ConfigError
            When the flags are incompatible or the working directory cannot
            be read.
        """

        if name is not None and use_dir:
            raise ConfigError("flags -name and -dir not compatible")

        try:
            style = GuardStyle(guard_style)
        except ValueError as exc:
            raise ConfigError(f"unknown guard style '{guard_style}'") from exc

        if template not in TEMPLATES:
            raise ConfigError(f"unknown template '{template}'")

        module = name or None
        if use_dir:
            module = _directory_name(cwd)

        prefix = DEFAULT_PREFIX
        custom = add is not None
        if custom:
            prefix = add
            if not prefix.strip():
                raise ConfigError("flag -add requires a non-empty prefix")
            if prefix != prefix.strip():
                raise ConfigError(f"flag -add prefix '{prefix}' has surrounding whitespace")
            if public_only:
                raise ConfigError("flags -add and -pub not compatible")

        if template == "legacy" and (custom or public_only):
            raise ConfigError("the legacy template always generates both tiers")

        context = cls(
            name=module,
            once_guard=once,
            public_only=public_only,
            prefix=prefix,
            custom_prefix=custom,
            guard_style=style,
            template=template,
            strict=strict,
        )
        LOGGER.debug("resolved %s", context)
        return context


def _directory_name(cwd: str | Path | None) -> str:
    try:
        path = Path(cwd) if cwd is not None else Path(os.getcwd())
        path = path.resolve(strict=True)
    except OSError as exc:
        raise ConfigError(f"cannot read working directory: {exc}") from exc
    if not path.name:
        raise ConfigError(f"working directory {path} has no base name")
    return path.name
