"""Scaffolding for layered C module headers.

The package computes which consts/types/inlines headers a module needs, the
order they include each other in and the guard macro of each, then creates
them without ever touching a file that already exists. It is usable both
programmatically and through the ``cmodgen`` command line interface.
"""

from __future__ import annotations

from .config import ModuleContext
from .errors import (
    AlreadyExistsError,
    ConfigError,
    GuardCollisionError,
    ScaffoldError,
    WriteError,
)
from .naming import GuardStyle, disk_name, guard_token, include_path
from .plan import FileKind, FileSpec, GenerationPlan, PlanTemplate, build_plan
from .scaffold import ModuleScaffolder
from .writer import FileWriter

__all__ = [
    "AlreadyExistsError",
    "ConfigError",
    "FileKind",
    "FileSpec",
    "FileWriter",
    "GenerationPlan",
    "GuardCollisionError",
    "GuardStyle",
    "ModuleContext",
    "ModuleScaffolder",
    "PlanTemplate",
    "ScaffoldError",
    "WriteError",
    "build_plan",
    "disk_name",
    "guard_token",
    "include_path",
]

__version__ = "0.1.0"
