"""Creation plans: which files to generate and what each one includes."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .config import PRIVATE_PREFIX, ModuleContext
from .naming import disk_name, include_path

__all__ = [
    "FileKind",
    "FileSpec",
    "GenerationPlan",
    "LEGACY",
    "MODERN",
    "PLAN_TEMPLATES",
    "PlanTemplate",
    "TierDescriptor",
    "build_plan",
    "tiers",
]


LOGGER = logging.getLogger(__name__)

_TIER_FILES = ("consts", "types", "inlines")
_COLLECTOR = "includes"


class FileKind(str, Enum):
    """Kind of a generated file."""

    INCLUDE = "include"
    SOURCE = "source"


class FileSpec(BaseModel):
    """One file of a plan together with the includes it references."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    logical: str = Field(..., description="Logical role, e.g. 'consts' or 'export'.")
    filename: str = Field(..., description="Name used in include paths and guards.")
    kind: FileKind = Field(default=FileKind.INCLUDE, description="Header with guard or source template.")
    includes: Tuple[str, ...] = Field(default=(), description="Filenames included, in order.")

    @property
    def disk_name(self) -> str:
        return disk_name(self.filename)


class TierDescriptor(BaseModel):
    """A single consts/types/inlines pass sharing one prefix."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    prefix: str = Field(..., description="Prefix of every file in the tier.")
    collector: bool = Field(default=False, description="Append a '<prefix>_includes.h' file.")
    bridge_from: str | None = Field(None, description="File the consts header includes, if any.")

    def filenames(self) -> List[str]:
        names = [f"{self.prefix}_{part}.h" for part in _TIER_FILES]
        if self.collector:
            names.append(f"{self.prefix}_{_COLLECTOR}.h")
        return names

    @property
    def last(self) -> str:
        return self.filenames()[-1]


class PlanTemplate(BaseModel):
    """Shape of the generated pyramid.

    ``collector`` adds a ``<prefix>_includes.h`` file to each tier, ``bridge``
    makes the private consts header include the public tier, and
    ``exports_last`` creates the export header after both tiers instead of
    right after the public one.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    collector: bool = False
    bridge: bool = True
    exports_last: bool = False


MODERN = PlanTemplate(name="modern")
LEGACY = PlanTemplate(name="legacy", collector=True, exports_last=True)
PLAN_TEMPLATES = {template.name: template for template in (MODERN, LEGACY)}


class GenerationPlan(BaseModel):
    """Ordered files to create for one run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    module: str | None = Field(None, description="Module qualifying include paths.")
    files: Tuple[FileSpec, ...] = Field(default=(), description="Files in creation order.")

    def filenames(self) -> List[str]:
        return [spec.filename for spec in self.files]

    def include_paths(self, spec: FileSpec) -> List[str]:
        """Return the include directives ``spec`` writes, module-qualified."""

        return [include_path(name, self.module) for name in spec.includes]


def _template_for(context: ModuleContext, template: PlanTemplate | None) -> PlanTemplate:
    if template is not None:
        return template
    return PLAN_TEMPLATES[context.template]


def tiers(context: ModuleContext, template: PlanTemplate | None = None) -> List[TierDescriptor]:
    """Return the tier passes ``build_plan`` will run for ``context``."""

    template = _template_for(context, template)
    first = TierDescriptor(prefix=context.prefix, collector=template.collector)
    if context.custom_prefix or context.public_only:
        return [first]
    second = TierDescriptor(
        prefix=PRIVATE_PREFIX,
        collector=template.collector,
        bridge_from=first.last if template.bridge else None,
    )
    return [first, second]


def _tier_files(tier: TierDescriptor) -> List[FileSpec]:
    specs: List[FileSpec] = []
    previous = tier.bridge_from
    for filename in tier.filenames():
        logical = filename[len(tier.prefix) + 1 : -len(".h")]
        includes = (previous,) if previous else ()
        specs.append(FileSpec(logical=logical, filename=filename, includes=includes))
        previous = filename
    return specs


def build_plan(context: ModuleContext, template: PlanTemplate | None = None) -> GenerationPlan:
    """Compute the ordered creation plan for ``context``.

    Within a tier every file includes the one created just before it. The
    private consts header bridges to the last public file, the export header
    includes the last public file and the source template the last private
    one. In add mode the chain is ``<prefix>_consts.h`` through ``<prefix>.h``
    and ``<prefix>.c``.
    """

    template = _template_for(context, template)
    passes = tiers(context, template)
    files: List[FileSpec] = []

    if context.custom_prefix:
        (tier,) = passes
        files.extend(_tier_files(tier))
        header = f"{tier.prefix}.h"
        files.append(FileSpec(logical="export", filename=header, includes=(tier.last,)))
        files.append(
            FileSpec(logical="source", filename=f"{tier.prefix}.c", kind=FileKind.SOURCE, includes=(header,))
        )
        return _finish(context, files)

    public = passes[0]
    export = None
    if context.name:
        export = FileSpec(logical="export", filename=f"{context.name}.h", includes=(public.last,))

    files.extend(_tier_files(public))
    if export is not None and not template.exports_last:
        files.append(export)

    private = passes[1] if len(passes) > 1 else None
    if private is not None:
        files.extend(_tier_files(private))

    if export is not None and template.exports_last:
        files.append(export)

    if context.name and private is not None:
        files.append(
            FileSpec(
                logical="source",
                filename=f"{context.name}.c",
                kind=FileKind.SOURCE,
                includes=(private.last,),
            )
        )

    return _finish(context, files)


def _finish(context: ModuleContext, files: List[FileSpec]) -> GenerationPlan:
    plan = GenerationPlan(module=context.name, files=tuple(files))
    LOGGER.debug("planned %d files: %s", len(plan.files), ", ".join(plan.filenames()))
    return plan
