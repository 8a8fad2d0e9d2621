"""Module scaffolding: run a creation plan through the file writer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import ModuleContext
from .errors import GuardCollisionError
from .naming import find_collisions
from .plan import FileKind, GenerationPlan, PlanTemplate, build_plan
from .writer import FileWriter

__all__ = ["ModuleScaffolder"]


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ModuleScaffolder:
    """Create the header pyramid described by a :class:`ModuleContext`."""

    context: ModuleContext
    template: PlanTemplate | None = None

    def plan(self) -> GenerationPlan:
        plan = build_plan(self.context, self.template)
        if self.context.strict:
            self.check_guards(plan)
        return plan

    def check_guards(self, plan: GenerationPlan) -> None:
        """Reject ``plan`` if two of its headers would share a guard token."""

        headers = [spec.filename for spec in plan.files if spec.kind is FileKind.INCLUDE]
        collisions = find_collisions(headers, plan.module, self.context.guard_style)
        if collisions:
            token, paths = min(collisions.items())
            raise GuardCollisionError(token, paths)

    def describe(self, plan: GenerationPlan | None = None) -> list[str]:
        """Return one ``file <- include`` line per planned file."""

        plan = plan or self.plan()
        lines = []
        for spec in plan.files:
            includes = ", ".join(plan.include_paths(spec)) or "-"
            lines.append(f"{spec.disk_name} <- {includes}")
        return lines

    def create(self, target_dir: str | Path | None = None) -> list[Path]:
        """Create every planned file inside ``target_dir`` in plan order.

        The first failure aborts the run. Files created before it are kept;
        the one that failed is removed by the writer.
        """

        plan = self.plan()
        writer = FileWriter.for_context(self.context, target_dir)
        created: list[Path] = []
        for spec in plan.files:
            if spec.kind is FileKind.SOURCE:
                path = writer.create_source_file(spec.filename, *spec.includes)
            else:
                path = writer.create_include_file(spec.filename, *spec.includes)
            created.append(path)
        LOGGER.debug("created %d files", len(created))
        return created
