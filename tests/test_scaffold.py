from __future__ import annotations

from pathlib import Path

import pytest

from cmodgen.config import ModuleContext
from cmodgen.errors import AlreadyExistsError, GuardCollisionError
from cmodgen.plan import FileSpec, GenerationPlan
from cmodgen.scaffold import ModuleScaffolder


def test_scaffolder_creates_expected_structure(tmp_path: Path):
    scaffolder = ModuleScaffolder(ModuleContext.resolve(name="foo"))
    created = scaffolder.create(tmp_path)

    assert [path.name for path in created] == [
        "pub_consts.h",
        "pub_types.h",
        "pub_inlines.h",
        "foo.h",
        "priv_consts.h",
        "priv_types.h",
        "priv_inlines.h",
        "foo.c",
    ]
    assert (tmp_path / "foo.c").read_text(encoding="utf-8") == '#include "foo/priv_inlines.h"\n'
    assert '#include "foo/pub_inlines.h"\n' in (tmp_path / "priv_consts.h").read_text(encoding="utf-8")


def test_scaffolder_stops_at_first_existing_file(tmp_path: Path):
    (tmp_path / "priv_consts.h").write_text("// mine\n", encoding="utf-8")
    scaffolder = ModuleScaffolder(ModuleContext.resolve(name="foo"))

    with pytest.raises(AlreadyExistsError):
        scaffolder.create(tmp_path)

    assert (tmp_path / "priv_consts.h").read_text(encoding="utf-8") == "// mine\n"
    assert not (tmp_path / "priv_types.h").exists()
    assert not (tmp_path / "foo.c").exists()


def test_legacy_pipeline(tmp_path: Path):
    scaffolder = ModuleScaffolder(ModuleContext.resolve(name="foo", template="legacy"))
    scaffolder.create(tmp_path)

    assert len(list(tmp_path.iterdir())) == 10
    assert (tmp_path / "foo.h").read_text(encoding="utf-8") == (
        "#ifndef __FOO_FOO_H__\n"
        "#define __FOO_FOO_H__\n"
        "\n"
        '#include "foo/pub_includes.h"\n'
        "\n"
        "#endif //__FOO_FOO_H__\n"
    )
    assert (tmp_path / "foo.c").read_text(encoding="utf-8") == '#include "foo/priv_includes.h"\n'


def test_describe_lists_plan(tmp_path: Path):
    scaffolder = ModuleScaffolder(ModuleContext.resolve(add="xxx"))
    assert scaffolder.describe() == [
        "xxx_consts.h <- -",
        "xxx_types.h <- xxx_consts.h",
        "xxx_inlines.h <- xxx_types.h",
        "xxx.h <- xxx_inlines.h",
        "xxx.c <- xxx.h",
    ]
    assert list(tmp_path.iterdir()) == []


def test_strict_mode_accepts_regular_plans(tmp_path: Path):
    scaffolder = ModuleScaffolder(ModuleContext.resolve(name="foo", strict=True))
    assert len(scaffolder.create(tmp_path)) == 8


def test_strict_mode_rejects_shared_guards():
    scaffolder = ModuleScaffolder(ModuleContext.resolve(strict=True))
    plan = GenerationPlan(
        files=(
            FileSpec(logical="consts", filename="a-b.h"),
            FileSpec(logical="types", filename="a_b.h", includes=("a-b.h",)),
        )
    )
    with pytest.raises(GuardCollisionError) as excinfo:
        scaffolder.check_guards(plan)
    assert excinfo.value.token == "__A_B_H__"
    assert excinfo.value.paths == ("a-b.h", "a_b.h")
