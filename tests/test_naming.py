from __future__ import annotations

import os

import pytest

from cmodgen.naming import GuardStyle, disk_name, find_collisions, guard_token, include_path


@pytest.mark.parametrize(
    "filename, module, expected",
    [
        ("pub_consts.h", None, "pub_consts.h"),
        ("pub_consts.h", "", "pub_consts.h"),
        ("pub_consts.h", "foo", "foo/pub_consts.h"),
        ("Foo.h", "Foo", "Foo/Foo.h"),
    ],
)
def test_include_path(filename, module, expected):
    assert include_path(filename, module) == expected


@pytest.mark.parametrize(
    "filename, module, expected",
    [
        ("consts.h", "foo", "__FOO_CONSTS_H__"),
        ("pub_types.h", None, "__PUB_TYPES_H__"),
        ("priv_inlines.h", "MyMod", "__MYMOD_PRIV_INLINES_H__"),
        ("v2_consts.h", "lib-x", "__LIB_X_V__CONSTS_H__"),
        ("é.h", None, "_____H__"),
    ],
)
def test_guard_token_letters(filename, module, expected):
    assert guard_token(filename, module) == expected


def test_guard_token_keeps_digits_on_request():
    assert guard_token("v2_consts.h", "lib3", GuardStyle.DIGITS) == "__LIB3_V2_CONSTS_H__"
    assert guard_token("v2_consts.h", "lib3", "digits") == "__LIB3_V2_CONSTS_H__"


@pytest.mark.parametrize("module", ["foo", "Bar", "module", "ABCdef"])
def test_guard_token_shape(module):
    token = guard_token("consts.h", module)
    assert token == guard_token("consts.h", module)
    assert token == token.upper()
    assert token.startswith("__") and not token.startswith("___")
    assert token.endswith("__") and not token.endswith("___")


def test_guard_token_rejects_unknown_style():
    with pytest.raises(ValueError):
        guard_token("a.h", style="lowercase")


def test_disk_name_is_lowercase():
    assert disk_name("MyMod.h") == "mymod.h"
    assert disk_name("pub_consts.h") == "pub_consts.h"


def test_find_collisions_reports_shared_tokens():
    collisions = find_collisions(["a-b.h", "a_b.h", "c.h"])
    assert collisions == {"__A_B_H__": ("a-b.h", "a_b.h")}


def test_find_collisions_depends_on_style():
    names = ["v1.h", "v2.h"]
    assert find_collisions(names, "m") == {"__M_V__H__": ("m/v1.h", "m/v2.h")}
    assert find_collisions(names, "m", GuardStyle.DIGITS) == {}


def test_find_collisions_ignores_repeated_path():
    assert find_collisions(["a.h", "a.h"]) == {}


def test_guard_token_accepts_undecodable_bytes():
    assert guard_token("a.h", os.fsdecode(b"mod\xff")) == "__MOD__A_H__"
    assert guard_token("a.h", "mod\udcff", GuardStyle.DIGITS) == "__MOD__A_H__"
