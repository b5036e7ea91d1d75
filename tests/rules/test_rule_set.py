"""Tests for whole-document rule parsing."""

from pathlib import Path

import pytest

from smake.document.models import Tag
from smake.errors import MissingSMakefileError, UnknownRuleError
from smake.rules.rule_set import RuleSet, load_rule_set, parse_rule_set


def _rule(name: str, *commands: str, inputs=(), outputs=()) -> Tag:
    children = [Tag("cmd", commands)]
    if inputs:
        children.append(Tag("in", tuple(inputs)))
    if outputs:
        children.append(Tag("out", tuple(outputs)))
    return Tag("rule", (name,), tuple(children))


def test_parse_rules_in_document_order() -> None:
    rule_set = parse_rule_set([_rule("b", "echo b"), _rule("a", "echo a")])

    assert rule_set is not None
    assert rule_set.names() == ["b", "a"]
    assert len(rule_set) == 2


def test_other_top_level_tags_are_ignored() -> None:
    rule_set = parse_rule_set(
        [Tag("version", (2,)), _rule("only", "echo"), Tag("comment", ("x",))]
    )

    assert rule_set is not None
    assert rule_set.names() == ["only"]


def test_empty_document_yields_empty_rule_set() -> None:
    rule_set = parse_rule_set([])

    assert rule_set == RuleSet()
    assert str(rule_set) == ""


def test_one_invalid_rule_rejects_document() -> None:
    tags = [_rule("a", "echo a"), Tag("rule", ("broken",)), _rule("c", "echo c")]
    assert parse_rule_set(tags) is None


def test_missing_input_rejects_document(tmp_path: Path) -> None:
    tags = [_rule("a", "echo a"), _rule("b", "cc", inputs=[str(tmp_path / "nope.c")])]
    assert parse_rule_set(tags) is None


def test_parsing_stops_at_first_invalid_rule(monkeypatch) -> None:
    from smake.rules import rule_set as rule_set_module

    seen: list[str] = []
    original = rule_set_module.parse_rule

    def _recording_parse(tag: Tag):
        seen.append(tag.values[0])
        return original(tag)

    monkeypatch.setattr(rule_set_module, "parse_rule", _recording_parse)

    tags = [_rule("a", "echo"), Tag("rule", ("bad",)), _rule("c", "echo")]
    assert rule_set_module.parse_rule_set(tags) is None
    assert seen == ["a", "bad"]


def test_get_and_select(tmp_path: Path) -> None:
    rule_set = parse_rule_set([_rule("a", "echo a"), _rule("b", "echo b")])
    assert rule_set is not None

    assert rule_set.get("b").name == "b"
    assert rule_set.get("zzz") is None
    assert [rule.name for rule in rule_set.select(["b", "a"])] == ["b", "a"]
    with pytest.raises(UnknownRuleError, match="zzz"):
        rule_set.select(["a", "zzz"])


def test_stale_rules(tmp_path: Path, touch) -> None:
    source = touch(tmp_path / "a.c", age=0)
    target = touch(tmp_path / "a.o", age=10)
    rule_set = parse_rule_set(
        [
            _rule("fresh", "cc", inputs=[str(source)], outputs=[str(target)]),
            _rule("phony", "echo"),
        ]
    )
    assert rule_set is not None

    assert [rule.name for rule in rule_set.stale()] == ["phony"]


def test_rendering_joins_rule_summaries(tmp_path: Path) -> None:
    rule_set = parse_rule_set(
        [_rule("a", "echo a", outputs=[str(tmp_path / "x")]), _rule("b", "echo b")]
    )
    assert rule_set is not None

    assert str(rule_set) == "\n".join(str(rule) for rule in rule_set)
    verbose = rule_set.describe(verbose=True).splitlines()
    assert verbose[1] == f'* "{tmp_path / "x"}" nonexistent, needs update.'
    assert len(verbose) == 3


def test_load_rule_set_from_file(tmp_path: Path, touch, write_smakefile) -> None:
    touch(tmp_path / "a.c", age=0)
    touch(tmp_path / "a.o", age=10)
    path = write_smakefile(
        tmp_path,
        f"- rule: compile\n"
        f"  cmd: gcc -c a.c -o a.o\n"
        f"  in: [{tmp_path / 'a.c'}]\n"
        f"  out: [{tmp_path / 'a.o'}]\n",
    )

    rule_set = load_rule_set(path)

    assert rule_set is not None
    [rule] = rule_set
    assert rule.update_needed is False
    assert "is newest" in str(next(rule.get_update_info()))


def test_load_rule_set_missing_file(tmp_path: Path) -> None:
    with pytest.raises(MissingSMakefileError):
        load_rule_set(tmp_path / "SMakefile")
