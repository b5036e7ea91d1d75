from pathlib import Path
from typing import Callable, Dict

import click
from rich.console import Console

from smake.constants import DEFAULT_SMAKEFILE, SMAKEFILE_ENVVAR
from smake.errors import SMakeError
from smake.rules.models import Rule
from smake.rules.rule_set import RuleSet, load_rule_set
from smake.tui import SMakeConsoleUI
from smake.utils import configure_logging


VERBOSITY_VALUES = ["rules", "all", "none"]


def _names_argument() -> Callable:
    return click.argument("names", nargs=-1)


def _load(obj: Dict[str, Path], ui: SMakeConsoleUI) -> RuleSet:
    path = obj["file"]
    try:
        rule_set = load_rule_set(path)
    except SMakeError as exc:
        raise click.ClickException(str(exc))
    if rule_set is None:
        ui.render_invalid(str(path))
        raise click.ClickException(f"Cannot build: {path} contains invalid rules.")
    return rule_set


def _select(rule_set: RuleSet, names: tuple[str, ...]) -> list[Rule]:
    if not names:
        return list(rule_set)
    try:
        return rule_set.select(names)
    except SMakeError as exc:
        raise click.ClickException(str(exc))


def _verbose_rules(levels: tuple[str, ...]) -> bool:
    verbose = False
    for level in levels:
        verbose = level != "none"
    return verbose


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-f",
    "--file",
    "path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_SMAKEFILE,
    show_default=True,
    envvar=SMAKEFILE_ENVVAR,
    help="The SMakefile to read from.",
)
@click.option("--debug", is_flag=True, help="Log rule evaluation details.")
@click.pass_context
def cli(ctx: click.Context, path: Path, debug: bool) -> None:
    """A make program driven by YAML SMakefiles."""
    configure_logging(debug)
    ctx.obj = {"file": path}


@cli.command(help="Print rules with their update verdict.")
@_names_argument()
@click.option(
    "-v",
    "--verbose",
    "verbosity",
    multiple=True,
    type=click.Choice(VERBOSITY_VALUES, case_sensitive=False),
    help="Verbosity options (all|none|rules).",
)
@click.pass_obj
def show(obj: Dict[str, Path], names: tuple[str, ...], verbosity: tuple[str, ...]) -> None:
    ui = SMakeConsoleUI(Console())
    rules = _select(_load(obj, ui), names)
    ui.render_rules(rules, verbose=_verbose_rules(verbosity))


@cli.command(help="Summarize rule states; exit 1 if any rule needs update.")
@_names_argument()
@click.pass_obj
def status(obj: Dict[str, Path], names: tuple[str, ...]) -> None:
    ui = SMakeConsoleUI(Console())
    rules = _select(_load(obj, ui), names)
    ui.render_status(rules, source=str(obj["file"]))

    if any(rule.update_needed for rule in rules):
        raise click.exceptions.Exit(1)


@cli.command(help="Explain why each output does or does not need update.")
@_names_argument()
@click.pass_obj
def explain(obj: Dict[str, Path], names: tuple[str, ...]) -> None:
    ui = SMakeConsoleUI(Console())
    rules = _select(_load(obj, ui), names)
    ui.render_explain(rules)


def main() -> int:
    try:
        code = cli(standalone_mode=False)
    except click.exceptions.Abort:
        return 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
