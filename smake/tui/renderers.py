from rich.console import Console
from rich.text import Text

from smake.rules.models import Rule
from smake.tui.enums import UIStyle
from smake.tui.sections import UISection
from smake.tui.tables import ExplainLines, StatusTable
from smake.utils import compact_home_path


class SMakeConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_rules(self, rules: list[Rule], verbose: bool = False) -> None:
        if not rules:
            self._render_no_rules()
            return
        for rule in rules:
            self.console.print(Text(rule.describe(verbose)), soft_wrap=True)

    def render_status(self, rules: list[Rule], source: str) -> None:
        stale = any(rule.update_needed for rule in rules)
        self.console.print(
            UISection.wrap(
                "overview",
                StatusTable.summary_block(rules, source=compact_home_path(source)),
                style=UIStyle.YELLOW.value if stale else UIStyle.BLUE.value,
            )
        )
        if not rules:
            self._render_no_rules()
            return
        self.console.print(
            UISection.wrap(
                "rules",
                StatusTable.rules_table(rules),
                style=UIStyle.CYAN.value,
            )
        )

    def render_explain(self, rules: list[Rule]) -> None:
        if not rules:
            self._render_no_rules()
            return
        for rule in rules:
            for line in ExplainLines.rule_block(rule):
                self.console.print(line, soft_wrap=True)

    def render_invalid(self, source: str) -> None:
        self.console.print(
            UISection.bullets(
                "errors",
                [
                    f"{compact_home_path(source)}: invalid rules, nothing loaded.",
                    "Rerun with --debug for details.",
                ],
                style=UIStyle.RED.value,
            )
        )

    def _render_no_rules(self) -> None:
        self.console.print(
            UISection.note("rules", "No rules defined.", style=UIStyle.DIM.value)
        )
