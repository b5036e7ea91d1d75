from collections import Counter

from rich.table import Column, Table
from rich.text import Text

from smake.rules.models import OutputUpdateInfo, Rule
from smake.tui.enums import RULE_STATE_STYLE, RuleState, UIStyle


def rule_state(rule: Rule) -> RuleState:
    return RuleState.STALE if rule.update_needed else RuleState.CURRENT


class StatusTable:
    @staticmethod
    def summary_block(rules: list[Rule], source: str):
        counts = Counter(rule_state(rule).value for rule in rules)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("File", Text(source))
        table.add_row("Rules", str(len(rules)))
        table.add_row("States", "  ".join(chips))
        return table

    @staticmethod
    def rules_table(rules: list[Rule]) -> Table:
        table = Table(
            Column(header="Rule", overflow="fold"),
            Column(header="State", width=8),
            Column(header="Inputs", width=6, justify="right"),
            Column(header="Outputs", width=7, justify="right"),
            Column(header="Stale outputs", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for rule in rules:
            state = rule_state(rule)
            style = RULE_STATE_STYLE.get(state, UIStyle.WHITE.value)
            table.add_row(
                Text(rule.name),
                Text(state.value, style=style),
                str(len(rule.inputs)),
                str(len(rule.outputs)),
                Text(", ".join(rule.stale_outputs())),
            )
        return table


class ExplainLines:
    @staticmethod
    def info_line(info: OutputUpdateInfo) -> Text:
        style = UIStyle.YELLOW.value if info.needs_update else UIStyle.DIM.value
        return Text(f"* {info}", style=style)

    @staticmethod
    def rule_block(rule: Rule) -> list[Text]:
        state = rule_state(rule)
        heading = Text(rule.name, style="bold")
        heading.append(f" ({state.value})", style=RULE_STATE_STYLE[state])
        lines = [heading]
        infos = list(rule.get_update_info())
        if not infos:
            lines.append(Text("* no outputs declared, always needs update.", style=UIStyle.YELLOW.value))
        lines.extend(ExplainLines.info_line(info) for info in infos)
        return lines
