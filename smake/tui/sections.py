from rich.panel import Panel
from rich.text import Text

from smake.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(title: str, body, style: str = UIStyle.BLUE.value) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def note(title: str, body: str, style: str) -> Panel:
        return Panel(Text(body), title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def bullets(title: str, items: list[str], style: str) -> Panel:
        return UISection.note(title, "\n".join(f"- {item}" for item in items), style)
