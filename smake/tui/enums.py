from enum import Enum


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


class RuleState(str, Enum):
    STALE = "stale"
    CURRENT = "current"


RULE_STATE_STYLE = {
    RuleState.STALE: UIStyle.YELLOW.value,
    RuleState.CURRENT: UIStyle.GREEN.value,
}
