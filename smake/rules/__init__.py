from smake.rules.models import OutputUpdateInfo, Rule
from smake.rules.parser import parse_rule
from smake.rules.rule_set import RuleSet, load_rule_set, parse_rule_set

__all__ = [
    "OutputUpdateInfo",
    "Rule",
    "RuleSet",
    "load_rule_set",
    "parse_rule",
    "parse_rule_set",
]
