"""Validate ``rule`` tags and turn them into rules."""

from __future__ import annotations

import logging
from typing import Any, Optional

from smake.constants import CMD_TAG, INPUT_TAG, OUTPUT_TAG, RULE_TAG
from smake.document.models import Tag
from smake.errors import SMakeFileError
from smake.rules.models import Rule

logger = logging.getLogger(__name__)


def parse_rule(tag: Tag) -> Optional[Rule]:
    """Return the rule described by ``tag``, or ``None`` if it is invalid.

    A valid tag is named ``rule`` and carries exactly one non-empty string
    value, the rule name. Its ``cmd`` children provide at least one command,
    ``in`` and ``out`` children provide inputs and outputs. Every value must
    be a string and every input must exist.
    """
    if tag.name != RULE_TAG:
        logger.warning("Rejected tag %r: not a rule", tag.name)
        return None
    if len(tag.values) != 1 or not isinstance(tag.values[0], str) or not tag.values[0]:
        logger.warning("Rejected rule %r: expected a single string name", tag.values)
        return None
    name = tag.values[0]

    commands = _collect(tag, CMD_TAG)
    if not commands:
        logger.warning("Rejected rule %r: no commands", name)
        return None
    inputs = _collect(tag, INPUT_TAG)
    outputs = _collect(tag, OUTPUT_TAG)

    for value in (*commands, *inputs, *outputs):
        if not isinstance(value, str):
            logger.warning("Rejected rule %r: non-string value %r", name, value)
            return None

    try:
        return Rule(name=name, commands=commands, inputs=inputs, outputs=outputs)
    except (SMakeFileError, OSError) as exc:
        logger.warning("Rejected rule %r: %s", name, exc)
        return None


def _collect(tag: Tag, child_name: str) -> tuple[Any, ...]:
    return tuple(value for child in tag.child_tags(child_name) for value in child.values)
