"""Build rule data models and staleness checks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from smake import filesystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputUpdateInfo:
    """Why a single output does or does not need to be rebuilt.

    ``input`` names the first input found to be newer than the output. It is
    ``None`` when the output is missing or newer than every input.
    """

    output: str
    needs_update: bool
    exists: bool
    input: Optional[str] = None

    def __str__(self) -> str:
        if not self.exists:
            return f'"{self.output}" nonexistent, needs update.'
        if self.needs_update:
            return f'"{self.output}" is older than "{self.input}", needs update.'
        return f'"{self.output}" is newest, does not need update.'


@dataclass(frozen=True)
class Rule:
    """A named set of commands turning input files into output files.

    Input timestamps are read once, when the rule is created, and
    ``update_needed`` is derived from them. Every input must exist:
    ``MissingInputError`` is raised otherwise. Use ``refreshed()`` to
    re-evaluate a rule against the current filesystem.
    """

    name: str
    commands: tuple[str, ...]
    inputs: tuple[str, ...] = ()
    outputs: tuple[str, ...] = ()
    input_timestamps: tuple[int, ...] = field(init=False, repr=False)
    update_needed: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "commands", tuple(self.commands))
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))

        timestamps = tuple(filesystem.last_modified(path) for path in self.inputs)
        object.__setattr__(self, "input_timestamps", timestamps)
        object.__setattr__(self, "update_needed", self._compute_update_needed())
        logger.debug(
            "rule %r: %d inputs, %d outputs, update needed: %s",
            self.name,
            len(self.inputs),
            len(self.outputs),
            self.update_needed,
        )

    def _compute_update_needed(self) -> bool:
        # No inputs counts as an infinitely recent input.
        if not self.outputs or not self.input_timestamps:
            return True
        last_input_mod = max(self.input_timestamps)
        for output in self.outputs:
            output_mod = filesystem.last_modified_or_none(output)
            if output_mod is None or output_mod < last_input_mod:
                return True
        return False

    def get_update_info(self) -> Iterator[OutputUpdateInfo]:
        """Yield one record per output, in output order.

        Output timestamps are read on every call; input timestamps are the
        ones captured when the rule was created.
        """
        for output in self.outputs:
            output_mod = filesystem.last_modified_or_none(output)
            if output_mod is None:
                yield OutputUpdateInfo(output=output, needs_update=True, exists=False)
                continue

            trigger = next(
                (
                    path
                    for path, stamp in zip(self.inputs, self.input_timestamps)
                    if stamp > output_mod
                ),
                None,
            )
            yield OutputUpdateInfo(
                output=output,
                needs_update=trigger is not None,
                exists=True,
                input=trigger,
            )

    def stale_outputs(self) -> list[str]:
        return [info.output for info in self.get_update_info() if info.needs_update]

    def refreshed(self) -> Rule:
        return Rule(
            name=self.name,
            commands=self.commands,
            inputs=self.inputs,
            outputs=self.outputs,
        )

    def describe(self, verbose: bool = False) -> str:
        summary = str(self)
        if not verbose:
            return summary
        return summary + "".join(f"\n* {info}" for info in self.get_update_info())

    def __str__(self) -> str:
        verdict = "needs" if self.update_needed else "does not need"
        return (
            f"{{{_quoted(self.inputs)}}} -> {{{_quoted(self.outputs)}}} "
            f'via "{"; ".join(self.commands)}" ({verdict} update)'
        )


def _quoted(paths: Sequence[str]) -> str:
    return ", ".join(_escape(path) for path in paths)


def _escape(path: str) -> str:
    escaped = path.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
