from typing import Final


DEFAULT_SMAKEFILE: Final[str] = "SMakefile"
SMAKEFILE_ENVVAR: Final[str] = "SMAKE_FILE"

RULE_TAG: Final[str] = "rule"
CMD_TAG: Final[str] = "cmd"
INPUT_TAG: Final[str] = "in"
OUTPUT_TAG: Final[str] = "out"

LOGGER_NAME: Final[str] = "smake"
