"""Configuration defaults and .env loading.

WHY: The scrambler has almost nothing to configure, but the few knobs it
has (input encoding, log level, an optional fixed seed for reproducible
runs) should live in one place and be overridable without touching code.

HOW: python-dotenv loads the .env file on import. Defaults are module-level
constants read through os.getenv. load_seed() parses the optional seed.

RULES:
- All defaults can be overridden via environment variables
- CLI flags win over environment values
- An unset or empty seed means "non-deterministic"
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

DEFAULT_ENCODING = os.getenv("WORD_SCRAMBLER_ENCODING", "utf-8")
"""Encoding used to read named input files."""

DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVEL_ENV_VAR = "WORD_SCRAMBLER_LOG_LEVEL"

SEED_ENV_VAR = "WORD_SCRAMBLER_SEED"


def load_seed() -> Optional[int]:
    """Load the optional random seed from the environment.

    WHY: Scrambling is random by default. A fixed seed makes a run
    reproducible, which helps when comparing outputs or writing docs.

    HOW: Reads WORD_SCRAMBLER_SEED from os.environ (populated by python-dotenv).

    RULES:
    - Unset or blank returns None
    - Any integer (including negative) is accepted
    - Raises ValueError if the value is not an integer
    """
    raw = os.getenv(SEED_ENV_VAR, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "{} must be an integer, got '{}'".format(SEED_ENV_VAR, raw)
        ) from None


def load_log_level() -> int:
    """Load the logging level from the environment.

    WHY: A typo in WORD_SCRAMBLER_LOG_LEVEL should be reported like any
    other configuration error, not surface later inside logging setup.

    HOW: Reads WORD_SCRAMBLER_LOG_LEVEL (default WARNING) and resolves the
    name through logging.getLevelName().

    RULES:
    - Names are case-insensitive ("debug" == "DEBUG")
    - Raises ValueError if the name is not a known logging level
    """
    name = os.getenv(LOG_LEVEL_ENV_VAR, "").strip().upper() or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(
            "{} must be a logging level name (DEBUG, INFO, WARNING, ERROR, "
            "CRITICAL), got '{}'".format(LOG_LEVEL_ENV_VAR, name)
        )
    return level
