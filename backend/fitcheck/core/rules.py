"""
Rule Store

Loads the fit-check rule configuration once and hands it out as an
immutable RuleSet. A configuration that cannot be read, parsed or
validated is fatal: callers must not run checks against a partial rule set.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from fitcheck.models.rules import RuleSet


logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path(__file__).resolve().parent.parent / "data" / "rules.json"

REQUIRED_SECTIONS = (
    "clearance_rules",
    "furniture_specific_rules",
    "room_specific_rules",
    "accessibility_rules",
    "safety_rules",
)


class RuleConfigError(Exception):
    """The rule configuration is missing, malformed or structurally invalid."""


def parse_rules(config: Any, source: str = "<memory>") -> RuleSet:
    """
    Validate an already-decoded rules document.

    Args:
        config: Decoded JSON document
        source: Where the document came from, for error messages

    Returns:
        Frozen RuleSet

    Raises:
        RuleConfigError: If a top-level section is missing or any rule is invalid
    """
    if not isinstance(config, dict):
        raise RuleConfigError(f"{source}: rules document must be a JSON object")

    missing = [key for key in REQUIRED_SECTIONS if key not in config]
    if missing:
        raise RuleConfigError(f"{source}: missing required section(s): {', '.join(missing)}")

    try:
        return RuleSet.from_config(config)
    except ValidationError as e:
        raise RuleConfigError(f"{source}: invalid rules configuration:\n{e}") from e


def load_rules(path: Optional[Union[str, Path]] = None) -> RuleSet:
    """
    Load and validate the rules file.

    Args:
        path: JSON file to read. Defaults to the packaged rules.json.

    Returns:
        Frozen RuleSet

    Raises:
        RuleConfigError: If the file cannot be read, parsed or validated

    Example:
        >>> rules = load_rules()
        >>> rules.clearance_rules.between_furniture_cm
        45.0
    """
    rules_path = Path(path) if path else DEFAULT_RULES_PATH

    try:
        with open(rules_path, "r", encoding="utf-8") as f:
            config: Dict[str, Any] = json.load(f)
    except OSError as e:
        raise RuleConfigError(f"{rules_path}: cannot read rules file: {e}") from e
    except json.JSONDecodeError as e:
        raise RuleConfigError(f"{rules_path}: rules file is not valid JSON: {e}") from e

    rules = parse_rules(config, source=str(rules_path))
    logger.info(
        "Loaded fit-check rules from %s (%d categories, %d room types)",
        rules_path,
        len(rules.furniture_specific_rules),
        len(rules.room_specific_rules),
    )
    return rules
