"""Config file loading for logbar styles.

A config file lets an application pick its bar style without code changes:

    style:
      width: 80
      labels: false
      tick: "|"
      bar: "-"
      indicator: "#"
    logging:
      enabled: true
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from logbar.style import Style

CONFIG_PATH = Path.home() / ".logbar" / "config.yaml"

logger = logging.getLogger(__name__)

GLYPH_KEYS = ('tick', 'bar', 'indicator')
STYLE_KEYS = ('width', 'labels') + GLYPH_KEYS


def load_config(
    path: Optional[Path] = None,
    required: bool = False,
    fallback: Optional[Dict[str, Any]] = None
) -> Optional[Dict[str, Any]]:
    """Load a logbar YAML config (default ~/.logbar/config.yaml).

    Args:
        path: Config file to read instead of CONFIG_PATH.
        required: If True, exit with error when config is missing or invalid.
        fallback: Value to return when config is missing and not required.

    Returns:
        Parsed config dict, fallback, or None if missing/invalid.
    """
    config_path = Path(path) if path is not None else CONFIG_PATH

    if not config_path.exists():
        if required:
            logger.error("Config file not found at %s", config_path)
            sys.exit(1)
        return fallback

    try:
        with open(config_path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.error("Error reading config %s: %s", config_path, e)
        if required:
            sys.exit(1)
        return fallback


def _check_style_value(key: str, value: Any) -> Optional[str]:
    """Error message for a bad style value, None if it is fine."""
    if key == 'width':
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return f"width must be a non-negative integer, got {value!r}"
    elif key == 'labels':
        if not isinstance(value, bool):
            return f"labels must be true or false, got {value!r}"
    elif key in GLYPH_KEYS:
        if not isinstance(value, str) or len(value) != 1:
            return f"{key} must be a single character, got {value!r}"
    return None


def validate_style_config(config: Optional[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Check the ``style`` section of a config.

    Returns:
        List of issue dicts with 'key', 'level' ('error'|'warning') and
        'message'. Empty list means the section is usable as is.
    """
    issues: List[Dict[str, str]] = []
    if not config:
        return issues
    if not isinstance(config, dict):
        issues.append({
            'key': 'style',
            'level': 'error',
            'message': f"config must be a mapping, got {type(config).__name__}",
        })
        return issues
    if 'style' not in config:
        return issues

    section = config['style']
    if section is None:
        return issues
    if not isinstance(section, dict):
        issues.append({
            'key': 'style',
            'level': 'error',
            'message': f"style must be a mapping, got {type(section).__name__}",
        })
        return issues

    for key in sorted(section, key=str):
        if key not in STYLE_KEYS:
            issues.append({
                'key': str(key),
                'level': 'warning',
                'message': f"Unknown style key: {key}",
            })
            continue
        message = _check_style_value(key, section[key])
        if message:
            issues.append({'key': key, 'level': 'error', 'message': message})

    return issues


def style_from_config(
    config: Optional[Dict[str, Any]],
    base: Optional[Style] = None
) -> Style:
    """Build a Style from the ``style`` section of a config.

    Valid keys override ``base`` (default ``Style()``). Invalid or unknown
    keys are logged and ignored.
    """
    style = base if base is not None else Style()
    issues = validate_style_config(config)
    for issue in issues:
        log = logger.error if issue['level'] == 'error' else logger.warning
        log("Ignoring style.%s: %s", issue['key'], issue['message'])

    if any(issue['key'] == 'style' for issue in issues):
        return style

    section = (config or {}).get('style') or {}
    bad = {issue['key'] for issue in issues}
    for key in STYLE_KEYS:
        if key in section and key not in bad:
            style = getattr(style, f"with_{key}")(section[key])
    return style
