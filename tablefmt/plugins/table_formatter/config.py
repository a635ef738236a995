"""Formatting options and their configuration sources.

Options are resolved fresh for every formatting request, in order:

1. Built-in defaults.
2. The JSON settings file (``.tablefmt/settings.json`` by default).
3. Environment variables (TABLEFMT_*).
4. Explicit overrides from the caller (e.g. CLI flags).

Settings file format:
    {
      "tableFormatter.normalizeIndentation": true,
      "tableFormatter.wideChars": "heuristic",
      "editor.tabSize": 4,
      "files.eol": "auto"
    }

Invalid values are logged and replaced by defaults; loading never raises.
"""

import json
import logging
import os
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

from .display_width import HEURISTIC, WIDE_CHAR_MODES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(".tablefmt", "settings.json")

EOL_AUTO = "auto"
EOL_CHOICES = ("\n", "\r\n", EOL_AUTO)
# Friendly spellings accepted from files, env vars and the CLI
EOL_ALIASES = {"lf": "\n", "crlf": "\r\n", "\\n": "\n", "\\r\\n": "\r\n"}

# settings.json key -> FormattingOptions field
SETTING_KEYS = {
    "tableFormatter.normalizeIndentation": "normalize_indentation",
    "editor.tabSize": "tab_size",
    "files.eol": "eol",
    "tableFormatter.wideChars": "wide_chars",
}

ENV_VARS = {
    "TABLEFMT_NORMALIZE_INDENTATION": "normalize_indentation",
    "TABLEFMT_TAB_SIZE": "tab_size",
    "TABLEFMT_EOL": "eol",
    "TABLEFMT_WIDE_CHARS": "wide_chars",
}

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")

_LINE_BREAK = re.compile(r"\r?\n")


@dataclass(frozen=True)
class FormattingOptions:
    """Options for one table reflow pass.

    Attributes:
        tab_size: Indentation unit used when normalizing (positive).
        normalize_indentation: Round table indentation to a tab stop.
        eol: Row terminator: "\\n", "\\r\\n", or "auto" (match the document).
        wide_chars: Wide character classification, "heuristic" or "unicode".
    """
    tab_size: int = 4
    normalize_indentation: bool = False
    eol: str = EOL_AUTO
    wide_chars: str = HEURISTIC

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormattingOptions":
        """Build options from field-name keys, validating each value."""
        return _apply(cls(), data, source="dict")

    def resolve_eol(self, document_text: Optional[str] = None) -> "FormattingOptions":
        """Return options whose ``eol`` is concrete.

        "auto" takes the first line break found in ``document_text``,
        falling back to "\\n".
        """
        if self.eol != EOL_AUTO:
            return self
        eol = "\n"
        if document_text:
            match = _LINE_BREAK.search(document_text)
            if match:
                eol = match.group(0)
        return replace(self, eol=eol)


def _parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    return None


def _parse_tab_size(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        size = int(value)
    except (TypeError, ValueError):
        return None
    return size if size > 0 else None


def _parse_eol(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = EOL_ALIASES.get(value.lower(), value)
    return value if value in EOL_CHOICES else None


def _parse_wide_chars(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.lower() in WIDE_CHAR_MODES:
        return value.lower()
    return None


_PARSERS = {
    "normalize_indentation": _parse_bool,
    "tab_size": _parse_tab_size,
    "eol": _parse_eol,
    "wide_chars": _parse_wide_chars,
}


def _apply(options: FormattingOptions, values: Dict[str, Any], source: str) -> FormattingOptions:
    """Overlay validated field values onto ``options``."""
    changes: Dict[str, Any] = {}
    for field_name, raw in values.items():
        parser = _PARSERS.get(field_name)
        if parser is None:
            logger.debug("Ignoring unknown option '%s' from %s", field_name, source)
            continue
        if raw is None:
            continue
        parsed = parser(raw)
        if parsed is None:
            logger.warning("Invalid value %r for '%s' from %s, keeping %r",
                           raw, field_name, source, getattr(options, field_name))
            continue
        changes[field_name] = parsed
    return replace(options, **changes) if changes else options


def read_settings_file(config_path: str) -> Dict[str, Any]:
    """Read a settings file and map its keys to option field names.

    Returns:
        Field-name keyed values; empty if the file is missing or invalid.
    """
    path = Path(config_path)
    if not path.exists():
        logger.debug("Settings file does not exist: %s", path)
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.warning("Invalid JSON in settings file %s: %s", path, e)
        return {}
    except OSError as e:
        logger.warning("Error reading settings file %s: %s", path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Settings file must contain a dict: %s", path)
        return {}

    return {SETTING_KEYS[key]: value for key, value in data.items() if key in SETTING_KEYS}


def read_environment() -> Dict[str, Any]:
    """Option values set through TABLEFMT_* environment variables."""
    values = {}
    for var, field_name in ENV_VARS.items():
        value = os.environ.get(var)
        if value:
            values[field_name] = value
    return values


def load_formatting_options(
    config_path: Optional[str] = None,
    document_text: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> FormattingOptions:
    """Resolve FormattingOptions from file, environment and overrides.

    Args:
        config_path: Settings file; defaults to ``.tablefmt/settings.json``.
        document_text: When given, an "auto" eol is resolved against it.
        overrides: Field-name keyed values that win over every other source.

    Returns:
        Validated options.
    """
    options = FormattingOptions()
    path = config_path or DEFAULT_CONFIG_PATH
    options = _apply(options, read_settings_file(path), source=path)
    options = _apply(options, read_environment(), source="environment")
    if overrides:
        options = _apply(options, overrides, source="overrides")
    if document_text is not None:
        options = options.resolve_eol(document_text)
    return options
