"""Trace logging utility.

Component-tagged trace lines for the formatter registry and the CLI,
written to the file named by TABLEFMT_TRACE_LOG. Tracing is off unless
the variable names a file.

Usage:
    from tablefmt.trace import trace, trace_write, resolve_trace_path

    trace("FormatterRegistry", "register_document_formatter: markdown")
    trace("cli", "cannot read notes.md", include_traceback=True)

    # Explicit path resolution:
    path = resolve_trace_path("TABLEFMT_TRACE_LOG")
    trace_write("cli", msg, path)
"""

import os
import traceback as _traceback_module
from datetime import datetime
from typing import Optional, Set


TRACE_ENV_VAR = "TABLEFMT_TRACE_LOG"

# Directories already created, so repeated writes skip os.makedirs.
_ensured_dirs: Set[str] = set()


def _ensure_parent_dirs(file_path: str) -> None:
    """Create parent directories for a file path if they don't exist."""
    parent = os.path.dirname(os.path.abspath(file_path))
    if parent not in _ensured_dirs:
        os.makedirs(parent, exist_ok=True)
        _ensured_dirs.add(parent)


def resolve_trace_path(*env_vars: str) -> Optional[str]:
    """Resolve trace file path from environment variables.

    Checks env vars in order and returns the first non-empty value.

    Args:
        *env_vars: Environment variable names to check, in priority order.

    Returns:
        Resolved file path, or None if tracing is disabled.
    """
    for var in env_vars:
        value = os.environ.get(var)
        if value == "":
            return None  # Explicitly disabled
        if value:
            return value
    return None


def trace_write(
    component: str,
    msg: str,
    trace_path: Optional[str],
    *,
    include_traceback: bool = False,
) -> None:
    """Write a trace message to the given path.

    Creates parent directories automatically. Never raises.

    Args:
        component: Component name for the log prefix (e.g., "FormatterRegistry").
        msg: Message to write.
        trace_path: File path to write to. If None, does nothing.
        include_traceback: If True, append the current exception traceback.
    """
    if not trace_path:
        return
    try:
        _ensure_parent_dirs(trace_path)
        with open(trace_path, "a", encoding="utf-8") as f:
            ts = datetime.now().strftime("%H:%M:%S.%f")[:-3]
            f.write(f"[{ts}] [{component}] {msg}\n")
            if include_traceback:
                tb = _traceback_module.format_exc()
                if tb and tb.strip() != "NoneType: None":
                    f.write(f"[{ts}] [{component}] Traceback:\n{tb}\n")
            f.flush()
    except OSError:
        pass  # Tracing must not break formatting


def trace(
    component: str,
    msg: str,
    *,
    include_traceback: bool = False,
) -> None:
    """Write a trace message to the TABLEFMT_TRACE_LOG file.

    Args:
        component: Component name for the log prefix.
        msg: Message to write.
        include_traceback: If True, append the current exception traceback.
    """
    path = resolve_trace_path(TRACE_ENV_VAR)
    trace_write(component, msg, path, include_traceback=include_traceback)
