"""Formatter plugins.

- formatter_registry: per-language activation of document formatters
- table_formatter: markdown pipe table reflow
"""
