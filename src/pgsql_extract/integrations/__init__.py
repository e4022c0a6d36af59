"""Integrations subpackage for pgsql-extract.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point)

The plugin module imports pytest, so it is not imported here; pytest loads
it through the entry point.
"""

__all__: list[str] = []
