"""Domain layer — the JST date/time value type and its pure operations.

This layer depends only on stdlib, pydantic, and python-dateutil.
It must never import from services, output, commands, or config.
"""
