"""Domain layer: type catalog, lexical rules, and coercions.

This layer depends only on stdlib and pydantic.
It must never import from services, config, output, or commands.
"""
