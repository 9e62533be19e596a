"""Domain layer — field schema, key pool, and the validated field groups.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
