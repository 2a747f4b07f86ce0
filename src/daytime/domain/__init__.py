"""Domain layer — the Daytime value type and its error taxonomy.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""
