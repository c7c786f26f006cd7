"""Domain layer — prefix registry, identifier rules, and generation.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
