"""Domain layer — rules, validated values, and results.

This layer depends only on stdlib and pydantic.
It must never import from services, config, commands, or output.
"""
