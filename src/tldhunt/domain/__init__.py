"""Domain layer — verdicts, phrase sets, and response classification.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
