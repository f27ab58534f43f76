"""Domain layer — employee model, validation rules, input parsing.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
