"""Domain layer — entity models and reference token rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, routing, bot, or config.
"""
