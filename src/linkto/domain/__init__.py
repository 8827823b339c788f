"""Domain layer: link targets, argument normalization, URI matching.

This layer depends only on stdlib and pydantic.
It must never import from helpers, services, infrastructure, commands, or config.
"""
