"""Infrastructure layer: concrete collaborators for the domain contracts.

Route building, URL resolution, the active request, and HTML rendering.
"""
