"""linkto: link-generation helpers for server-side views."""

from __future__ import annotations

__version__ = "0.1.0"
