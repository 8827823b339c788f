"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, linkto.toml only contains overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

# --- linkto.toml sections ---


class SiteConfig(BaseModel):
    """[site] section: where relative request URLs live."""

    model_config = {"frozen": True}

    scheme: str = "http"
    host: str = "localhost"

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}"


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    template_dir: Path | None = None
    method_param: str = "_method"
    form_class: str = "button_to"


class LinkConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    site: SiteConfig = Field(default_factory=SiteConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    routes: dict[str, str] = Field(default_factory=dict)
