"""Shared Jinja2 template loading with an optional override directory."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from linkto.infrastructure.attrs import html_attributes


def build_template_environment(group: str, *, override_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    Overrides are looked up in ``override_root / group`` and then in
    ``override_root`` itself, so a flat directory of templates also works.
    Autoescaping is always on: these templates emit HTML.
    """

    loaders: list[BaseLoader] = []
    if override_root is not None:
        loaders.append(FileSystemLoader([str(override_root / group), str(override_root)]))

    loaders.append(PackageLoader("linkto", f"templates/{group}"))
    env = Environment(loader=ChoiceLoader(loaders), autoescape=True)
    env.filters["html_attrs"] = html_attributes
    return env
