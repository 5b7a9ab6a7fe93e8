"""Template rendering utilities for consistent Jinja2 rendering across the project."""

from __future__ import annotations

import os
from functools import lru_cache

from jinja2 import Environment, FileSystemLoader


TEMPLATE_DIR = os.path.abspath(os.path.join(os.path.dirname(os.path.abspath(__file__)), "../template"))


@lru_cache(maxsize=None)
def _environment(template_dirs: tuple[str, ...]) -> Environment:
    return Environment(
        loader=FileSystemLoader(list(template_dirs)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        newline_sequence="\n",
        autoescape=False,
    )


class TemplateRenderer:
    """Unified template rendering utility."""

    def __init__(self, template_dir: str | list[str] | None = None):
        if template_dir is None:
            template_dirs = [TEMPLATE_DIR]
        elif isinstance(template_dir, str):
            template_dirs = [template_dir]
        else:
            template_dirs = list(template_dir)

        self.template_dirs = template_dirs
        self.env = _environment(tuple(template_dirs))

    def render_template(self, template_name: str, **kwargs) -> str:
        template = self.env.get_template(template_name)
        return template.render(**kwargs)
