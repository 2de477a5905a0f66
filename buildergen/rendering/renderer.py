"""Renders collected builder methods into the generated module source."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, TemplateNotFound

from ..errors import TemplateRenderError
from ..logging import get_logger
from ..models import Method, TemplateData
from ..types import TypePatcher
from . import jsdoc

DELIMITERS = {
    "variable_start_string": "«",
    "variable_end_string": "»",
    "block_start_string": "«%",
    "block_end_string": "%»",
    "comment_start_string": "«#",
    "comment_end_string": "#»",
}


class TemplateRenderer:
    """Feeds per-method template data into a jinja2 template using «» delimiters."""

    def __init__(
        self,
        template_path: Path,
        patcher: TypePatcher,
        *,
        module: str,
        instance: str,
    ) -> None:
        self.template_path = template_path
        self.patcher = patcher
        self.module = module
        self.instance = instance
        self.logger = get_logger("renderer")
        self._env = Environment(
            loader=FileSystemLoader(str(template_path.parent)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            **DELIMITERS,
        )

    def template_data(self, method: Method) -> TemplateData:
        return TemplateData(
            name=method.name,
            comment=jsdoc.block(method, self.patcher.patch),
            params=", ".join(method.rendered_parameters),
        )

    def render(self, methods: Sequence[Method]) -> str:
        data: List[TemplateData] = [self.template_data(method) for method in methods]
        try:
            template = self._env.get_template(self.template_path.name)
        except TemplateNotFound as exc:
            raise TemplateRenderError(f"Template not found: {self.template_path}") from exc
        except TemplateError as exc:
            raise TemplateRenderError(f"Invalid template {self.template_path}: {exc}") from exc

        try:
            rendered = template.render(
                methods=data,
                namespace=self.patcher.namespace,
                module=self.module,
                instance=self.instance,
            )
        except TemplateError as exc:
            raise TemplateRenderError(f"Failed to render {self.template_path.name}: {exc}") from exc
        self.logger.debug("Rendered %d methods with %s", len(data), self.template_path.name)
        return rendered


__all__ = ["DELIMITERS", "TemplateRenderer"]
