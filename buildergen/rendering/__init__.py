"""JSDoc synthesis and module template rendering."""

from . import jsdoc
from .renderer import DELIMITERS, TemplateRenderer

__all__ = ["DELIMITERS", "TemplateRenderer", "jsdoc"]
