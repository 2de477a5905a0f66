"""Fatal error types raised by the generation pipeline."""

from __future__ import annotations


class GeneratorError(RuntimeError):
    """Base class for failures that abort a generation run."""


class SourceLoadError(GeneratorError):
    """Raised when a root declaration file is missing or cannot be parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to load declaration source {path}: {reason}")
        self.path = path
        self.reason = reason


class TemplateRenderError(GeneratorError):
    """Raised when the module template is missing or references unknown values."""


class WriteError(GeneratorError):
    """Raised when the generated module cannot be formatted or persisted."""


__all__ = ["GeneratorError", "SourceLoadError", "TemplateRenderError", "WriteError"]
