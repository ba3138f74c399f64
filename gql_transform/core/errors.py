"""Errors raised while transforming GraphQL documents."""

from typing import Any


class TransformError(Exception):
    """Base class for all transformation failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class GrammarError(TransformError):
    """The GraphQL source could not be parsed."""

    def __init__(self, message: str, source_name: str | None = None):
        self.source_name = source_name
        if source_name:
            message = f"{source_name}: {message}"
        super().__init__(message)


class UnknownKindError(TransformError):
    """An AST node kind the transformer does not handle.

    ``category`` is one of ``value``, ``selection``, ``type``, ``operation``
    or ``definition``.
    """

    def __init__(self, category: str, kind: str):
        self.category = category
        self.kind = kind
        super().__init__(f"unknown {category} kind: {kind}")


class MalformedValueError(TransformError):
    """A scalar value node whose value is not a usable primitive."""

    def __init__(self, kind: str, value: Any):
        self.kind = kind
        self.value = value
        super().__init__(f"invalid value of kind {kind}: {value!r}")


class ConfigError(Exception):
    """The build configuration is missing or invalid."""


class RenderError(Exception):
    """A template failed to load or render."""

    def __init__(self, message: str, template_name: str | None = None):
        self.template_name = template_name
        if template_name:
            message = f"{template_name}: {message}"
        super().__init__(message)
