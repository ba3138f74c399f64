"""Transform GraphQL documents into template data for code generation."""

from .core import (
    Fragment,
    GraphqlField,
    FieldArgument,
    Operation,
    TemplateData,
    Variable,
    sort_fragments,
    transform_document,
    transform_source,
)

__all__ = [
    "FieldArgument",
    "Fragment",
    "GraphqlField",
    "Operation",
    "TemplateData",
    "Variable",
    "sort_fragments",
    "transform_document",
    "transform_source",
]
