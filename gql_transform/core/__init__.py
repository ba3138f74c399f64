"""Core modules for GraphQL document transformation."""

from .builder import BuildResult, build_target, collect_template_data
from .config import Config, ConfigTarget, load_config
from .discovery import discover_schema_files
from .errors import (
    ConfigError,
    GrammarError,
    MalformedValueError,
    RenderError,
    TransformError,
    UnknownKindError,
)
from .hooks import (
    AddHeaderHook,
    HookRunner,
    PostRenderHook,
    PreRenderHook,
    hooks_for_target,
)
from .ir import (
    FieldArgument,
    Fragment,
    GraphqlField,
    Operation,
    TemplateData,
    Variable,
)
from .naming import camel_case, pascal_case, split_by_case
from .renderer import TemplateRenderer
from .transformer import (
    gather_fragment_dependencies,
    sort_fragments,
    transform_document,
    transform_fragment,
    transform_operation,
    transform_selection_set,
    transform_source,
    transform_type,
    transform_value,
)

__all__ = [
    # Data model
    "FieldArgument",
    "Fragment",
    "GraphqlField",
    "Operation",
    "TemplateData",
    "Variable",
    # Errors
    "ConfigError",
    "GrammarError",
    "MalformedValueError",
    "RenderError",
    "TransformError",
    "UnknownKindError",
    # Transformer
    "gather_fragment_dependencies",
    "sort_fragments",
    "transform_document",
    "transform_fragment",
    "transform_operation",
    "transform_selection_set",
    "transform_source",
    "transform_type",
    "transform_value",
    # Naming
    "camel_case",
    "pascal_case",
    "split_by_case",
    # Build
    "BuildResult",
    "Config",
    "ConfigTarget",
    "HookRunner",
    "AddHeaderHook",
    "PreRenderHook",
    "PostRenderHook",
    "TemplateRenderer",
    "build_target",
    "collect_template_data",
    "hooks_for_target",
    "discover_schema_files",
    "load_config",
]
