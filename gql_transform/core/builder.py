"""Build driver: schema files in, rendered output file out."""

import logging
import os
import time
from dataclasses import dataclass, field

from .config import ConfigTarget
from .discovery import discover_schema_files
from .errors import GrammarError
from .hooks import HookRunner, hooks_for_target
from .ir import TemplateData
from .renderer import TemplateRenderer
from .transformer import sort_fragments, transform_source

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of a successful target build."""
    output: str
    template: str
    schema_files: list[str] = field(default_factory=list)
    data: TemplateData = field(default_factory=TemplateData)
    elapsed: float = 0.0


def collect_template_data(schema_files: list[str]) -> TemplateData:
    """Transform files in order into one TemplateData with sorted fragments."""
    data = TemplateData()
    for file_path in schema_files:
        try:
            with open(file_path, encoding="utf-8") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise GrammarError(f"not valid UTF-8: {e}", file_path) from e
        transform_source(content, data, source_name=file_path)
        logger.debug("Transformed %s", file_path)
    return sort_fragments(data)


def build_target(
    target: ConfigTarget,
    base_dir: str | None = None,
    hooks: HookRunner | None = None,
) -> BuildResult:
    """Build one target.

    Without explicit ``hooks`` the target's own (its ``header``) are used.
    Any failure aborts the target before the output file is touched.
    """
    start = time.perf_counter()
    base_dir = os.path.abspath(base_dir or os.getcwd())
    template_path = os.path.join(base_dir, target.template)
    output_path = os.path.join(base_dir, target.output)

    renderer = TemplateRenderer(template_path)
    schema_files = discover_schema_files(target.schema_files, base_dir)
    data = collect_template_data(schema_files)

    if hooks is None:
        hooks = hooks_for_target(target)
    data = hooks.run_pre_hooks(data)
    content = hooks.run_post_hooks(output_path, renderer.render(data))

    os.makedirs(os.path.dirname(output_path), exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(content)

    return BuildResult(
        output=output_path,
        template=template_path,
        schema_files=schema_files,
        data=data,
        elapsed=time.perf_counter() - start,
    )
