"""Hooks run around template rendering.

A pre-render hook gets the sorted TemplateData of a target and returns the
data to render. A post-render hook gets the rendered text and returns the
text to write. A target that sets ``header`` in its config gets an
AddHeaderHook; library callers can pass their own HookRunner to
``build_target``.
"""

import os
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .config import ConfigTarget
from .ir import TemplateData


@runtime_checkable
class PreRenderHook(Protocol):
    def pre_render(self, data: TemplateData) -> TemplateData:
        ...


@runtime_checkable
class PostRenderHook(Protocol):
    def post_render(self, output_name: str, content: str) -> str:
        ...


class AddHeaderHook:
    """Prepend a header followed by one blank line.

    ``{output}`` in the header expands to the output's file name, e.g.
    ``AddHeaderHook("// {output} is generated")``.
    """

    def __init__(self, header: str):
        self.header = header.rstrip("\n")

    def post_render(self, output_name: str, content: str) -> str:
        header = self.header.replace("{output}", os.path.basename(output_name))
        return f"{header}\n\n{content}"


@dataclass
class HookRunner:
    """Ordered pre- and post-render hooks of one build."""
    pre_hooks: list[PreRenderHook] = field(default_factory=list)
    post_hooks: list[PostRenderHook] = field(default_factory=list)

    def add(self, hook) -> "HookRunner":
        """Register ``hook`` for every stage it implements."""
        matched = False
        if isinstance(hook, PreRenderHook):
            self.pre_hooks.append(hook)
            matched = True
        if isinstance(hook, PostRenderHook):
            self.post_hooks.append(hook)
            matched = True
        if not matched:
            raise TypeError(f"{type(hook).__name__} has neither pre_render nor post_render")
        return self

    def run_pre_hooks(self, data: TemplateData) -> TemplateData:
        for hook in self.pre_hooks:
            data = hook.pre_render(data)
        return data

    def run_post_hooks(self, output_name: str, content: str) -> str:
        for hook in self.post_hooks:
            content = hook.post_render(output_name, content)
        return content


def hooks_for_target(target: ConfigTarget) -> HookRunner:
    """Build the hooks a configured target asks for."""
    runner = HookRunner()
    if target.header:
        runner.add(AddHeaderHook(target.header))
    return runner
