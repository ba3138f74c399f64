"""Template renderer for transformed GraphQL documents.

Renders a Jinja2 template with the TemplateData of a build target. The
template sees ``fragments``, ``queries`` and ``mutations`` directly and the
whole object as ``data``. ``camel_case`` and ``pascal_case`` are available
both as filters and as functions:

    {% for query in queries %}
    export const {{ query.name | pascal_case }}Query = gql`...`;
    {% endfor %}
"""

import os
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    select_autoescape,
)

from .errors import RenderError
from .ir import TemplateData
from .naming import camel_case, pascal_case


class TemplateRenderer:
    """Renders one template file.

    Other templates in the same directory can be included or extended.
    Undefined names raise instead of rendering as empty text.
    """

    def __init__(self, template_path: str):
        self.template_path = os.path.abspath(template_path)
        self.template_name = os.path.basename(self.template_path)

        self.env = Environment(
            loader=FileSystemLoader(os.path.dirname(self.template_path)),
            autoescape=select_autoescape(),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        for name, func in (("camel_case", camel_case), ("pascal_case", pascal_case)):
            self.env.filters[name] = func
            self.env.globals[name] = func

    def _context(self, data: TemplateData) -> dict[str, Any]:
        return {
            "data": data,
            "fragments": data.fragments,
            "queries": data.queries,
            "mutations": data.mutations,
        }

    def render(self, data: TemplateData) -> str:
        try:
            template = self.env.get_template(self.template_name)
            return template.render(self._context(data))
        except TemplateError as e:
            raise RenderError(str(e), self.template_name) from e
