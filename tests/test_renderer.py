"""Tests for the Jinja2 template renderer."""

import pytest

from gql_transform.core.errors import RenderError
from gql_transform.core.ir import Fragment, Operation, TemplateData
from gql_transform.core.renderer import TemplateRenderer


@pytest.fixture
def sample_data():
    return TemplateData(
        fragments=[Fragment(name="user_fields", source_type="User")],
        queries=[Operation(name="GetUser"), Operation(name="list_users")],
        mutations=[Operation(name="rename_user")],
    )


@pytest.fixture
def write_template(tmp_path):
    def _write(content, name="template.j2"):
        path = tmp_path / name
        path.write_text(content)
        return str(path)

    return _write


class TestTemplateRenderer:
    """Tests for TemplateRenderer."""

    def test_context_names(self, write_template, sample_data):
        renderer = TemplateRenderer(
            write_template(
                "{{ fragments | length }} {{ queries | length }} "
                "{{ mutations | length }} {{ data.queries[0].name }}"
            )
        )
        assert renderer.render(sample_data) == "1 2 1 GetUser"

    def test_case_filters(self, write_template, sample_data):
        renderer = TemplateRenderer(
            write_template(
                "{% for q in queries %}{{ q.name | camel_case }} {{ q.name | pascal_case }}\n{% endfor %}"
            )
        )
        assert renderer.render(sample_data) == "getUser GetUser\nlistUsers ListUsers\n"

    def test_case_functions(self, write_template, sample_data):
        renderer = TemplateRenderer(write_template("{{ pascal_case(mutations[0].name) }}"))
        assert renderer.render(sample_data) == "RenameUser"

    def test_keeps_trailing_newline(self, write_template, sample_data):
        renderer = TemplateRenderer(write_template("{{ fragments[0].source_type }}\n"))
        assert renderer.render(sample_data) == "User\n"

    def test_no_html_escaping(self, write_template):
        data = TemplateData(queries=[Operation(name="<Q&A>")])
        renderer = TemplateRenderer(write_template("{{ queries[0].name }}", name="out.ts.j2"))
        assert renderer.render(data) == "<Q&A>"

    def test_includes_sibling_templates(self, write_template, sample_data):
        write_template("{{ query.name }};", name="_query.j2")
        renderer = TemplateRenderer(
            write_template("{% for query in queries %}{% include '_query.j2' %}{% endfor %}")
        )
        assert renderer.render(sample_data) == "GetUser;list_users;"

    def test_undefined_attribute(self, write_template, sample_data):
        renderer = TemplateRenderer(write_template("{{ queries[0].missing }}"))
        with pytest.raises(RenderError) as exc_info:
            renderer.render(sample_data)
        assert exc_info.value.template_name == "template.j2"

    def test_syntax_error(self, write_template, sample_data):
        renderer = TemplateRenderer(write_template("{% for q in queries %}"))
        with pytest.raises(RenderError):
            renderer.render(sample_data)

    def test_missing_template(self, tmp_path, sample_data):
        renderer = TemplateRenderer(str(tmp_path / "missing.j2"))
        with pytest.raises(RenderError, match="missing.j2"):
            renderer.render(sample_data)
