from pathlib import Path

import pytest

from raml2html.config import DEFAULT_TEMPLATE, RenderConfig, default_config
from raml2html.exceptions import RenderError
from raml2html.generator.html import HtmlGenerator
from raml2html.parser.raml import parse_raml_file

FIXTURES = Path(__file__).parent / "fixtures"


def _template(tmp_path: Path, source: str, name: str = "page.html.j2") -> Path:
    path = tmp_path / name
    path.write_text(source, encoding="utf-8")
    return path


class TestDefaultTemplate:
    def test_renders_full_document(self):
        doc = parse_raml_file(FIXTURES / "api.raml")
        html = HtmlGenerator(default_config()).generate(doc)

        assert "<!DOCTYPE html>" in html
        assert "Example API" in html
        assert "http://api.example.com/v1" in html
        assert 'id="_users"' in html
        assert 'id="_users__id__posts__postId__get"' in html
        assert "<strong>users</strong>" in html
        assert "glyphicon-lock" in html

    def test_resource_paths_rendered(self):
        doc = parse_raml_file(FIXTURES / "nested.raml")
        html = HtmlGenerator(default_config()).generate(doc)
        assert "/users/{id}<strong>/posts/{postId}</strong>" in html
        assert "URI Parameters" in html

    def test_lock_icon_absent_without_security(self):
        doc = parse_raml_file(FIXTURES / "minimal.raml")
        html = HtmlGenerator(default_config()).generate(doc)
        assert "glyphicon-lock" not in html

    def test_config_attached_to_document(self):
        doc = parse_raml_file(FIXTURES / "minimal.raml")
        config = default_config()
        HtmlGenerator(config).generate(doc)
        assert doc.config is config

    def test_default_config(self):
        config = default_config()
        assert config.template == DEFAULT_TEMPLATE
        assert config.template_engine == "jinja2"
        assert set(config.helpers) == {"md", "highlight", "lock"}
        assert "resource" in config.partials


class TestCustomConfig:
    def test_template_options_merged_onto_document(self, tmp_path):
        template = _template(tmp_path, "{{ title }}|{{ footer }}")
        config = RenderConfig(template=template, template_options={"title": "Overridden", "footer": "generated"})
        doc = parse_raml_file(FIXTURES / "minimal.raml")

        html = HtmlGenerator(config).generate(doc)

        assert html == "Overridden|generated"
        assert doc.title == "Overridden"

    def test_helpers_as_functions_and_filters(self, tmp_path):
        template = _template(tmp_path, "{{ shout(title) }} {{ title | shout }}")
        config = RenderConfig(template=template, helpers={"shout": lambda s: s.upper()})
        html = HtmlGenerator(config).generate(parse_raml_file(FIXTURES / "minimal.raml"))
        assert html == "MINIMAL API MINIMAL API"

    def test_partials(self, tmp_path):
        template = _template(tmp_path, '{% for resource in resources.values() %}{% include "row" %}{% endfor %}')
        config = RenderConfig(template=template, partials={"row": "[{{ resource.unique_id }}]"})
        html = HtmlGenerator(config).generate(parse_raml_file(FIXTURES / "api.raml"))
        assert html == "[_users][_status]"

    def test_template_from_fixtures_dir(self):
        config = RenderConfig(template=FIXTURES / "list.html.j2")
        html = HtmlGenerator(config).generate(parse_raml_file(FIXTURES / "nested.raml"))
        assert "<li>_users__id_</li>" in html

    def test_helpers_are_not_shared_between_generators(self, tmp_path):
        template = _template(tmp_path, "{{ only_here(title) }}")
        with_helper = RenderConfig(template=template, helpers={"only_here": str.lower})
        without_helper = RenderConfig(template=template)

        assert HtmlGenerator(with_helper).generate(parse_raml_file(FIXTURES / "minimal.raml")) == "minimal api"
        with pytest.raises(RenderError):
            HtmlGenerator(without_helper).generate(parse_raml_file(FIXTURES / "minimal.raml"))


class TestRenderErrors:
    def test_missing_template(self, tmp_path):
        config = RenderConfig(template=tmp_path / "missing.html.j2")
        with pytest.raises(RenderError, match="missing.html.j2"):
            HtmlGenerator(config).generate(parse_raml_file(FIXTURES / "minimal.raml"))

    def test_template_syntax_error(self, tmp_path):
        config = RenderConfig(template=_template(tmp_path, "{% for x in %}"))
        with pytest.raises(RenderError) as exc_info:
            HtmlGenerator(config).generate(parse_raml_file(FIXTURES / "minimal.raml"))
        assert exc_info.value.__cause__ is not None

    def test_unknown_engine(self):
        config = RenderConfig(template_engine="handlebars")
        with pytest.raises(RenderError, match="handlebars"):
            HtmlGenerator(config).generate(parse_raml_file(FIXTURES / "minimal.raml"))
