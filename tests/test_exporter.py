import json
from pathlib import Path

import pytest
import yaml

from routedoc.exporter import detect_format, export_document, render
from routedoc.openapi.models import Info, OpenAPI, Operation, PathItem


def _document():
    return OpenAPI(
        info=Info(title="Example API", version="1.0.0"),
        paths={"/items/{id}": PathItem(get=Operation(summary="Fetch"))},
    )


class TestDetectFormat:
    def test_yaml_suffixes(self):
        assert detect_format(Path("openapi/documentation.yaml")) == "yaml"
        assert detect_format(Path("doc.YML")) == "yaml"

    def test_everything_else_is_json(self):
        assert detect_format(Path("doc.json")) == "json"
        assert detect_format(Path("doc")) == "json"


class TestRender:
    def test_yaml_keeps_key_order(self):
        text = render(_document(), "yaml")
        assert text.index("openapi:") < text.index("info:") < text.index("paths:")
        assert yaml.safe_load(text)["paths"]["/items/{id}"]["get"]["summary"] == "Fetch"

    def test_json(self):
        data = json.loads(render(_document(), "json"))
        assert data["info"] == {"title": "Example API", "version": "1.0.0"}

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            render(_document(), "toml")


class TestExportDocument:
    def test_creates_parent_directories(self, tmp_path):
        target = tmp_path / "nested" / "dir" / "doc.yaml"
        written = export_document(_document(), target)
        assert written == target
        assert yaml.safe_load(target.read_text(encoding="utf-8"))["openapi"] == "3.1.0"

    def test_json_by_suffix(self, tmp_path):
        target = tmp_path / "doc.json"
        export_document(_document(), target)
        assert json.loads(target.read_text(encoding="utf-8"))["paths"]

    def test_explicit_format_overrides_suffix(self, tmp_path):
        target = tmp_path / "doc.yaml"
        export_document(_document(), target, fmt="json")
        assert json.loads(target.read_text(encoding="utf-8"))["info"]["title"] == "Example API"
