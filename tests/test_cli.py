"""uma-openapi command line."""

import json

import pytest

from uma_openapi import server_cli
from uma_openapi.openapi.config import OpenAPIConfig
from uma_openapi.openapi.generator import OpenAPIGenerator
from uma_openapi.schemas.registry import ProviderGroup, SchemaRegistry


@pytest.fixture(autouse=True)
def _keep_test_logging(monkeypatch):
    """Leave pytest's log capture in place instead of reconfiguring the root logger."""
    monkeypatch.setattr(
        "uma_openapi.logging_config.configure_logging", lambda **kwargs: None,
    )


def test_export_to_file(tmp_path, capsys):
    output = tmp_path / "openapi.json"
    server_cli.main(["export", "--output", str(output)])

    document = json.loads(output.read_text(encoding="utf-8"))
    assert document["openapi"] == "3.1.1"
    assert len(document["components"]["schemas"]) == 129
    assert f"Wrote {output}" in capsys.readouterr().err


def test_export_to_stdout(capsys):
    server_cli.main(["export", "--indent", "0"])

    captured = capsys.readouterr()
    document = json.loads(captured.out)
    assert document["info"]["title"] == "UMA REST API"


def test_export_strict_passes_on_default_catalog(capsys):
    server_cli.main(["export", "--strict"])
    assert json.loads(capsys.readouterr().out)["openapi"] == "3.1.1"


def test_export_strict_fails_on_uncategorized(monkeypatch, capsys):
    registry = SchemaRegistry([
        ProviderGroup("common", lambda: {"Error": {}, "SuccessResponse": {}, "StandardResponse": {}}),
        ProviderGroup("misc", lambda: {"Widget": {}}),
    ])
    registry.register_all()
    generator = OpenAPIGenerator(OpenAPIConfig(strict_categories=True), registry=registry)
    monkeypatch.setattr(server_cli, "_generator", lambda strict=False: generator)

    with pytest.raises(SystemExit) as exc_info:
        server_cli.main(["export", "--strict"])

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Schema has no category: Widget" in captured.err


def test_categories_table(capsys):
    server_cli.main(["categories"])

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 15
    assert lines[0].split() == ["Common", "7"]
    assert lines[-1].split() == ["Total", "129"]


def test_command_is_required():
    with pytest.raises(SystemExit) as exc_info:
        server_cli.main([])
    assert exc_info.value.code == 2
