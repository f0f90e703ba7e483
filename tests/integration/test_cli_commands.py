"""End-to-end checks for the provpath CLI commands."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from tests.utils.cli_helpers import invoke_cli, invoke_cli_json

SID = "S-1-5-21-1004336348-1177238915-682003330-512"
REG_PREFIX = "Microsoft.PowerShell.Core\\Registry::"


@pytest.fixture(autouse=True)
def _64bit_host(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("provpath.context.detect_64bit", lambda: True)


@pytest.mark.integration
def test_resolve_prints_qualified_paths(tree: Path) -> None:
    result = invoke_cli("resolve", "*.txt", cwd=tree)

    assert result.exit_code == 0, result.output
    prefix = "Microsoft.PowerShell.Core\\FileSystem::"
    assert result.stdout.splitlines() == [
        prefix + os.path.join(str(tree), "a.txt"),
        prefix + os.path.join(str(tree), "b.txt"),
        prefix + os.path.join(str(tree), "x[1].txt"),
    ]


@pytest.mark.integration
def test_resolve_relative_with_filters(tree: Path) -> None:
    result = invoke_cli("resolve", "*", "--relative", "--path-type", "leaf", "--exclude", "*.txt", cwd=tree)

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [os.path.join(".", "c.log")]


@pytest.mark.integration
def test_resolve_literal_native(tree: Path) -> None:
    result = invoke_cli("resolve", "--literal", "--native", "x[1].txt", cwd=tree)

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == os.path.join(str(tree), "x[1].txt")


@pytest.mark.integration
def test_resolve_missing_path_fails(tree: Path) -> None:
    result = invoke_cli("resolve", "missing.txt", cwd=tree)

    assert result.exit_code == 1
    assert "does not exist" in result.output


@pytest.mark.integration
def test_resolve_include_non_existent(tree: Path) -> None:
    result = invoke_cli("resolve", "--include-non-existent", "--native", "missing.txt", cwd=tree)

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == os.path.join(str(tree), "missing.txt")


@pytest.mark.integration
def test_resolve_rejects_native_and_relative(tree: Path) -> None:
    result = invoke_cli("resolve", "--native", "--relative", "a.txt", cwd=tree)

    assert result.exit_code == 1
    assert "mutually exclusive" in result.output


@pytest.mark.integration
def test_resolve_json_envelope(tree: Path) -> None:
    result, envelope = invoke_cli_json("resolve", "docs", "missing*", cwd=tree)

    assert result.exit_code == 0, result.output
    assert envelope["schemaVersion"] == "1"
    assert envelope["command"] == "resolve"
    assert envelope["status"] == "success"
    assert envelope["errors"] == []
    assert envelope["data"]["items"] == [
        {
            "path": "Microsoft.PowerShell.Core\\FileSystem::" + os.path.join(str(tree), "docs"),
            "provider": "FileSystem",
            "exists": True,
            "kind": "container",
        }
    ]


@pytest.mark.integration
def test_resolve_json_error_envelope(tree: Path) -> None:
    result, envelope = invoke_cli_json("resolve", "--provider", "Certificate", "a.txt", cwd=tree)

    assert result.exit_code == 1
    assert envelope["status"] == "error"
    assert envelope["errors"][0]["code"] == "provider_not_found"


@pytest.mark.integration
def test_registry_path_expands_alias() -> None:
    result = invoke_cli("registry-path", "HKLM\\SOFTWARE\\X")

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == REG_PREFIX + "HKEY_LOCAL_MACHINE\\SOFTWARE\\X"


@pytest.mark.integration
def test_registry_path_32bit_view() -> None:
    result = invoke_cli("registry-path", "--32bit", "HKLM:\\SOFTWARE\\Contoso")

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == REG_PREFIX + "HKEY_LOCAL_MACHINE\\SOFTWARE\\Wow6432Node\\Contoso"


@pytest.mark.integration
def test_registry_path_sid_rewrite() -> None:
    result = invoke_cli("registry-path", "--sid", SID, "HKCU\\SOFTWARE\\X")

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == REG_PREFIX + f"HKEY_USERS\\{SID}\\SOFTWARE\\X"


@pytest.mark.integration
def test_registry_path_sid_declined() -> None:
    result = invoke_cli("registry-path", "--sid", SID, "HKLM\\SOFTWARE\\X")

    assert result.exit_code == 3
    assert "HKEY_CURRENT_USER" in result.output
    assert REG_PREFIX not in result.stdout


@pytest.mark.integration
def test_registry_path_declined_json() -> None:
    result, envelope = invoke_cli_json("registry-path", "--sid", SID, "HKLM\\SOFTWARE\\X")

    assert result.exit_code == 3
    assert envelope["status"] == "success"
    assert envelope["data"] == {"path": None}
    assert len(envelope["warnings"]) == 1


@pytest.mark.integration
def test_registry_path_without_hive_fails() -> None:
    result = invoke_cli("registry-path", "SOFTWARE\\X")

    assert result.exit_code == 1
    assert "Unable to detect target registry hive" in result.output


@pytest.mark.integration
def test_registry_path_custom_hive_map(tmp_path: Path) -> None:
    hive_map = tmp_path / "hives.json"
    hive_map.write_text(json.dumps({"aliases": {"LM": "HKEY_LOCAL_MACHINE"}}), encoding="utf-8")

    result = invoke_cli("registry-path", "--hive-map", str(hive_map), "LM:\\SOFTWARE\\X")

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == REG_PREFIX + "HKEY_LOCAL_MACHINE\\SOFTWARE\\X"


@pytest.mark.integration
def test_registry_path_invalid_hive_map(tmp_path: Path) -> None:
    hive_map = tmp_path / "hives.json"
    hive_map.write_text("[1, 2", encoding="utf-8")

    result = invoke_cli("registry-path", "--hive-map", str(hive_map), "HKLM\\SOFTWARE")

    assert result.exit_code == 1
    assert "Cannot load hive map" in result.output


@pytest.mark.integration
def test_providers_json() -> None:
    result, envelope = invoke_cli_json("providers")

    assert result.exit_code == 0, result.output
    names = [provider["name"] for provider in envelope["data"]["providers"]]
    assert names == ["FileSystem", "Registry", "Environment"]
    registry = envelope["data"]["providers"][1]
    assert "HKLM" in registry["drives"]


@pytest.mark.integration
def test_providers_table() -> None:
    result = invoke_cli("providers")

    assert result.exit_code == 0, result.output
    assert "Registry" in result.output
    assert "Environment" in result.output


@pytest.mark.integration
def test_registry_path_hive_map_must_be_an_object(tmp_path: Path) -> None:
    hive_map = tmp_path / "hives.json"
    hive_map.write_text('["aliases"]', encoding="utf-8")

    result, envelope = invoke_cli_json("registry-path", "--hive-map", str(hive_map), "HKLM\\SOFTWARE")

    assert result.exit_code == 1
    assert envelope["errors"][0]["code"] == "invalid_hive_map"
