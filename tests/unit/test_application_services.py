"""Unit tests for application service result shaping."""

import json
import os
from pathlib import Path

import pytest

from provpath.application.services import ProvidersService, RegistryPathService, ResolveService
from provpath.domain.envelopes import build_envelope

SID = "S-1-5-21-1004336348-1177238915-682003330-512"


class TestResolveService:
    def test_success_payload(self, registry, context, tree) -> None:
        result = ResolveService(registry=registry, context=context).run(paths=["*.log"])
        assert result.success is True
        assert result.code == "resolved"
        qualified = "Microsoft.PowerShell.Core\\FileSystem::" + os.path.join(str(tree), "c.log")
        assert result.data["paths"] == [qualified]
        assert result.data["items"] == [
            {"path": qualified, "provider": "FileSystem", "exists": True, "kind": "leaf"}
        ]

    def test_domain_error_is_folded_into_result(self, registry, context) -> None:
        result = ResolveService(registry=registry, context=context).run(paths=["missing.txt"])
        assert result.success is False
        assert result.code == "path_not_found"
        assert "missing.txt" in result.data["target"]
        assert result.recommended_action

    def test_conflicting_projection_is_invalid(self, registry, context) -> None:
        result = ResolveService(registry=registry, context=context).run(
            paths=["a.txt"], as_native_path=True, relative=True
        )
        assert result.success is False
        assert result.code == "invalid_options"

    def test_continue_on_error(self, registry, context) -> None:
        result = ResolveService(registry=registry, context=context).run(
            paths=["missing.txt", "a.txt"], continue_on_error=True, relative=True
        )
        assert result.success is True
        assert result.data["paths"] == [os.path.join(".", "a.txt")]

    def test_filters(self, registry, context) -> None:
        result = ResolveService(registry=registry, context=context).run(
            paths=["*"], path_type="container", as_native_path=True, name_filter="s*"
        )
        assert [os.path.basename(path) for path in result.data["paths"]] == ["sub"]


class TestRegistryPathService:
    def test_converted(self, registry, context) -> None:
        result = RegistryPathService(registry=registry, context=context).run(key="HKLM\\SOFTWARE\\X")
        assert result.code == "converted"
        assert result.data["path"] == "Microsoft.PowerShell.Core\\Registry::HKEY_LOCAL_MACHINE\\SOFTWARE\\X"

    def test_declined_sid_conversion(self, registry, context) -> None:
        result = RegistryPathService(registry=registry, context=context).run(key="HKLM\\SOFTWARE\\X", sid=SID)
        assert result.success is True
        assert result.code == "registry_root_mismatch"
        assert result.data["path"] is None
        assert result.warnings

    def test_invalid_key(self, registry, context) -> None:
        result = RegistryPathService(registry=registry, context=context).run(key="SOFTWARE\\X")
        assert result.success is False
        assert result.code == "invalid_path"

    def test_custom_hive_map(self, registry, context, tmp_path: Path) -> None:
        hive_map = tmp_path / "hives.json"
        hive_map.write_text(
            json.dumps(
                {
                    "aliases": {"HKLM": "HKEY_LOCAL_MACHINE", "MACHINE": "HKEY_LOCAL_MACHINE"},
                    "viewSubstitutions": [],
                }
            ),
            encoding="utf-8",
        )
        result = RegistryPathService(registry=registry, context=context).run(
            key="MACHINE:\\SOFTWARE\\X", use_32bit_view=True, hive_map_file=hive_map
        )
        assert result.data["path"] == "Microsoft.PowerShell.Core\\Registry::HKEY_LOCAL_MACHINE\\SOFTWARE\\X"
        # The shared registry keeps its default Registry adapter
        assert registry.get("Registry").hive_map.canonical_hive("MACHINE") is None

    def test_unreadable_hive_map(self, registry, context, tmp_path: Path) -> None:
        hive_map = tmp_path / "hives.json"
        hive_map.write_text("{not json", encoding="utf-8")
        result = RegistryPathService(registry=registry, context=context).run(
            key="HKLM\\SOFTWARE", hive_map_file=hive_map
        )
        assert result.success is False
        assert result.code == "invalid_hive_map"

    @pytest.mark.parametrize("content", ["5", '["aliases"]'])
    def test_hive_map_that_is_not_an_object(self, registry, context, tmp_path: Path, content) -> None:
        hive_map = tmp_path / "hives.json"
        hive_map.write_text(content, encoding="utf-8")
        result = RegistryPathService(registry=registry, context=context).run(
            key="HKLM\\SOFTWARE", hive_map_file=hive_map
        )
        assert result.success is False
        assert result.code == "invalid_hive_map"
        assert "JSON object" in result.message


def test_providers_service(registry) -> None:
    result = ProvidersService(registry=registry).run()
    names = [provider["name"] for provider in result.data["providers"]]
    assert names == ["FileSystem", "Registry", "Environment"]
    assert [provider["default"] for provider in result.data["providers"]] == [True, False, False]


def test_error_envelope_carries_target(registry, context) -> None:
    result = ResolveService(registry=registry, context=context).run(paths=["missing.txt"])
    envelope = build_envelope(command="resolve", result=result, duration_ms=5)
    assert envelope["status"] == "error"
    assert envelope["errors"][0]["code"] == "path_not_found"
    assert "missing.txt" in envelope["errors"][0]["target"]
    assert envelope["meta"] == {"durationMs": 5}
