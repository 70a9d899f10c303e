"""Tests for discovery, batch builds and the command line."""

import os

from interface_builder.builder import (
    BuildSummary,
    build_all_interfaces,
    count_total_interfaces,
    find_contracts_with_build_directives,
)
from interface_builder.config import BuildConfig
from interface_builder.main import main

BROKEN_SOURCE = "/// @custom:interface build ./IBroken.sol\nlibrary Broken {\n}\n"

LEGACY_SOURCE = "/// !interface build ./ILegacy.sol\ncontract Legacy {\n}\n"


def test_find_contracts(contracts_dir):
    (contracts_dir / "Plain.sol").write_text("contract Plain {\n}\n")
    (contracts_dir / "old").mkdir()
    (contracts_dir / "old" / "Legacy.sol").write_text(LEGACY_SOURCE)
    (contracts_dir / "node_modules").mkdir()
    (contracts_dir / "node_modules" / "Dep.sol").write_text(BROKEN_SOURCE)
    (contracts_dir / "notes.txt").write_text("/// @custom:interface build ./x.sol")

    found = find_contracts_with_build_directives(contracts_dir, skip_dirs=["node_modules"])

    assert [p.name for p in found] == ["Vault.sol", "Legacy.sol"]


def test_find_contracts_missing_root(tmp_path):
    assert find_contracts_with_build_directives(tmp_path / "nope") == []


def test_count_total_interfaces(contracts_dir):
    main_file = contracts_dir / "Main.sol"
    main_file.write_text("\n".join([
        "/// @custom:interface build ./IMain.sol",
        '/// @custom:interface module "./A.sol" to "./IA.sol"',
        '/// @custom:interface module "./B.sol" to "./IB.sol"',
        "contract Main {",
        "}",
    ]))

    assert count_total_interfaces([contracts_dir / "Vault.sol", main_file]) == 4


def test_batch_build_isolates_failures(contracts_dir):
    (contracts_dir / "Broken.sol").write_text(BROKEN_SOURCE)

    summary = build_all_interfaces(root=contracts_dir)

    assert summary.generated == 1
    assert summary.failed == 1
    assert not summary.ok
    assert summary.total_interfaces == 2
    assert any("Contract declaration not found" in e for e in summary.errors)
    assert (contracts_dir.parent / "interfaces" / "IVault.sol").exists()


def test_batch_build_skips_then_forces(contracts_dir):
    os.utime(contracts_dir / "Vault.sol", (1_000_000, 1_000_000))
    build_all_interfaces(root=contracts_dir)

    again = build_all_interfaces(root=contracts_dir)
    assert again.skipped == 1
    assert again.generated == 0

    forced = build_all_interfaces(root=contracts_dir, force=True)
    assert forced.generated == 1


def test_batch_build_with_no_contracts(tmp_path):
    summary = build_all_interfaces(root=tmp_path)
    assert summary.processed == 0
    assert summary.ok


def test_batch_build_uses_config_root(contracts_dir):
    config = BuildConfig(contracts_dir=str(contracts_dir), license="GPL-3.0")

    summary = build_all_interfaces(config=config)

    assert summary.generated == 1
    output = (contracts_dir.parent / "interfaces" / "IVault.sol").read_text()
    assert output.startswith("// SPDX-License-Identifier: GPL-3.0\n")


def test_summary_counts_modules(contracts_dir):
    main_file = contracts_dir / "Main.sol"
    main_file.write_text("\n".join([
        "/// @custom:interface build ./IMain.sol",
        '/// @custom:interface module "./Vault.sol" to "./IVaultModule.sol"',
        '/// @custom:interface module "./Gone.sol" to "./IGone.sol"',
        "contract Main {",
        "}",
    ]))

    summary = build_all_interfaces(files=[main_file])

    assert summary.generated == 2
    assert summary.failed == 1
    assert summary.processed == 3
    assert summary.total_interfaces == 3


def test_empty_summary_is_ok():
    summary = BuildSummary()
    assert summary.ok
    assert summary.processed == 0


def test_cli_without_arguments_prints_help_and_fails(capsys):
    assert main([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_cli_builds_explicit_file(contracts_dir, tmp_path, monkeypatch, vault_interface):
    monkeypatch.chdir(tmp_path)

    assert main([str(contracts_dir / "Vault.sol")]) == 0
    assert (tmp_path / "interfaces" / "IVault.sol").read_text() == vault_interface


def test_cli_all_reads_config(contracts_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "interface-builder.yaml").write_text("contracts_dir: contracts\npragma: \"0.8.24\"\n")

    assert main(["--all"]) == 0
    assert "pragma solidity 0.8.24;" in (tmp_path / "interfaces" / "IVault.sol").read_text()


def test_cli_exit_code_on_failure(contracts_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (contracts_dir / "Broken.sol").write_text(BROKEN_SOURCE)

    assert main(["--all", "--root", str(contracts_dir)]) == 1


def test_cli_missing_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--all", "--config", "missing.yaml"]) == 1


def test_batch_build_isolates_undecodable_file(contracts_dir):
    (contracts_dir / "Bad.sol").write_bytes(
        b"/// @custom:interface build ./IBad.sol\ncontract Bad {\n// \xff\xfe\n}\n"
    )

    summary = build_all_interfaces(root=contracts_dir)

    assert summary.generated == 1
    assert summary.failed == 1
    assert any("Cannot decode" in e for e in summary.errors)
    assert (contracts_dir.parent / "interfaces" / "IVault.sol").exists()


def test_pinned_dialect_limits_discovery(contracts_dir):
    (contracts_dir / "Legacy.sol").write_text(LEGACY_SOURCE)

    found = find_contracts_with_build_directives(contracts_dir, dialect="legacy")
    assert [p.name for p in found] == ["Legacy.sol"]

    summary = build_all_interfaces(root=contracts_dir, dialect="legacy")
    assert summary.generated == 1
    assert summary.failed == 0
    assert (contracts_dir / "ILegacy.sol").exists()


def test_count_ignores_module_lines_of_dialects_without_modules(tmp_path):
    legacy = tmp_path / "Legacy.sol"
    legacy.write_text("\n".join([
        "/// !interface build ./ILegacy.sol",
        '/// !interface module "./A.sol" to "./IA.sol"',
        "contract Legacy {",
        "}",
    ]))

    assert count_total_interfaces([legacy]) == 1
    assert count_total_interfaces([legacy], dialect="legacy") == 1
