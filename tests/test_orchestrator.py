"""Tests for end-to-end run orchestration."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from chisel.config import ChiselContext, ModuleConfig
from chisel.exceptions import ArtifactError, ConfigError, ErrorKind
from chisel.model import Report, Verdict
from chisel.runner import execute, load_artifact, run
from chisel.types import RunStage


def _suite(target: Path, *modules: str) -> str:
    lines = ["suite:", f"  file: {target.as_posix()}"]
    lines.extend(f"  {module}: {{}}" for module in modules)
    return "\n".join(lines) + "\n"


def test_vacuous_run_passes(write_wasm: Callable[[bytes], Path], ewasm_bytes: bytes) -> None:
    lines: list[str] = []

    report = execute(ChiselContext(target_file=str(write_wasm(ewasm_bytes))), emit=lines.append)

    assert report == Report(verdicts=())
    assert report.overall is True
    assert report.exit_code == 0
    assert lines == ["========== RESULTS =========="]


def test_verify_exports_with_default_preset_passes(
    write_wasm: Callable[[bytes], Path],
    write_config: Callable[[str], Path],
    ewasm_bytes: bytes,
) -> None:
    lines: list[str] = []
    config_path = write_config(_suite(write_wasm(ewasm_bytes), "verifyexports"))

    report = run(config_path, emit=lines.append)

    assert report.verdicts == (Verdict("verifyexports", True),)
    assert report.overall is True
    assert report.exit_code == 0
    assert lines == ["========== RESULTS ==========", "verifyexports: GOOD"]


def test_start_function_fails_fixed_requirement(
    write_wasm: Callable[[bytes], Path],
    write_config: Callable[[str], Path],
    start_func_bytes: bytes,
) -> None:
    config_path = write_config(_suite(write_wasm(start_func_bytes), "checkstartfunc"))

    report = run(config_path, emit=lambda line: None)

    assert report.verdicts == (Verdict("checkstartfunc", False),)
    assert report.overall is False
    assert report.exit_code == 1


def test_unknown_check_fails_and_later_checks_still_run(
    write_wasm: Callable[[bytes], Path],
    write_config: Callable[[str], Path],
    ewasm_bytes: bytes,
) -> None:
    lines: list[str] = []
    config_path = write_config(_suite(write_wasm(ewasm_bytes), "unknowncheck", "verifyimports", "checkstartfunc"))

    report = run(config_path, emit=lines.append)

    assert report.verdicts == (
        Verdict("unknowncheck", False),
        Verdict("verifyimports", True),
        Verdict("checkstartfunc", True),
    )
    assert report.failed == (Verdict("unknowncheck", False),)
    assert report.exit_code == 1
    assert lines[1:] == ["unknowncheck: BAD", "verifyimports: GOOD", "checkstartfunc: GOOD"]


def test_missing_file_aborts_before_report(write_config: Callable[[str], Path]) -> None:
    lines: list[str] = []
    config_path = write_config("suite:\n  unexpectedfield: {}\n")

    with pytest.raises(ConfigError) as excinfo:
        run(config_path, emit=lines.append)

    assert excinfo.value.kind is ErrorKind.CONFIG_MISSING_FILE
    assert lines == []


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as excinfo:
        run(tmp_path / "chisel.yml", emit=lambda line: None)

    assert excinfo.value.kind is ErrorKind.CONFIG_OPEN_FAILED


def test_missing_binary_aborts_before_any_check(tmp_path: Path) -> None:
    lines: list[str] = []
    context = ChiselContext(target_file=str(tmp_path / "absent.wasm"), modules=(ModuleConfig("verifyexports"),))

    with pytest.raises(ArtifactError) as excinfo:
        execute(context, emit=lines.append)

    assert excinfo.value.kind is ErrorKind.BINARY_OPEN_FAILED
    assert excinfo.value.stage is RunStage.READING_BINARY
    assert lines == []


def test_undecodable_binary_aborts_before_any_check(write_wasm: Callable[[bytes], Path]) -> None:
    lines: list[str] = []
    context = ChiselContext(target_file=str(write_wasm(b"not wasm at all")), modules=(ModuleConfig("verifyexports"),))

    with pytest.raises(ArtifactError) as excinfo:
        execute(context, emit=lines.append)

    assert excinfo.value.kind is ErrorKind.ARTIFACT_DECODE_FAILED
    assert str(excinfo.value) == "Failed to deserialize the wasm binary."
    assert lines == []


def test_load_artifact_decodes_file(write_wasm: Callable[[bytes], Path], ewasm_bytes: bytes) -> None:
    module = load_artifact(str(write_wasm(ewasm_bytes)))

    assert [export.name for export in module.exports] == ["main", "memory"]


def test_execute_is_idempotent(write_wasm: Callable[[bytes], Path], start_func_bytes: bytes) -> None:
    context = ChiselContext(
        target_file=str(write_wasm(start_func_bytes)),
        modules=(ModuleConfig("verifyexports"), ModuleConfig("checkstartfunc"), ModuleConfig("nope")),
    )

    first = execute(context, emit=lambda line: None)
    second = execute(context, emit=lambda line: None)

    assert first == second
    assert first.verdicts == (
        Verdict("verifyexports", True),
        Verdict("checkstartfunc", False),
        Verdict("nope", False),
    )


def test_first_ruleset_decides_result(
    write_wasm: Callable[[bytes], Path],
    write_config: Callable[[str], Path],
    ewasm_bytes: bytes,
) -> None:
    target = write_wasm(ewasm_bytes).as_posix()
    config_path = write_config(
        "\n".join(
            [
                "first:",
                f"  file: {target}",
                "  verifyexports: {}",
                "second:",
                f"  file: {target}",
                "  unknowncheck: {}",
            ]
        )
        + "\n"
    )

    report = run(config_path, emit=lambda line: None)

    assert report.verdicts == (Verdict("verifyexports", True),)


def test_binary_path_with_nul_byte_is_open_failure() -> None:
    context = ChiselContext(target_file="a\x00b.wasm", modules=(ModuleConfig("verifyexports"),))

    with pytest.raises(ArtifactError) as excinfo:
        execute(context, emit=lambda line: None)

    assert excinfo.value.kind is ErrorKind.BINARY_OPEN_FAILED
