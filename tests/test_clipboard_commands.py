from __future__ import annotations

import shlex
import shutil
import time
from pathlib import Path
from typing import Any, Dict, List

import pytest

from editor_registers.clipboard import CommandProvider, CommandSpec
from editor_registers.registers import ClipboardFailure, Registers
from editor_registers.runtime import telemetry

pytestmark = pytest.mark.skipif(shutil.which("sh") is None, reason="needs a POSIX sh")


def make_file_provider(
    path: Path, *, set_suffix: str = "", timeout: float = 2.0
) -> CommandProvider:
    quoted = shlex.quote(str(path))
    spec = CommandSpec(
        name="file",
        executable="sh",
        get_clipboard=("sh", "-c", f"cat {quoted}"),
        set_clipboard=("sh", "-c", f"cat > {quoted}{set_suffix}"),
    )
    return CommandProvider(spec, timeout=timeout)


def make_registers(provider: CommandProvider) -> Registers:
    return Registers(provider, line_ending="\n")


def test_carriage_returns_survive_round_trip(tmp_path: Path) -> None:
    clipboard = tmp_path / "clipboard"
    registers = make_registers(make_file_provider(clipboard))

    registers.write("+", ["a\r\nb", "c\r"])

    assert clipboard.read_bytes() == b"a\r\nb\nc\r"
    assert registers.read("+").to_list() == ["a\r\nb", "c\r"]


def test_crlf_joined_fragments_round_trip(tmp_path: Path) -> None:
    clipboard = tmp_path / "clipboard"
    registers = Registers(make_file_provider(clipboard), line_ending="\r\n")

    registers.write("+", ["one", "two"])
    registers.push("+", "three")

    assert clipboard.read_bytes() == b"one\r\ntwo\r\nthree"
    assert registers.read("+").to_list() == ["one", "two", "three"]


def test_non_ascii_text_is_utf8_on_the_wire(tmp_path: Path) -> None:
    clipboard = tmp_path / "clipboard"
    registers = make_registers(make_file_provider(clipboard))

    registers.write("+", ["héllo", "wörld"])

    assert clipboard.read_bytes() == "héllo\nwörld".encode("utf-8")
    assert registers.read("+").to_list() == ["héllo", "wörld"]


def test_undecodable_clipboard_reads_as_empty(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    clipboard = tmp_path / "clipboard"
    clipboard.write_bytes(b"\xff\xfe bad")
    registers = make_registers(make_file_provider(clipboard))
    events: List[Dict[str, Any]] = []
    monkeypatch.setattr(
        telemetry,
        "record_event",
        lambda name, **kwargs: events.append({"name": name, **kwargs}),
    )

    values = registers.read("+")

    assert values is not None
    assert len(values) == 0
    assert [event["name"] for event in events] == ["registers.clipboard_read_failed"]
    assert events[0]["level"] == "error"


def test_set_command_with_background_child_returns(tmp_path: Path) -> None:
    clipboard = tmp_path / "clipboard"
    provider = make_file_provider(clipboard, set_suffix="; (sleep 5) &", timeout=1.0)
    registers = make_registers(provider)

    started = time.monotonic()
    registers.write("+", ["x", "y"])

    assert time.monotonic() - started < 1.0
    assert clipboard.read_bytes() == b"x\ny"
    assert registers.read("+").to_list() == ["x", "y"]


def test_failing_set_command_is_clipboard_failure(tmp_path: Path) -> None:
    clipboard = tmp_path / "clipboard"
    registers = make_registers(make_file_provider(clipboard, set_suffix="; exit 3"))

    with pytest.raises(ClipboardFailure):
        registers.write("+", ["x"])

    assert "+" not in registers


def test_missing_primary_selection_reads_empty(tmp_path: Path) -> None:
    registers = make_registers(make_file_provider(tmp_path / "clipboard"))

    assert registers.read("*").to_list() == []
    with pytest.raises(ClipboardFailure):
        registers.write("*", ["x"])
