from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from editor_registers.clipboard import ClipboardError, ClipboardType, FallbackProvider
from editor_registers.registers import (
    ClipboardFailure,
    Registers,
    contents_are_saved,
)
from editor_registers.runtime import telemetry


class RecordingProvider(FallbackProvider):
    """In-memory clipboard that counts calls and can be told to fail."""

    name = "recording"

    def __init__(self) -> None:
        super().__init__()
        self.fail_get = False
        self.fail_set = False
        self.set_calls: List[tuple[str, ClipboardType]] = []

    def get_contents(self, kind: ClipboardType) -> str:
        if self.fail_get:
            raise ClipboardError("clipboard unavailable", kind=kind)
        return super().get_contents(kind)

    def set_contents(self, text: str, kind: ClipboardType) -> None:
        if self.fail_set:
            raise ClipboardError("clipboard unavailable", kind=kind)
        self.set_calls.append((text, kind))
        super().set_contents(text, kind)

    def external_edit(self, text: str, kind: ClipboardType) -> None:
        FallbackProvider.set_contents(self, text, kind)


def make_registers(provider: Optional[RecordingProvider] = None) -> Registers:
    return Registers(provider or RecordingProvider(), line_ending="\n")


def capture_events(monkeypatch: pytest.MonkeyPatch) -> List[Dict[str, Any]]:
    events: List[Dict[str, Any]] = []

    def fake_record_event(name: str, **kwargs: Any) -> None:
        events.append({"name": name, **kwargs})

    monkeypatch.setattr(telemetry, "record_event", fake_record_event)
    return events


def test_round_trip_reuses_cached_fragments() -> None:
    provider = RecordingProvider()
    registers = make_registers(provider)

    registers.write("*", ["a", "b"])

    assert provider.get_contents(ClipboardType.SELECTION) == "a\nb"
    assert registers.read("*").to_list() == ["a", "b"]


def test_star_and_plus_address_different_clipboards() -> None:
    provider = RecordingProvider()
    registers = make_registers(provider)

    registers.write("*", ["primary"])
    registers.write("+", ["system"])

    assert provider.get_contents(ClipboardType.SELECTION) == "primary"
    assert provider.get_contents(ClipboardType.CLIPBOARD) == "system"
    assert registers.read("+").to_list() == ["system"]


def test_external_change_discards_cache() -> None:
    provider = RecordingProvider()
    registers = make_registers(provider)
    registers.write("*", ["a", "b"])

    provider.external_edit("zzz", ClipboardType.SELECTION)

    assert registers.read("*").to_list() == ["zzz"]


def test_read_without_cache_returns_raw_text() -> None:
    provider = RecordingProvider()
    provider.external_edit("line one\nline two", ClipboardType.CLIPBOARD)
    registers = make_registers(provider)

    assert registers.read("+").to_list() == ["line one\nline two"]


def test_fragments_with_embedded_line_endings_round_trip() -> None:
    registers = make_registers()

    registers.write("+", ["one\ntwo", "three", "\nfour\n"])

    assert registers.read("+").to_list() == ["one\ntwo", "three", "\nfour\n"]


def test_read_failure_is_logged_and_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    provider = RecordingProvider()
    registers = make_registers(provider)
    registers.write("+", ["cached"])
    events = capture_events(monkeypatch)

    provider.fail_get = True
    values = registers.read("+")

    assert values is not None
    assert len(values) == 0
    assert events[0]["name"] == "registers.clipboard_read_failed"
    assert events[0]["level"] == "error"
    assert events[0]["data"]["register"] == "+"
    assert events[0]["data"]["clipboard"] == "system"


def test_write_failure_propagates_and_keeps_cache() -> None:
    provider = RecordingProvider()
    registers = make_registers(provider)
    registers.write("*", ["a", "b"])

    provider.fail_set = True
    with pytest.raises(ClipboardFailure) as excinfo:
        registers.write("*", ["c"])

    assert excinfo.value.register == "*"
    assert isinstance(excinfo.value.__cause__, ClipboardError)
    provider.fail_set = False
    assert registers.read("*").to_list() == ["a", "b"]


def test_push_extends_cached_fragments() -> None:
    provider = RecordingProvider()
    registers = make_registers(provider)
    registers.write("+", ["a", "b"])

    registers.push("+", "c")

    assert provider.get_contents(ClipboardType.CLIPBOARD) == "a\nb\nc"
    assert registers.read("+").to_list() == ["a", "b", "c"]


def test_push_after_external_change_starts_from_clipboard() -> None:
    provider = RecordingProvider()
    registers = make_registers(provider)
    registers.write("+", ["a", "b"])
    provider.external_edit("outside", ClipboardType.CLIPBOARD)

    registers.push("+", "mine")

    assert registers.read("+").to_list() == ["outside", "mine"]
    assert provider.get_contents(ClipboardType.CLIPBOARD) == "outside\nmine"


def test_push_onto_empty_clipboard() -> None:
    provider = RecordingProvider()
    registers = make_registers(provider)

    registers.push("*", "only")

    assert provider.get_contents(ClipboardType.SELECTION) == "only"
    assert registers.read("*").to_list() == ["only"]


def test_push_failure_leaves_state_untouched() -> None:
    provider = RecordingProvider()
    registers = make_registers(provider)
    registers.write("+", ["a"])

    provider.fail_set = True
    with pytest.raises(ClipboardFailure):
        registers.push("+", "b")

    provider.fail_set = False
    assert registers.read("+").to_list() == ["a"]

    provider.fail_get = True
    with pytest.raises(ClipboardFailure, match="Failed to read system clipboard"):
        registers.push("+", "b")


def test_crlf_line_ending_is_used_for_joining() -> None:
    provider = RecordingProvider()
    registers = Registers(provider, line_ending="\r\n")

    registers.write("+", ["a", "b"])

    assert provider.get_contents(ClipboardType.CLIPBOARD) == "a\r\nb"
    assert registers.read("+").to_list() == ["a", "b"]
    assert registers.line_ending == "\r\n"
    assert registers.clipboard_provider_name == "recording"


@pytest.mark.parametrize(
    ("saved", "contents", "expected"),
    [
        (["b", "a"], "a\nb", True),
        (["b", "a"], "a\nb\n", False),
        (["b", "a"], "ab", False),
        (["b", "a"], "a", False),
        ([], "", True),
        ([], "x", False),
        ([""], "", True),
        (["two\nthree", "one"], "one\ntwo\nthree", True),
        (None, "", False),
    ],
)
def test_contents_are_saved(saved, contents: str, expected: bool) -> None:
    assert contents_are_saved(saved, contents, "\n") is expected


def test_contents_are_saved_with_trailing_line_ending_in_fragment() -> None:
    assert contents_are_saved(["b", "a\n"], "a\n\nb", "\n") is True
    assert contents_are_saved(["b", "a\n"], "a\nb", "\n") is False
