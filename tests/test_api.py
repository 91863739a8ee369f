"""Tests for ganteng.api — load-state gating and the engine entry point."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from ganteng.api import TypingGanteng
from ganteng.core.config import TransformConfig
from ganteng.core.constants import NOT_READY_MESSAGE
from ganteng.core.types import LoadState


@pytest.fixture
def engine() -> TypingGanteng:
    return TypingGanteng(rng=lambda: 0.99)


class TestLoadState:
    def test_starts_not_loaded(self, engine: TypingGanteng) -> None:
        assert engine.state is LoadState.NOT_LOADED
        assert not engine.is_ready
        assert engine.error == ""

    def test_refuses_before_load(self, engine: TypingGanteng) -> None:
        assert engine.transform("gw mau kmn") == NOT_READY_MESSAGE
        assert engine.trace("gw mau kmn") == []

    def test_load_file(self, engine: TypingGanteng, dictionary_file: Path) -> None:
        assert engine.load(dictionary_file) is LoadState.LOADED
        assert engine.is_ready
        assert engine.transform("gw mau kmn") == "Aku mau kemana."

    def test_load_bundled(self, engine: TypingGanteng) -> None:
        assert engine.load() is LoadState.LOADED
        assert engine.dictionary["gw"] == "aku"

    def test_failed_load_captured(
        self, engine: TypingGanteng, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        state = engine.load(tmp_path / "nope.json")
        assert state is LoadState.ERROR
        assert "nope.json" in engine.error
        assert engine.transform("gw") == NOT_READY_MESSAGE
        assert "Dictionary load failed" in caplog.text

    def test_undecodable_file_captured(self, engine: TypingGanteng, tmp_path: Path) -> None:
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"gw": "\xff\xfe"}')
        assert engine.load(path) is LoadState.ERROR
        assert asyncio.run(engine.load_async(path)) is LoadState.ERROR
        assert engine.transform("gw") == NOT_READY_MESSAGE

    def test_failed_reload_drops_old_dictionary(
        self, engine: TypingGanteng, dictionary_file: Path, tmp_path: Path
    ) -> None:
        engine.load(dictionary_file)
        engine.load(tmp_path / "nope.json")
        assert engine.state is LoadState.ERROR
        assert len(engine.dictionary) == 0

    def test_async_load(self, engine: TypingGanteng, dictionary_file: Path) -> None:
        state = asyncio.run(engine.load_async(dictionary_file))
        assert state is LoadState.LOADED
        assert engine.transform("gw") == "Aku."

    def test_async_load_failure(self, engine: TypingGanteng, tmp_path: Path) -> None:
        state = asyncio.run(engine.load_async(tmp_path / "nope.json"))
        assert state is LoadState.ERROR
        assert engine.transform("gw") == NOT_READY_MESSAGE


class TestUseDictionary:
    def test_static_dictionary(self, engine: TypingGanteng) -> None:
        engine.use_dictionary({"gw": "aku"})
        assert engine.is_ready
        assert engine.transform("gw") == "Aku."

    def test_extra_entries_override(self, engine: TypingGanteng) -> None:
        engine.use_dictionary({"gw": "aku"}, extra={"gw": "saya", "lu": "kamu"})
        assert list(engine.dictionary) == ["gw", "lu"]
        assert engine.transform("gw") == "Saya."

    def test_dictionary_is_read_only(self, engine: TypingGanteng) -> None:
        source = {"gw": "aku"}
        engine.use_dictionary(source)
        with pytest.raises(TypeError):
            engine.dictionary["gw"] = "saya"  # type: ignore[index]
        source["gw"] = "saya"
        assert engine.dictionary["gw"] == "aku"

    def test_usable_repeatedly(self, engine: TypingGanteng) -> None:
        engine.use_dictionary({"gw": "aku"})
        results = {engine.transform("gw") for _ in range(5)}
        assert results == {"Aku."}

    def test_empty_input(self, engine: TypingGanteng) -> None:
        engine.use_dictionary({})
        assert engine.transform("") == ""


class TestTrace:
    def test_trace_matches_transform(self) -> None:
        engine = TypingGanteng(rng=lambda: 0.99)
        engine.use_dictionary({"gw": "aku"})
        steps = engine.trace("gw!!")
        assert steps[0].text == "gw!!"
        assert steps[1].text == "aku!!"
        assert steps[-1].text == engine.transform("gw!!") == "Aku!"

    def test_config_applied(self) -> None:
        engine = TypingGanteng(TransformConfig(tilde_probability=1.0), rng=lambda: 0.5)
        engine.use_dictionary({})
        assert engine.transform("halo dunia") == "Haloa dunia~"
