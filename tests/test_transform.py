"""Tests for ganteng.core.transform — the full pipeline."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from ganteng.core.config import TransformConfig
from ganteng.core.dictionary import load_dictionary
from ganteng.core.transform import iter_passes, transform

from conftest import SequenceRandom

Rng = Callable[[], float]


class TestTransform:
    def test_declining_branches(self, slang: dict[str, str], high: Rng) -> None:
        assert transform("gw mau kmn", slang, high) == "Aku mau kemana."

    def test_firing_branches(self, slang: dict[str, str], low: Rng) -> None:
        assert transform("gw mau kmn", slang, low) == "Akuu mau kemana~ ^^"

    def test_dictionary_words_replaced(self, slang: dict[str, str]) -> None:
        result = transform("gw mau kmn", slang)
        assert "aku" in result.lower()
        assert "kemana" in result

    def test_no_partial_word_match(self, slang: dict[str, str], high: Rng) -> None:
        assert transform("okelah", slang, high) == "Okelah."

    def test_repeats_collapsed(self, high: Rng) -> None:
        assert transform("capeeeek", {}, high) == "Capeek."

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("wkwkwkwkwk", "Wkwk"), ("hahahaha", "Haha"), ("lucu bgt hihihi", "Lucu bgt hehe")],
    )
    def test_laughter_ending_stays_bare(
        self, text: str, expected: str, no_draws: SequenceRandom
    ) -> None:
        assert transform(text, {}, no_draws) == expected

    @pytest.mark.parametrize("rng", [random.Random(0).random, lambda: 0.0, lambda: 0.99])
    def test_polite_closing_always_period(self, rng: Rng) -> None:
        config = TransformConfig(emoji_probability=0.0)
        result = transform("terima kasih", {}, rng, config)
        assert result == "Terima kasih."

    @pytest.mark.parametrize("rng", [lambda: 0.0, lambda: 0.99])
    def test_iya_always_softened(self, rng: Rng) -> None:
        assert "iyaa" in transform("oke iya", {}, rng)
        assert transform("iya", {}, rng).lower().startswith("iyaa")

    def test_capitalizes_first_letter(self) -> None:
        assert transform("halo dunia", {}).startswith("H")

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_empty_input(self, text: str, no_draws: SequenceRandom) -> None:
        assert transform(text, {}, no_draws) == ""

    def test_unicode_passes_through(self, high: Rng) -> None:
        assert transform("halo 😀 dunia", {}, high) == "Haloa 😀 dunia."

    def test_capitalize_sentences(self, high: Rng) -> None:
        config = TransformConfig(capitalize_sentences=True)
        assert transform("halo. apa kabar", {}, high, config) == "Haloa. Apaa kabar."

    def test_dictionary_not_mutated(self, slang: dict[str, str]) -> None:
        before = dict(slang)
        transform("gw mau kmn", slang)
        assert slang == before

    def test_emoji_frequency_bounded(self) -> None:
        rng = random.Random(1234).random
        trials = 2000
        hits = sum(transform("halo dunia", {}, rng).endswith("^^") for _ in range(trials))
        # 0.15 overall, then 0.5 after the terminal mark.
        assert 0.03 < hits / trials < 0.13

    def test_seeded_runs_reproducible(self, slang: dict[str, str]) -> None:
        first = transform("aku sama kamu gw", slang, random.Random(7).random)
        second = transform("aku sama kamu gw", slang, random.Random(7).random)
        assert first == second


class TestIterPasses:
    def test_pass_order(self, high: Rng) -> None:
        names = [step.name for step in iter_passes("halo", {}, high)]
        assert names == [
            "normalize",
            "dictionary",
            "repeats",
            "soften",
            "punctuation",
            "terminal",
            "capitalize",
            "emoji",
            "cleanup",
        ]

    def test_last_pass_matches_transform(self, slang: dict[str, str]) -> None:
        steps = list(iter_passes("gw mau kmn!!", slang, random.Random(3).random))
        assert steps[-1].text == transform("gw mau kmn!!", slang, random.Random(3).random)

    def test_empty_yields_nothing(self) -> None:
        assert list(iter_passes("", {})) == []


class TestBundledDictionary:
    @pytest.fixture(scope="class")
    def bundled(self) -> dict[str, str]:
        return load_dictionary()

    def test_slang_example(self, bundled: dict[str, str], high: Rng) -> None:
        assert transform("gw mau kmn", bundled, high) == "Aku mau kemana."

    def test_thanks_becomes_polite_closing(self, bundled: dict[str, str], high: Rng) -> None:
        assert transform("makasih", bundled, high) == "Terima kasih."
