"""Tests for start-offset sampling."""

from __future__ import annotations

import numpy as np
import pytest

from linedocs.sampling import CHAR_SIZE, as_generator, random_seek_pos


class TestAsGenerator:
    """Test seed coercion."""

    def test_none_passes_through(self) -> None:
        assert as_generator(None) is None

    def test_generator_passes_through(self) -> None:
        rng = np.random.default_rng(1)
        assert as_generator(rng) is rng

    def test_int_seed_builds_generator(self) -> None:
        rng = as_generator(42)
        assert isinstance(rng, np.random.Generator)


class TestRandomSeekPos:
    """Test random_seek_pos bounds and alignment."""

    def test_no_generator_starts_at_zero(self) -> None:
        """Should read from the start when no seed source is given."""
        assert random_seek_pos(None, 10_000) == 0

    @pytest.mark.parametrize("size", [0, 1, 2, 3])
    def test_tiny_corpus_starts_at_zero(self, size: int) -> None:
        """Should not sample into corpora of three bytes or fewer."""
        assert random_seek_pos(np.random.default_rng(7), size) == 0

    def test_offset_bounds_and_alignment(self) -> None:
        """Should stay in the first third and on the alignment grid."""
        for seed in range(20):
            rng = np.random.default_rng(seed)
            for size in range(4, 5000, 37):
                pos = random_seek_pos(rng, size)
                assert 0 <= pos < size / 3
                assert pos % CHAR_SIZE == 0

    def test_small_sizes_never_negative(self) -> None:
        """Should clamp near-EOF candidates without going below zero."""
        for seed in range(50):
            rng = np.random.default_rng(seed)
            for size in range(4, 12):
                assert random_seek_pos(rng, size) >= 0

    def test_same_seed_same_offset(self) -> None:
        """Should be reproducible for a fixed seed and size."""
        first = random_seek_pos(np.random.default_rng(123), 1_000_000)
        second = random_seek_pos(np.random.default_rng(123), 1_000_000)
        assert first == second

    def test_offsets_vary_across_seeds(self) -> None:
        """Should spread start positions over the sampling range."""
        offsets = {random_seek_pos(np.random.default_rng(seed), 1_000_000) for seed in range(20)}
        assert len(offsets) > 1
