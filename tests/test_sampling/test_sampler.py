"""Tests for UniformSampler rejection sampling and shuffling."""

from __future__ import annotations

from collections import Counter

import pytest

from pwtool.entropy.mock import MockUniformSource, SequenceEntropySource
from pwtool.exceptions import EntropyUnavailableError, InvalidDomainError
from pwtool.sampling.sampler import UniformSampler, rejection_limit


def _sampler(data: bytes | list[int]) -> UniformSampler:
    return UniformSampler(SequenceEntropySource(data))


class TestRejectionLimit:
    """Tests for the largest-multiple threshold."""

    @pytest.mark.parametrize(
        ("n", "expected"),
        [(1, 256), (2, 256), (10, 250), (26, 234), (85, 255), (129, 129), (256, 256)],
    )
    def test_values(self, n: int, expected: int) -> None:
        assert rejection_limit(n) == expected

    def test_limit_is_multiple_of_n(self) -> None:
        for n in range(1, 257):
            limit = rejection_limit(n)
            assert limit % n == 0
            assert 256 - n < limit <= 256


class TestUniformIndex:
    """Tests for uniform_index()."""

    def test_accepts_byte_below_limit(self) -> None:
        assert _sampler([233]).uniform_index(26) == 233 % 26

    def test_rejects_bytes_at_and_above_limit(self) -> None:
        """For n=26 the bytes 234..255 must be discarded, never reduced."""
        sampler = _sampler([234, 255, 240, 27])
        assert sampler.uniform_index(26) == 1
        assert sampler.draws == 4
        assert sampler.rejections == 3

    def test_every_rejected_byte_for_26(self) -> None:
        for b in range(234, 256):
            sampler = _sampler([b, 5])
            assert sampler.uniform_index(26) == 5
            assert sampler.rejections == 1

    def test_exact_uniformity_over_byte_domain(self) -> None:
        """Feeding each byte value once yields every index equally often."""
        for n in range(1, 257):
            counts: Counter[int] = Counter()
            limit = rejection_limit(n)
            for b in range(256):
                sampler = _sampler([b])
                if b >= limit:
                    with pytest.raises(EntropyUnavailableError):
                        sampler.uniform_index(n)
                    continue
                counts[sampler.uniform_index(n)] += 1
            assert set(counts) == set(range(n))
            assert set(counts.values()) == {limit // n}

    def test_n_one_always_zero(self) -> None:
        sampler = _sampler([0, 128, 255])
        assert [sampler.uniform_index(1) for _ in range(3)] == [0, 0, 0]
        assert sampler.rejections == 0

    def test_n_256_never_rejects(self) -> None:
        sampler = _sampler([255, 0])
        assert sampler.uniform_index(256) == 255
        assert sampler.uniform_index(256) == 0
        assert sampler.rejections == 0

    @pytest.mark.parametrize("n", [0, -1, 257, 1000])
    def test_invalid_domain(self, n: int) -> None:
        with pytest.raises(InvalidDomainError):
            _sampler([0]).uniform_index(n)

    def test_invalid_domain_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            _sampler([0]).uniform_index(0)

    @pytest.mark.parametrize("n", [True, 2.0, "2"])
    def test_non_int_domain(self, n: object) -> None:
        with pytest.raises(InvalidDomainError):
            _sampler([0]).uniform_index(n)  # type: ignore[arg-type]

    def test_invalid_domain_consumes_no_entropy(self) -> None:
        source = SequenceEntropySource([0])
        with pytest.raises(InvalidDomainError):
            UniformSampler(source).uniform_index(0)
        assert source.consumed == 0

    def test_exhausted_source_propagates(self) -> None:
        """All bytes rejected, then the source runs dry."""
        with pytest.raises(EntropyUnavailableError):
            _sampler([250, 251, 252]).uniform_index(26)

    def test_reset_counters(self) -> None:
        sampler = _sampler([255, 1])
        sampler.uniform_index(26)
        sampler.reset_counters()
        assert sampler.draws == 0
        assert sampler.rejections == 0

    def test_results_in_range(self, sampler: UniformSampler) -> None:
        for n in (1, 2, 3, 10, 26, 85, 129, 200, 256):
            for _ in range(200):
                assert 0 <= sampler.uniform_index(n) < n


class TestShuffle:
    """Tests for the Fisher–Yates shuffle."""

    def test_fixed_byte_sequence(self) -> None:
        # i=3 draws j=0 (swap 2<->0), i=2 draws j=1 (no-op).
        items = ["a", "b", "c"]
        _sampler([0, 1]).shuffle(items)
        assert items == ["c", "b", "a"]

    def test_draw_count(self) -> None:
        """One accepted draw per position from len down to 2."""
        sampler = _sampler([0] * 9)
        items = list(range(10))
        sampler.shuffle(items)
        assert sampler.draws == 9

    def test_empty_and_single(self) -> None:
        sampler = _sampler([])
        empty: list[int] = []
        single = ["x"]
        sampler.shuffle(empty)
        sampler.shuffle(single)
        assert empty == []
        assert single == ["x"]
        assert sampler.draws == 0

    def test_is_permutation(self, sampler: UniformSampler) -> None:
        items = list("AAbbcc112233!!@@xyz")
        before = Counter(items)
        for _ in range(50):
            sampler.shuffle(items)
            assert Counter(items) == before

    def test_reaches_every_permutation_of_three(self) -> None:
        sampler = UniformSampler(MockUniformSource(seed=3))
        seen = set()
        for _ in range(600):
            items = [1, 2, 3]
            sampler.shuffle(items)
            seen.add(tuple(items))
        assert len(seen) == 6

    def test_too_long_sequence_rejected(self) -> None:
        with pytest.raises(InvalidDomainError):
            _sampler([0] * 300).shuffle(list(range(257)))


class TestChoice:
    """Tests for choice()."""

    def test_picks_by_index(self) -> None:
        assert _sampler([3]).choice("abcdef") == "d"

    def test_rejection_applies(self) -> None:
        # 10 chars: limit 250, so 250 is rejected and 13 -> index 3.
        assert _sampler([250, 13]).choice("0123456789") == "3"
