"""Tests for domain models and failure classification."""

import pytest

from tricking.models.combo import ComboFilters, ComboRequest, SamplingStrategy
from tricking.models.failure import (
    FailureKind,
    InsufficientCandidatesError,
    InvalidSizeError,
    KnownError,
    TrickNotFoundError,
)
from tricking.models.trick import CandidatePool, TrickCandidate


class TestTrickCandidate:
    def test_defaults(self) -> None:
        candidate = TrickCandidate(id=1, name="Cork")

        assert candidate.weight == 1
        assert candidate.takeoff_stance is None
        assert candidate.landing_stance is None
        assert candidate.difficulty is None

    @pytest.mark.parametrize(("weight", "effective"), [(0, 1), (1, 1), (7, 7)])
    def test_effective_weight(self, weight: int, effective: int) -> None:
        assert TrickCandidate(id=1, name="Cork", weight=weight).effective_weight == effective

    def test_is_immutable(self) -> None:
        candidate = TrickCandidate(id=1, name="Cork")
        with pytest.raises(AttributeError):
            candidate.weight = 5  # type: ignore[misc]


class TestCandidatePool:
    def test_len_and_iter(self) -> None:
        pool = CandidatePool.of(TrickCandidate(id=i, name=str(i)) for i in range(3))

        assert len(pool) == 3
        assert [c.id for c in pool] == [0, 1, 2]
        assert pool.ids() == {0, 1, 2}

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate trick id 1"):
            CandidatePool.of([TrickCandidate(id=1, name="A"), TrickCandidate(id=1, name="B")])

    def test_empty_pool(self) -> None:
        assert len(CandidatePool()) == 0


class TestComboRequest:
    def test_defaults(self) -> None:
        request = ComboRequest(size=3)

        assert request.strategy == SamplingStrategy.WEIGHTED
        assert request.seed is None
        assert request.filters.is_empty()

    def test_filters_not_empty(self) -> None:
        assert not ComboFilters(max_difficulty=5).is_empty()
        assert not ComboFilters(exclude_trick_ids=(1,)).is_empty()

    def test_strategy_values(self) -> None:
        assert SamplingStrategy("flow") == SamplingStrategy.FLOW
        assert SamplingStrategy("weighted") == SamplingStrategy.WEIGHTED


class TestFailures:
    def test_invalid_size_is_known_error(self) -> None:
        error = InvalidSizeError(0)

        assert isinstance(error, KnownError)
        assert error.size == 0
        assert error.kind == FailureKind.INVALID_SIZE
        assert "at least 1" in error.message

    def test_insufficient_candidates_message(self) -> None:
        error = InsufficientCandidatesError(requested=5, available=2)

        assert str(error) == (
            "Not enough tricks available for requested combo size: "
            "need 5 tricks, only 2 available."
        )
        assert error.kind == FailureKind.INSUFFICIENT_CANDIDATES

    def test_to_response(self) -> None:
        response = InsufficientCandidatesError(requested=5, available=2).to_response()
        body = response.model_dump(mode="json")

        assert body["failure"]["kind"] == "insufficient_candidates"
        assert body["failure"]["detail"] == "requested=5 available=2"
        assert body["failure"]["suggestion"]

    def test_trick_not_found(self) -> None:
        error = TrickNotFoundError(42)

        assert isinstance(error, KnownError)
        assert error.trick_id == 42
        assert error.kind == FailureKind.NOT_FOUND
        assert error.status_code == 404
        assert error.message == "Trick 42 not found"
