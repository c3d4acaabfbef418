"""Tests for the combo generation service."""

import random
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from tricking.models.combo import ComboFilters, ComboRequest, SamplingStrategy
from tricking.models.db import TrickDB
from tricking.models.failure import InsufficientCandidatesError, InvalidSizeError
from tricking.services.combo_generator import (
    generate_combo,
    generate_simple_combo,
    load_candidate_pool,
    request_rng,
)


class TestRequestRng:
    def test_seeded_matches_plain_random(self) -> None:
        assert request_rng(7).random() == random.Random(7).random()

    def test_unseeded_generators_are_independent(self) -> None:
        first = request_rng(None)
        second = request_rng(None)
        second_state = second.getstate()

        assert first is not second
        assert first.getstate() != second_state

        for _ in range(100):
            first.random()

        assert second.getstate() == second_state


class TestLoadCandidatePool:
    async def test_pool_matches_filters(
        self,
        session: AsyncSession,
        seeded_catalog: list[TrickDB],  # noqa: ARG002
    ) -> None:
        request = ComboRequest(size=2, filters=ComboFilters(exclude_category_ids=(2,)))

        pool = await load_candidate_pool(session, request)

        assert pool.ids() == {1, 2, 5}


class TestGenerateCombo:
    async def test_returns_requested_size(
        self,
        session: AsyncSession,
        seeded_catalog: list[TrickDB],  # noqa: ARG002
    ) -> None:
        combo = await generate_combo(session, ComboRequest(size=3), random.Random(1))

        assert combo.count == 3
        assert len({t.id for t in combo.tricks}) == 3
        assert combo.notation == " > ".join(t.name for t in combo.tricks)

    async def test_seed_reproduces_combo(
        self,
        session: AsyncSession,
        seeded_catalog: list[TrickDB],  # noqa: ARG002
    ) -> None:
        request = ComboRequest(size=4, strategy=SamplingStrategy.FLOW, seed=42)

        first = await generate_combo(session, request)
        second = await generate_combo(session, request)

        assert first == second

    async def test_uses_only_filtered_tricks(
        self,
        session: AsyncSession,
        seeded_catalog: list[TrickDB],  # noqa: ARG002
    ) -> None:
        request = ComboRequest(size=2, filters=ComboFilters(trick_ids=(3, 4)))

        combo = await generate_combo(session, request, random.Random(0))

        assert {t.id for t in combo.tricks} == {3, 4}
        assert combo.total_difficulty == 11

    async def test_insufficient_candidates(
        self,
        session: AsyncSession,
        seeded_catalog: list[TrickDB],  # noqa: ARG002
    ) -> None:
        request = ComboRequest(size=3, filters=ComboFilters(max_difficulty=3))

        with pytest.raises(InsufficientCandidatesError) as exc_info:
            await generate_combo(session, request)

        assert exc_info.value.requested == 3
        assert exc_info.value.available == 2

    async def test_invalid_size_skips_database(self) -> None:
        """A bad size fails before the candidate fetch."""
        with patch(
            "tricking.services.combo_generator.find_candidate_tricks",
            new_callable=AsyncMock,
        ) as mock_find:
            with pytest.raises(InvalidSizeError):
                await generate_combo(AsyncMock(), ComboRequest(size=0))

        mock_find.assert_not_called()


class TestGenerateSimpleCombo:
    async def test_draws_from_whole_catalog(
        self,
        session: AsyncSession,
        seeded_catalog: list[TrickDB],  # noqa: ARG002
    ) -> None:
        combo = await generate_simple_combo(session, 5, random.Random(3))

        assert sorted(t.id for t in combo.tricks) == [1, 2, 3, 4, 5]

    async def test_empty_catalog(self, session: AsyncSession) -> None:
        with pytest.raises(InsufficientCandidatesError) as exc_info:
            await generate_simple_combo(session, 1)

        assert exc_info.value.available == 0
