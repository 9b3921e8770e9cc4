"""
Tests for compare_levels and the ComparisonInput bounds.
"""

import pytest
from pydantic import ValidationError

from job_matrix.models.schemas import ComparisonInput
from job_matrix.services.comparison import compare_levels


class TestComparisonInput:

    @pytest.mark.parametrize('level_ids', [[], ['L3'], ['L1/L2', 'L3', 'L4', 'L5', 'EM1']])
    def test_rejects_out_of_range_counts(self, level_ids):
        with pytest.raises(ValidationError):
            ComparisonInput(level_ids=level_ids)

    @pytest.mark.parametrize('level_ids', [['L3', 'L5'], ['L1/L2', 'L3', 'L5', 'EM1']])
    def test_accepts_two_to_four(self, level_ids):
        assert ComparisonInput(level_ids=level_ids).level_ids == level_ids


class TestCompareLevels:

    @pytest.mark.asyncio
    async def test_request_order_preserved(self, populated_store):
        levels = await compare_levels(populated_store, ComparisonInput(level_ids=['TL1', 'EM1', 'L3']))

        assert [level.id for level in levels] == ['TL1', 'EM1', 'L3']

    @pytest.mark.asyncio
    async def test_repeated_id_appears_once_at_first_position(self, populated_store):
        levels = await compare_levels(populated_store, ComparisonInput(level_ids=['L5', 'L3', 'L5']))

        assert [level.id for level in levels] == ['L5', 'L3']

    @pytest.mark.asyncio
    async def test_unknown_ids_skipped(self, populated_store):
        levels = await compare_levels(populated_store, ComparisonInput(level_ids=['L3', 'VP1']))

        assert [level.id for level in levels] == ['L3']

    @pytest.mark.asyncio
    async def test_all_unknown_returns_empty(self, populated_store):
        assert await compare_levels(populated_store, ComparisonInput(level_ids=['VP1', 'VP2'])) == []

    @pytest.mark.asyncio
    async def test_criteria_attached_in_insertion_order(self, populated_store):
        levels = await compare_levels(populated_store, ComparisonInput(level_ids=['L3', 'L1/L2']))

        assert [c.id for c in levels[0].criteria] == [1, 2, 3]
        assert levels[1].criteria == []

    @pytest.mark.asyncio
    async def test_single_fetch(self, populated_store):
        await compare_levels(populated_store, ComparisonInput(level_ids=['L3', 'L5', 'EM1']))

        assert populated_store.calls == ['fetch_levels_with_criteria']
