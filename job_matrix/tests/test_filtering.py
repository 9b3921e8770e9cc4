"""
Tests for get_filtered_levels: every level is returned, only criteria are pruned.
"""

import pytest

from job_matrix.models.schemas import FilterInput
from job_matrix.services.filtering import get_filtered_levels


def _taxonomy(levels):
    return {
        level.id: [(c.category, c.sub_category) for c in level.criteria]
        for level in levels
    }


class TestGetFilteredLevels:

    @pytest.mark.asyncio
    async def test_no_filters_returns_everything(self, populated_store):
        levels = await get_filtered_levels(populated_store, FilterInput())

        assert [level.id for level in levels] == ['EM1', 'L1/L2', 'L3', 'L5', 'TL1']
        assert sum(len(level.criteria) for level in levels) == 7

    @pytest.mark.asyncio
    async def test_empty_lists_mean_no_restriction(self, populated_store):
        levels = await get_filtered_levels(
            populated_store, FilterInput(categories=[], sub_categories=[]),
        )

        assert sum(len(level.criteria) for level in levels) == 7

    @pytest.mark.asyncio
    async def test_category_filter(self, populated_store):
        levels = await get_filtered_levels(populated_store, FilterInput(categories=['Craft']))

        assert _taxonomy(levels) == {
            'EM1': [('Craft', 'Scope')],
            'L1/L2': [],
            'L3': [('Craft', 'Technical Expertise'), ('Craft', 'Scope')],
            'L5': [('Craft', 'Technical Expertise')],
            'TL1': [],
        }

    @pytest.mark.asyncio
    async def test_category_and_sub_category_filters_combine(self, populated_store):
        levels = await get_filtered_levels(
            populated_store, FilterInput(categories=['Craft'], sub_categories=['Scope']),
        )

        taxonomy = _taxonomy(levels)
        assert taxonomy['L3'] == [('Craft', 'Scope')]
        assert taxonomy['EM1'] == [('Craft', 'Scope')]
        assert taxonomy['L5'] == []

    @pytest.mark.asyncio
    async def test_sub_category_filter_alone(self, populated_store):
        levels = await get_filtered_levels(populated_store, FilterInput(sub_categories=['Planning']))

        taxonomy = _taxonomy(levels)
        assert taxonomy['L3'] == [('Impact', 'Planning')]
        assert taxonomy['EM1'] == [('Impact', 'Planning')]
        assert taxonomy['L5'] == []

    @pytest.mark.asyncio
    async def test_unknown_category_keeps_all_levels(self, populated_store):
        levels = await get_filtered_levels(populated_store, FilterInput(categories=['Leadership']))

        assert len(levels) == 5
        assert all(level.criteria == [] for level in levels)

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, failing_store):
        with pytest.raises(RuntimeError):
            await get_filtered_levels(failing_store, FilterInput())
