# tests/unit/test_scoring.py
"""
Unit tests for the score orchestrator
"""
import asyncio
import inspect
from unittest.mock import AsyncMock, patch

import pytest

from core.scoring import StrategyDescriptor, get_scores, is_strategy_active
from tests.fixtures.mock_data import USER_1, USER_2
from utils.errors import StrategyError


def delayed_strategy(scores, delay):
    async def strategy(space, network, w3, addresses, params, snapshot):
        await asyncio.sleep(delay)
        return scores
    return AsyncMock(side_effect=strategy)


@pytest.mark.unit
class TestGetScores:
    """Test cases for get_scores()"""

    @pytest.mark.asyncio
    async def test_inactive_strategy_is_not_invoked(self, mock_w3, addresses):
        strategy = AsyncMock(return_value={USER_1: 1.0})

        with patch.dict('strategies.STRATEGIES', {'erc20-balance': strategy}):
            scores = await get_scores(
                's', [{'name': 'erc20-balance', 'params': {'start': 100}}],
                '256', mock_w3, addresses, 50,
            )

        assert scores == [{}]
        strategy.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_order_follows_input_not_completion(self, mock_w3, addresses):
        registry = {
            'a': delayed_strategy({USER_1: 1.0}, 0.03),
            'b': delayed_strategy({USER_1: 2.0}, 0.0),
            'c': delayed_strategy({USER_1: 3.0}, 0.01),
        }

        with patch.dict('strategies.STRATEGIES', registry):
            scores = await get_scores(
                's', [{'name': 'a'}, {'name': 'b'}, {'name': 'c'}],
                '256', mock_w3, addresses,
            )

        assert scores == [{USER_1: 1.0}, {USER_1: 2.0}, {USER_1: 3.0}]

    @pytest.mark.asyncio
    async def test_one_failure_fails_everything(self, mock_w3, addresses):
        registry = {
            'a': delayed_strategy({USER_1: 1.0}, 0.0),
            'b': AsyncMock(side_effect=RuntimeError("subgraph down")),
            'c': delayed_strategy({USER_1: 3.0}, 0.0),
        }

        with patch.dict('strategies.STRATEGIES', registry):
            with pytest.raises(RuntimeError, match="subgraph down"):
                await get_scores(
                    's', [{'name': 'a'}, {'name': 'b'}, {'name': 'c'}],
                    '256', mock_w3, addresses,
                )

    @pytest.mark.asyncio
    async def test_arguments_are_passed_verbatim(self, mock_w3, addresses):
        strategy = AsyncMock(return_value={USER_2: 0.5})
        params = {'address': '0xtoken', 'start': 10, 'decimals': 6}

        with patch.dict('strategies.STRATEGIES', {'x': strategy}):
            scores = await get_scores(
                'space.heco', [StrategyDescriptor('x', params)], '128', mock_w3, addresses, 20,
            )

        assert scores == [{USER_2: 0.5}]
        strategy.assert_awaited_once_with('space.heco', '128', mock_w3, addresses, params, 20)

    @pytest.mark.asyncio
    async def test_latest_ignores_start(self, mock_w3, addresses):
        strategy = AsyncMock(return_value={USER_1: 9.0})

        with patch.dict('strategies.STRATEGIES', {'x': strategy}):
            scores = await get_scores(
                's', [{'name': 'x', 'params': {'start': 10 ** 9}}], '256', mock_w3, addresses,
            )

        assert scores == [{USER_1: 9.0}]

    @pytest.mark.asyncio
    async def test_strategy_raising_on_call_closes_created_coroutines(self, mock_w3, addresses):
        created = []

        async def first(space, network, w3, addresses, params, snapshot):
            return {USER_1: 1.0}

        def record(*args):
            coro = first(*args)
            created.append(coro)
            return coro

        def broken(*args):
            raise ValueError("bad params")

        with patch.dict('strategies.STRATEGIES', {'a': record, 'b': broken}):
            with pytest.raises(ValueError, match="bad params"):
                await get_scores('s', [{'name': 'a'}, {'name': 'b'}], '256', mock_w3, addresses)

        assert len(created) == 1
        assert inspect.getcoroutinestate(created[0]) == inspect.CORO_CLOSED

    @pytest.mark.asyncio
    async def test_unknown_strategy_launches_nothing(self, mock_w3, addresses):
        strategy = AsyncMock(return_value={})

        with patch.dict('strategies.STRATEGIES', {'known': strategy}):
            with pytest.raises(StrategyError):
                await get_scores(
                    's', [{'name': 'known'}, {'name': 'missing'}], '256', mock_w3, addresses,
                )

        strategy.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_strategy_list(self, mock_w3, addresses):
        assert await get_scores('s', [], '256', mock_w3, addresses) == []


@pytest.mark.unit
class TestIsStrategyActive:
    """Test cases for the start-block filter"""

    @pytest.mark.parametrize("params,snapshot,expected", [
        ({'start': 100}, 50, False),
        ({'start': 100}, 100, True),
        ({'start': 100}, 150, True),
        ({'start': 100}, 'latest', True),
        ({'start': 100}, '50', False),
        ({}, 50, True),
        ({'start': None}, 50, True),
        ({'start': 'soon'}, 50, True),
    ])
    def test_start_filter(self, params, snapshot, expected):
        assert is_strategy_active({'name': 'x', 'params': params}, snapshot) is expected

    def test_missing_params(self):
        assert is_strategy_active({'name': 'x'}, 10) is True
