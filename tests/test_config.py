"""Tests for CipherConfig and the block strategies."""

import pytest

from rijndael.config import CipherConfig
from rijndael.strategies import (
    STRATEGIES,
    SerialStrategy,
    ThreadPoolStrategy,
    get_strategy,
    list_strategies,
)


def double(block: bytes) -> bytes:
    return block * 2


class TestCipherConfig:
    """Tests for configuration validation."""

    def test_defaults(self) -> None:
        config = CipherConfig()
        assert config.strategy == "serial"
        assert config.workers == 1
        assert config.block_size == 16
        assert config.parallel is False

    def test_parallel(self) -> None:
        assert CipherConfig(strategy="threads", workers=4).parallel is True
        assert CipherConfig(strategy="threads", workers=1).parallel is False

    def test_unknown_strategy(self) -> None:
        with pytest.raises(ValueError, match="Unknown strategy"):
            CipherConfig(strategy="gpu")

    def test_bad_workers(self) -> None:
        with pytest.raises(ValueError, match="workers"):
            CipherConfig(workers=0)

    def test_bad_block_size(self) -> None:
        with pytest.raises(ValueError, match="block_size"):
            CipherConfig(block_size=32)

    def test_create_strategy(self) -> None:
        strategy = CipherConfig(strategy="threads", workers=3).create_strategy()
        assert isinstance(strategy, ThreadPoolStrategy)
        assert strategy.workers == 3


class TestStrategyRegistry:
    """Tests for strategy registry."""

    def test_all_strategies_registered(self) -> None:
        assert "serial" in STRATEGIES
        assert "threads" in STRATEGIES

    def test_get_strategy_valid(self) -> None:
        assert get_strategy("serial") is SerialStrategy
        assert get_strategy("threads") is ThreadPoolStrategy

    def test_get_strategy_invalid(self) -> None:
        with pytest.raises(KeyError, match="Unknown strategy"):
            get_strategy("nonexistent")

    def test_list_strategies(self) -> None:
        strategies = list_strategies()
        assert [s["name"] for s in strategies] == ["serial", "threads"]
        for s in strategies:
            assert s["description"]


class TestStrategies:
    """Both strategies map in input order."""

    @pytest.mark.parametrize("cls", [SerialStrategy, ThreadPoolStrategy])
    @pytest.mark.parametrize("workers", [1, 2, 8])
    def test_order_preserved(self, cls, workers: int) -> None:
        blocks = [bytes([i]) * 16 for i in range(50)]
        result = cls(workers=workers).map_blocks(double, blocks)
        assert result == [b * 2 for b in blocks]

    def test_empty(self) -> None:
        assert ThreadPoolStrategy(workers=4).map_blocks(double, []) == []

    def test_rejects_zero_workers(self) -> None:
        with pytest.raises(ValueError):
            SerialStrategy(workers=0)

    def test_repr(self) -> None:
        assert repr(ThreadPoolStrategy(workers=2)) == "ThreadPoolStrategy(name='threads', workers=2)"
