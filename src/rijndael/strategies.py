"""Work-splitting strategies for per-block cipher evaluation.

Blocks are processed independently (electronic codebook), so the
orchestrator can hand the whole block list to a strategy. Every strategy
must return results in input order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Sequence

BlockFn = Callable[[bytes], bytes]


class BlockStrategy(ABC):
    """Abstract base class for block-mapping strategies.

    All strategies must inherit from this class and implement map_blocks().
    """

    # Class attributes to be overridden by subclasses
    name: str = "base"
    description: str = "Base strategy (abstract)"

    def __init__(self, workers: int = 1):
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.workers = workers

    @abstractmethod
    def map_blocks(self, fn: BlockFn, blocks: Sequence[bytes]) -> list[bytes]:
        """Apply fn to every block.

        Args:
            fn: Single-block transform
            blocks: Input blocks

        Returns:
            Transformed blocks, in the same order as the input
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, workers={self.workers})"


class SerialStrategy(BlockStrategy):
    """Process blocks one after another on the calling thread."""

    name = "serial"
    description = "Process blocks sequentially on the calling thread"

    def map_blocks(self, fn: BlockFn, blocks: Sequence[bytes]) -> list[bytes]:
        return [fn(block) for block in blocks]


class ThreadPoolStrategy(BlockStrategy):
    """Spread blocks over a thread pool.

    Executor.map yields results in submission order, so the output is
    identical to SerialStrategy.
    """

    name = "threads"
    description = "Process blocks on a concurrent.futures thread pool"

    def map_blocks(self, fn: BlockFn, blocks: Sequence[bytes]) -> list[bytes]:
        if self.workers == 1 or len(blocks) <= 1:
            return [fn(block) for block in blocks]
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            return list(executor.map(fn, blocks))


# Registry of available strategies
STRATEGIES: dict[str, type[BlockStrategy]] = {
    "serial": SerialStrategy,
    "threads": ThreadPoolStrategy,
}


def get_strategy(name: str) -> type[BlockStrategy]:
    """Get strategy class by name.

    Raises:
        KeyError: If strategy not found
    """
    if name not in STRATEGIES:
        available = ", ".join(STRATEGIES.keys())
        raise KeyError(f"Unknown strategy '{name}'. Available: {available}")
    return STRATEGIES[name]


def list_strategies() -> list[dict[str, str]]:
    """List all available strategies with descriptions."""
    result = []
    for name, cls in STRATEGIES.items():
        result.append({
            "name": name,
            "description": getattr(cls, "description", "No description"),
        })
    return result
