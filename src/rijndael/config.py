"""Cipher configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .strategies import STRATEGIES, BlockStrategy, get_strategy


@dataclass
class CipherConfig:
    """Configuration object for the block orchestrator.

    The defaults give plain single-threaded processing; parallel block
    evaluation has to be asked for explicitly.
    """

    # Block work-splitting strategy (see rijndael.strategies)
    strategy: str = "serial"

    # Worker count for strategies that use a pool
    workers: int = 1

    # Block length in bytes. AES fixes this at 16; wider Rijndael
    # blocks are not supported.
    block_size: int = 16

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.strategy not in STRATEGIES:
            available = ", ".join(STRATEGIES.keys())
            raise ValueError(
                f"Unknown strategy '{self.strategy}'. Available: {available}"
            )
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.block_size != 16:
            raise ValueError(f"block_size must be 16, got {self.block_size}")

    @property
    def parallel(self) -> bool:
        """True when blocks may be processed concurrently."""
        return self.strategy != "serial" and self.workers > 1

    def create_strategy(self) -> BlockStrategy:
        """Instantiate the configured strategy."""
        return get_strategy(self.strategy)(workers=self.workers)
