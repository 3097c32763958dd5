"""
Trace recording and pretty printing for cipher runs.

Contains:
- TraceRecorder: per-operation records, optional JSON Lines file and
  compact verbose stdout
- print_header / print_result: shared formatting helpers for the CLI
"""

import json
from typing import Any, TextIO

from .utils import state_to_hex


class TraceRecorder:
    """
    Records and outputs traces of block encryption/decryption.

    Each record is a dict with at least ``block``, ``round`` and
    ``operation``; ``state`` (a 4x4 state) is stored as hex.
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """Record a trace entry."""
        if "state" in kwargs:
            kwargs["state"] = state_to_hex(kwargs["state"])
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        self.trace_file.write(json.dumps(record) + "\n")
        self.trace_file.flush()

    def _print_verbose(self, record: dict[str, Any]) -> None:
        block = record.get("block", 0)
        round_num = record.get("round", "?")
        operation = record.get("operation", "unknown")
        state_hex = record.get("state", "")
        print(f"B{block:04d} R{round_num:<2}  {operation:15s} STATE:{state_hex}")

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


# ------------------------------------------------------------------
# Shared formatting functions
# ------------------------------------------------------------------

def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'#'*70}")
    print(f"# {title}")
    print(f"{'#'*70}")


def print_result(label: str, value_hex: str, blocks: int,
                 passed: bool | None = None) -> None:
    """Print a final cipher result."""
    print(f"\n{'='*70}")
    print("RESULT")
    print(f"{'='*70}")
    print(f"{label}: {value_hex}")
    print(f"Blocks: {blocks}")

    if passed is not None:
        status = "PASS" if passed else "FAIL"
        marker = "[OK]" if passed else "[ERROR]"
        print(f"Verification: {marker} {status}")
    print(f"{'='*70}")
