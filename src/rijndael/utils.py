"""
Utility functions for byte/state conversions, block splitting and hex
formatting.

The Rijndael state is 4x4 bytes in column-major order:
  state[row][col] where row, col in [0..3]

Column-major mapping from a 16-byte block:
  byte[0]  -> state[0][0]
  byte[1]  -> state[1][0]
  byte[2]  -> state[2][0]
  byte[3]  -> state[3][0]
  byte[4]  -> state[0][1]
  ...
  byte[15] -> state[3][3]
"""

BLOCK_SIZE = 16

State = list[list[int]]


def bytes_to_state(data: bytes) -> State:
    """
    Convert 16 bytes to a 4x4 state (column-major).

    Args:
        data: 16 bytes of input

    Returns:
        4x4 list of integers (0-255)
    """
    if len(data) != BLOCK_SIZE:
        raise ValueError(f"Expected {BLOCK_SIZE} bytes, got {len(data)}")

    state = [[0 for _ in range(4)] for _ in range(4)]
    for col in range(4):
        for row in range(4):
            state[row][col] = data[row + 4 * col]
    return state


def state_to_bytes(state: State) -> bytes:
    """
    Convert a 4x4 state back to 16 bytes (column-major).
    """
    result = []
    for col in range(4):
        for row in range(4):
            result.append(state[row][col])
    return bytes(result)


def split_blocks(data: bytes, block_size: int = BLOCK_SIZE) -> list[bytes]:
    """
    Split block-aligned data into consecutive blocks.

    Args:
        data: Input whose length is a multiple of block_size
        block_size: Block length in bytes

    Returns:
        List of block_size-byte chunks in input order
    """
    if len(data) % block_size != 0:
        raise ValueError(
            f"Data length {len(data)} is not a multiple of {block_size}"
        )
    data = bytes(data)
    return [data[i:i + block_size] for i in range(0, len(data), block_size)]


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert a hex string to bytes. Whitespace is ignored.
    """
    return bytes.fromhex("".join(hex_str.split()))


def bytes_to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hex string.
    """
    return bytes(data).hex()


def state_to_hex(state: State) -> str:
    """
    Convert state to hex string (via bytes).
    """
    return bytes_to_hex(state_to_bytes(state))


def hex_to_state(hex_str: str) -> State:
    """
    Convert hex string to state.
    """
    return bytes_to_state(hex_to_bytes(hex_str))

