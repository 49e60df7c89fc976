"""Project-wide constants (id scale, file modes, buffer sizes)."""

# Width of the random component of an id. Must exceed the number of ids a
# single deployment creates per second.
ID_SCALE: int = 100_000_000
ID_ALPHABET: str = "0123456789abcdefghijklmnopqrstuvwxyz"

FILE_MODE: int = 0o600
DIR_MODE: int = 0o700

READ_PIECE_SIZE: int = 64 * 1024  # 64 KiB

JSON_CONTENT_TYPE: str = "application/json; charset=utf-8"
