"""Short, roughly time-ordered random identifiers.

An id is ``unix_seconds * ID_SCALE + random`` rendered in base 36. Ids made
at least a second apart decode to increasing integers; ids made within the
same second only rely on the random component to stay distinct. Nothing
coordinates the random component between processes, so this scheme suits
small and medium deployments, not large fleets minting many ids per second.
"""

import secrets
import time

from svcutil.constants import ID_ALPHABET, ID_SCALE
from svcutil.exceptions import EntropyError
from svcutil.logging_config import get_logger

logger = get_logger(__name__)


def _current_timestamp() -> int:
    return int(time.time())


def _random_component() -> int:
    try:
        return secrets.randbelow(ID_SCALE)
    except (OSError, NotImplementedError) as e:
        raise EntropyError(f"secure random source unavailable: {e}") from e


def to_base36(value: int) -> str:
    """
    Render a non-negative integer in base 36 with lowercase digits.

    Args:
        value: Integer to render

    Returns:
        Base-36 text without padding
    """
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return ID_ALPHABET[0]

    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(ID_ALPHABET[rem])
    return "".join(reversed(digits))


def new_id() -> str:
    """
    Generate a new identifier.

    Returns:
        Base-36 id string, variable length

    Raises:
        EntropyError: If the secure random source cannot be read
    """
    value = _current_timestamp() * ID_SCALE + _random_component()
    id_ = to_base36(value)
    logger.debug(f"Generated id {id_}")
    return id_


def decode_id(id_: str) -> int:
    """
    Decode an identifier back to its integer value.

    Raises:
        ValueError: If the text is not a base-36 id
    """
    if not id_ or any(ch not in ID_ALPHABET for ch in id_):
        raise ValueError(f"invalid id: {id_!r}")
    return int(id_, 36)


def id_timestamp(id_: str) -> int:
    """Unix timestamp (seconds) an id was generated at."""
    return decode_id(id_) // ID_SCALE
