"""Identifier generation for new training sessions."""
from __future__ import annotations

import logging
import random
import string
import uuid


logger = logging.getLogger(__name__)

_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def new_id() -> str:
    """
    Return a fresh session identifier.

    A random UUID is used whenever the platform provides a secure random
    source. Without one, ``os.urandom`` raises ``NotImplementedError`` and the
    id falls back to a base-36 encoding of a pseudo-random 64-bit integer.

    Returns:
        Opaque identifier string
    """
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        logger.debug("No secure random source available, using pseudo-random id")
        return _to_base36(random.getrandbits(64))
