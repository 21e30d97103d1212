from __future__ import annotations

import logging
import random
import string
import uuid

logger = logging.getLogger(__name__)

_ALPHABET = string.ascii_lowercase + string.digits
_FALLBACK_CHUNK = 13


def _random_chunk(rng: random.Random) -> str:
    return "".join(rng.choice(_ALPHABET) for _ in range(_FALLBACK_CHUNK))


def fallback_id(rng: random.Random | None = None) -> str:
    """Pseudo-random id built from two independent draws (26 alphanumeric chars)."""
    rng = rng or random.Random()
    return _random_chunk(rng) + _random_chunk(rng)


def generate_id() -> str:
    """Opaque unique id for new staff, event types and logs."""
    try:
        return str(uuid.uuid4())
    except (NotImplementedError, OSError):
        # uuid4 needs os.urandom
        logger.warning("Strong random source unavailable, using fallback id generator")
        return fallback_id()
