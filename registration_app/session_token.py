import logging
import os
import random
import secrets
import uuid
from typing import Callable, Optional

logger = logging.getLogger(__name__)

RandomBytes = Callable[[int], bytes]

TOKEN_BYTES = 16


def _strong_source_available() -> bool:
    try:
        os.urandom(1)
        return True
    except NotImplementedError:
        return False


def select_random_source() -> RandomBytes:
    """
    Picks the randomness used for session tokens: the OS CSPRNG when the
    platform has one, otherwise a seeded pseudo-random generator. There is
    a single fallback tier: random.SystemRandom reads the same OS source as
    secrets, so it cannot help when that source is missing.
    """
    if _strong_source_available():
        logger.debug("Session tokens use the OS random source.")
        return secrets.token_bytes

    logger.warning("No OS random source available, session tokens fall back to pseudo-random bytes.")
    return random.Random().randbytes


RANDOM_SOURCE: RandomBytes = select_random_source()


def generate_session_token(random_bytes: Optional[RandomBytes] = None) -> str:
    """
    Returns a fresh UUID-v4 string, e.g. "1b4e28ba-2fa1-4d2b-883f-0016d3cca427".
    The version nibble is forced to 4 and the variant to RFC 4122, whatever
    the source returns. Call once per submission attempt.
    """
    source = random_bytes or RANDOM_SOURCE
    raw = source(TOKEN_BYTES)
    if len(raw) != TOKEN_BYTES:
        raise ValueError(f"Random source returned {len(raw)} bytes, expected {TOKEN_BYTES}")
    return str(uuid.UUID(bytes=raw, version=4))
