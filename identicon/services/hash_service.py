import hashlib
import logging

from ..config import HASH_ALGORITHM, HASH_SIZE
from ..models.identicon import RawHash
from ..errors import InvalidInput

logger = logging.getLogger(__name__)


class HashService:
    """Turns input text into the digest bytes every later stage works from."""

    def __init__(self, algorithm: str = HASH_ALGORITHM):
        digest_size = hashlib.new(algorithm).digest_size
        if digest_size != HASH_SIZE:
            raise InvalidInput(
                f"{algorithm} gives {digest_size}-byte digests, the 5x5 grid needs {HASH_SIZE}"
            )
        self.algorithm = algorithm

    def digest(self, text: str) -> bytes:
        return hashlib.new(self.algorithm, text.encode("utf-8")).digest()

    def hexdigest(self, text: str) -> str:
        return self.digest(text).hex()

    def hash_input(self, text: str) -> RawHash:
        """
        Args:
            text (str): Any string, including the empty string.

        Returns:
            RawHash: 16 ints in [0, 255] for md5.
        """
        hex_list = tuple(self.digest(text))
        logger.debug(f"{self.algorithm}({text!r}) -> {list(hex_list)}")
        return RawHash(hex=hex_list)
