from ..models.identicon import RawHash, ColoredHash
from ..errors import InvalidInput


class ColorService:
    """
    Derives the foreground color from the first three hash bytes.
    """

    def pick_color(self, raw: RawHash) -> ColoredHash:
        """
        Args:
            raw (RawHash): Digest with at least 3 bytes.

        Returns:
            ColoredHash: Same bytes plus color = (hex[0], hex[1], hex[2]).

        Raises:
            InvalidInput: If fewer than 3 bytes are available.
        """
        hex_list = raw.hex
        if len(hex_list) < 3:
            raise InvalidInput(f"Need at least 3 hash bytes to pick a color, got {len(hex_list)}")

        r, g, b = hex_list[0], hex_list[1], hex_list[2]
        return ColoredHash(hex=hex_list, color=(r, g, b))
