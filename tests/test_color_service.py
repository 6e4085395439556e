"""
Unit tests for ColorService
"""

import pytest

from identicon.errors import InvalidInput
from identicon.models.identicon import RawHash
from identicon.services.color_service import ColorService


class TestColorService:

    def test_banana_color(self, banana_raw, banana_hex):
        colored = ColorService().pick_color(banana_raw)
        assert colored.color == (114, 179, 2)
        assert colored.hex == banana_hex

    def test_exactly_three_bytes(self):
        assert ColorService().pick_color(RawHash(hex=(1, 2, 3))).color == (1, 2, 3)

    @pytest.mark.parametrize("hex_list", [(), (7,), (7, 8)])
    def test_short_hash_rejected(self, hex_list):
        with pytest.raises(InvalidInput):
            ColorService().pick_color(RawHash(hex=hex_list))

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            ColorService().pick_color(RawHash(hex=(1, 2)))
