# -*- coding: utf-8 -*-
"""
tests.test_util
~~~~~~~~~~~~~~~


"""

import pytest

from propconv.util import decode_int, parse_key, to_bool, update_recursive


class TestDecodeInt:
    @pytest.mark.parametrize(
        "value,decoded",
        [
            ("0", 0),
            ("42", 42),
            ("-42", -42),
            ("+7", 7),
            ("0x1F", 31),
            ("0X1f", 31),
            ("#FF", 255),
            ("-0x10", -16),
            ("010", 8),
            ("2147483647", 2**31 - 1),
            ("-2147483648", -(2**31)),
        ],
    )
    def test_decode(self, value, decoded):
        assert decode_int(value) == decoded

    @pytest.mark.parametrize("value", ["", "-", "0x", "0xG", "08", "1.5", " 1", "2147483648", "0x-1"])
    def test_decode_invalid(self, value):
        with pytest.raises(ValueError):
            decode_int(value)


class TestUtil:
    def test_parse_key(self):
        assert parse_key("HTTP Status") == "http_status"
        assert parse_key("color.conf") == "color_conf"

    @pytest.mark.parametrize("value", ["true", "Yes", "y", True, 1])
    def test_to_bool(self, value):
        assert to_bool(value) is True

    def test_to_bool_invalid(self):
        with pytest.raises(TypeError):
            to_bool("maybe")

    def test_update_recursive(self):
        configs = {"color": {"default": "red"}, "enabled": True}
        update_recursive(configs, {"color": {"default": "blue", "name": "Colors"}, "enabled": False}, replace=False)
        assert configs == {"color": {"default": "red", "name": "Colors"}, "enabled": True}
