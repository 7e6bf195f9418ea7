"""
Number-Theory Panel Tests
=========================
"""

import math

import pytest

from graph import ParseError, ValidationError
from algorithms.numeric import parse_int, euclid_gcd, extended_gcd, mod_inverse, rsa_demo


class TestParseInt:

    def test_strips(self):
        assert parse_int(" 42 ", "a") == 42

    @pytest.mark.parametrize("text", ["", "4.5", "abc", None])
    def test_rejects(self, text):
        with pytest.raises(ParseError):
            parse_int(text, "a")


class TestEuclid:

    def test_example(self):
        res = euclid_gcd(48, 18)
        assert res.gcd == 6
        assert res.lines == [
            "--- GCD of 48 and 18 ---",
            "Step 1: 48 = 18 * 2 + 12",
            "Step 2: 18 = 12 * 1 + 6",
            "Step 3: 12 = 6 * 2 + 0",
            "✅ GCD: 6",
        ]

    @pytest.mark.parametrize("a,b", [(17, 5), (100, 75), (7, 0), (0, 9), (1071, 462)])
    def test_agrees_with_math_gcd(self, a, b):
        assert euclid_gcd(a, b).gcd == math.gcd(a, b)


class TestExtendedGcd:

    @pytest.mark.parametrize("a,b", [(240, 46), (17, 5), (35, 15), (3, 3120)])
    def test_bezout_identity(self, a, b):
        res = extended_gcd(a, b)
        assert res.gcd == math.gcd(a, b)
        assert a * res.s + b * res.t == res.gcd

    def test_check_line(self):
        res = extended_gcd(240, 46)
        assert res.lines[-1] == f"Check: 240({res.s}) + 46({res.t}) = 2"

    def test_mod_inverse(self):
        assert mod_inverse(7, 3120) == 1783
        assert mod_inverse(6, 9) is None


class TestRsa:

    def test_round_trip(self):
        res = rsa_demo(61, 53, 65)

        assert res.n == 3233
        assert res.phi == 3120
        assert res.e == 7
        assert (res.e * res.d) % res.phi == 1
        assert res.decrypted == 65
        assert res.lines[-1] == f"Message: 65 -> Encrypted: {res.cipher} -> Decrypted: 65"

    @pytest.mark.parametrize("p,q,m", [(1, 53, 5), (61, 53, 3233), (61, 53, -1)])
    def test_bad_parameters(self, p, q, m):
        with pytest.raises(ValidationError):
            rsa_demo(p, q, m)
