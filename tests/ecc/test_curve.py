#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eclib.ecc.curve` module."

from typing import Dict

import pytest

from eclib.ecc.curve import CURVES, Curve, KeyPair, mult, secp256k1
from eclib.ecc.curve_group import mult_aff
from eclib.ecc.point import INF, Point
from eclib.exceptions import EClibValueError

# test curves: very low cardinality
low_card_curves: Dict[str, Curve] = {}
# 13 % 4 = 1; 13 % 8 = 5
low_card_curves["ec13_11"] = Curve(13, 7, 6, (1, 1), 11)
low_card_curves["ec13_19"] = Curve(13, 0, 2, (1, 9), 19)
# 17 % 4 = 1; 17 % 8 = 1
low_card_curves["ec17_13"] = Curve(17, 6, 8, (0, 12), 13)
low_card_curves["ec17_23"] = Curve(17, 3, 5, (1, 14), 23)
# 19 % 4 = 3; 19 % 8 = 3
low_card_curves["ec19_13"] = Curve(19, 0, 2, (4, 16), 13)
low_card_curves["ec19_23"] = Curve(19, 2, 9, (0, 16), 23)
# 23 % 4 = 3; 23 % 8 = 7
low_card_curves["ec23_19"] = Curve(23, 9, 7, (5, 4), 19)
low_card_curves["ec23_31"] = Curve(23, 5, 1, (0, 1), 31)

all_curves: Dict[str, Curve] = {}
all_curves.update(low_card_curves)
all_curves.update(CURVES)

ec23_31 = low_card_curves["ec23_31"]


def test_exceptions() -> None:

    # good curve
    Curve(13, 0, 2, (1, 9), 19)
    Curve(13, 0, 2, Point(1, 9), 19)
    Curve("0d", "0x0", b"\x02", ("01", "09"), "0x13")

    with pytest.raises(EClibValueError, match="p is not prime: "):
        Curve(15, 0, 2, (1, 9), 19)

    with pytest.raises(EClibValueError, match="negative a: "):
        Curve(13, -1, 2, (1, 9), 19)

    with pytest.raises(EClibValueError, match="zero discriminant"):
        Curve(11, 7, 7, (1, 9), 19)

    err_msg = "Generator must a be a sequence\\[int, int\\]"
    with pytest.raises(EClibValueError, match=err_msg):
        Curve(13, 0, 2, (1, 9, 1), 19)  # type: ignore

    with pytest.raises(EClibValueError, match="INF point cannot be a generator"):
        Curve(13, 0, 2, INF, 19)

    err_msg = "Generator coordinates not in 0..p-1"
    with pytest.raises(EClibValueError, match=err_msg):
        Curve(13, 0, 2, (1, 9 + 13), 19)

    with pytest.raises(EClibValueError, match="Generator is not on the curve"):
        Curve(13, 0, 2, (2, 9), 19)

    with pytest.raises(EClibValueError, match="n is not prime: "):
        Curve(13, 0, 2, (1, 9), 20)

    with pytest.raises(EClibValueError, match="n is not the group order: "):
        Curve(13, 0, 2, (1, 9), 17)


def test_curves() -> None:
    for ec in all_curves.values():
        assert ec.contains(ec.G)
        assert ec.order == ec.n
        assert mult_aff(ec.n, ec.G, ec) == INF
        assert mult_aff(ec.n - 1, ec.G, ec) == ec.negate(ec.G)

    assert secp256k1 is CURVES["secp256k1"]
    assert secp256k1.a == 0
    assert secp256k1.b == 7
    assert secp256k1.p == 2 ** 256 - 2 ** 32 - 977


def test_known_multiples() -> None:
    ec = CURVES["secp256k1"]
    x = 0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5
    y = 0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A
    assert mult(2, ec.G, ec) == Point(x, y)

    ec = CURVES["secp256r1"]
    x = 0x7CF27B188D034F7E8A52380304B51AC3C08969E277F21B35A60B48FC47669978
    y = 0x07775510DB8ED040293D9AC69F7430DBBA7DADE63CE982299E04B79D227873D1
    assert mult(2, ec.G, ec) == Point(x, y)


def test_mult() -> None:
    for ec in all_curves.values():
        assert mult(0, ec.G, ec) == INF
        assert mult(1, ec.G, ec) == ec.G
        assert mult(ec.n, ec.G, ec) == INF
        # the coefficient is reduced mod n
        assert mult(ec.n + 1, ec.G, ec) == ec.G
        assert mult(-1, ec.G, ec) == ec.negate(ec.G)
        assert mult(2, ec.G, ec) == ec.double(ec.G)
        assert mult(3, ec.G, ec) == ec.add(ec.double(ec.G), ec.G)
        assert mult("0x03", ec.G, ec) == mult(3, ec.G, ec)
        assert mult(5, INF, ec) == INF

    # default point and curve
    assert mult(1) == secp256k1.G

    with pytest.raises(EClibValueError, match="point not on curve"):
        mult(2, Point(1, 2), ec23_31)


def test_generate_key_pair() -> None:
    for ec in all_curves.values():
        key_pair = ec.generate_key_pair()
        assert 0 < key_pair.private_key < ec.n
        assert key_pair.public_key == mult(key_pair.private_key, ec.G, ec)
        assert ec.contains(key_pair.public_key)
        # the private key is not shown
        assert repr(key_pair) == f"KeyPair(public_key={key_pair.public_key!r})"

    key_pair = KeyPair(1, ec23_31.G)
    key_pair_dict = key_pair.to_dict()
    assert key_pair_dict == {
        "private_key": "0x1",
        "public_key": {"x": "0x0", "y": "0x1", "is_infinity": False},
    }
    assert KeyPair.from_dict(key_pair_dict) == key_pair


def test_repr() -> None:
    ec = low_card_curves["ec13_11"]
    assert str(ec) == (
        "Curve\n p   = 13\n a   = 7\n b   = 6\n x_G = 1\n y_G = 1\n n   = 11"
    )
    assert repr(ec) == "Curve(13, 7, 6, (1, 1), 11)"

    ec = secp256k1
    assert str(ec).startswith("Curve\n p   = FFFFFFFF FFFFFFFF")
    assert "\n x_G = 79BE667E F9DCBBAC" in str(ec)
    assert "\n n   = FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE BAAEDCE6" in str(ec)
    assert repr(ec).startswith("Curve('FFFFFFFF FFFFFFFF")
    n_hex = "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE BAAEDCE6 AF48A03B BFD25E8C D0364141"
    assert repr(ec).endswith(f", '{n_hex}')")
