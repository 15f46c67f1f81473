#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve point in affine coordinates.

The point at infinity is tagged by the is_infinity flag,
not by sentinel coordinates: any (x, y) pair might be
a valid affine point for some curve.
Its coordinates carry no meaning and are normalized to 0, 0,
so that any infinity point is equal to INF.

The dict/json representation renders coordinates as hex-strings::

    >>> Point(5323, 5438).to_dict()
    {'x': '0x14cb', 'y': '0x153e', 'is_infinity': False}
"""

from dataclasses import dataclass, field
from typing import Any

from dataclasses_json import DataClassJsonMixin, config

from eclib.utils import int_from_integer, int_repr


def hex_field(**kwargs: Any) -> Any:
    "Dataclass field of an int, rendered as hex-string in dict/json."
    return field(metadata=config(encoder=hex, decoder=int_from_integer), **kwargs)


@dataclass(frozen=True)
class Point(DataClassJsonMixin):
    x: int = hex_field(default=0)
    y: int = hex_field(default=0)
    is_infinity: bool = False

    def __post_init__(self) -> None:
        if self.is_infinity:
            # frozen dataclass: bypass __setattr__
            object.__setattr__(self, "x", 0)
            object.__setattr__(self, "y", 0)

    def __repr__(self) -> str:
        if self.is_infinity:
            return "INF"
        return f"Point({int_repr(self.x)}, {int_repr(self.y)})"


INF = Point(is_infinity=True)
