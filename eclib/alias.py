#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Union

# bytes or text string (not hex-string)
#
# this is for string that can be
# converted to bytes using encode()
# e.g. a message to be signed or hashed
#    if isinstance(msg, str):
#        msg = msg.encode()
#
# use eclib.utils.bytes_from_string to convert String to bytes
String = Union[bytes, str]

# hex-string or bytes representation of an int
# e.g. curve parameters as stored in the curve registry data file
Integer = Union[bytes, str, int]
