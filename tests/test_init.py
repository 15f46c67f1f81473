#!/usr/bin/env python3

# Copyright (C) 2017-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `eclib` package metadata."

import eclib


def test_metadata() -> None:
    assert eclib.name == "eclib"
    assert eclib.__version__ == "0.1.0"
    assert eclib.__license__ == "MIT License"
