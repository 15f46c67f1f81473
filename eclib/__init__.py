#!/usr/bin/env python3

# Copyright (C) 2020-2022 The eclib developers
#
# This file is part of eclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the eclib package."

name = "eclib"
__version__ = "0.1.0"
__author__ = "The eclib developers"
__author_email__ = "devs@eclib.org"
__copyright__ = "Copyright (C) 2017-2022 The eclib developers"
__license__ = "MIT License"
