# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

import pytest

from pcse import PCSEChairLazy
from pcse.helper import instance_slot


@pytest.fixture
def lazy_chair():
    """PCSEChairLazy as if it had never been accessed"""
    slot = instance_slot(PCSEChairLazy)
    setattr(PCSEChairLazy, slot, None)
    yield PCSEChairLazy
    setattr(PCSEChairLazy, slot, None)
