# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""Chair singletons and their verification
=======================================

The :py:mod:`pcse` package provides two singleton types with the display name
"Anton Riedl":

- :py:class:`PCSEChairEager`, whose instance is created when
  :py:mod:`pcse.chair_eager` is imported, and
- :py:class:`PCSEChairLazy`, whose instance is created on the first call to
  :py:meth:`PCSEChairLazy.get_instance`.

The :py:mod:`pcse.verify` module checks singleton types by introspection.


Examples
--------

>>> chair = pcse.PCSEChairEager.get_instance()
>>> str(chair)
'Anton Riedl'
>>> chair is pcse.PCSEChairEager.get_instance()
True
>>> pcse.PCSEChairEager()  # Constructing an instance is not allowed
Traceback (most recent call last):
  ...
TypeError: Singletons must be accessed by get_instance()
>>> pcse.verify.assert_conforms(pcse.PCSEChairEager, "eager")
"""
from . import config, exceptions, verify
from .chair_eager import PCSEChairEager
from .chair_lazy import PCSEChairLazy
