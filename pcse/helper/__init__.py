# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""Helper classes and functions
============================

The :py:mod:`pcse.helper` package provides the machinery shared by the chair
singletons:

- the :py:class:`SingletonMeta` metaclass, which forbids calling a singleton
  type, optionally creates the instance eagerly and protects slots annotated
  as :py:data:`typing.Final` against rebinding.
- :py:func:`mangle` and :py:func:`instance_slot` to compute private
  attribute names the way the interpreter does.


Programming reference
---------------------

.. autoclass:: SingletonMeta
    :members:
.. autofunction:: mangle
.. autofunction:: instance_slot
.. autofunction:: is_final_annotation
"""
from .singleton import (SingletonMeta, instance_slot, is_final_annotation,
                        mangle)
