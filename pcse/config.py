# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""Mechanism for getting and setting default function parameters
=============================================================

Functions in :py:mod:`pcse.verify` decorated with :py:func:`use_defaults`
read default values for their arguments from :py:attr:`rc`, which can be
changed by the user for a global effect.

Examples
--------
Verify a chair type that is expected to be called something else:

>>> config.rc["expected_name"] = "Hans Huber"
>>> verify.check_display_name(OtherChair)


Programming reference
---------------------

.. autofunction:: use_defaults
.. autodata:: rc
"""
import inspect
import functools


rc = dict(expected_name="Anton Riedl",
          constructor_names=("__new__", "__init__"))
"""Global config dictionary"""


def use_defaults(func):
    """Decorator to apply default values to functions

    If any function argument whose name is a key in :py:attr:`rc` is `None`,
    set its value to what is specified in :py:attr:`rc`.

    Parameters
    ----------
    func : function
        Function to be decorated

    Returns
    -------
    function
        Modified function

    Examples
    --------
    >>> @use_defaults
    ... def f(expected_name=None):
    ...     return expected_name
    >>> f()
    'Anton Riedl'
    >>> f("Hans Huber")
    'Hans Huber'
    >>> config.rc["expected_name"] = "Sepp Maier"
    >>> f()
    'Sepp Maier'
    """
    sig = inspect.signature(func)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        ba = sig.bind(*args, **kwargs)
        ba.apply_defaults()
        for name, value in ba.arguments.items():
            if value is None:
                ba.arguments[name] = rc.get(name, None)
        return func(*ba.args, **ba.kwargs)

    wrapper.__signature__ = sig
    return wrapper
