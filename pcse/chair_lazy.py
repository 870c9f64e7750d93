# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""Lazily initialized chair singleton"""
from threading import RLock
from typing import Optional

from .helper.singleton import SingletonMeta


_mutex = RLock()


class PCSEChairLazy(metaclass=SingletonMeta):
    """Chair singleton created on first access

    The private slot holds `None` until :py:meth:`get_instance` is called for
    the first time. Creation is guarded by a mutex, so concurrent first calls
    still construct only one instance.

    Examples
    --------
    >>> str(PCSEChairLazy.get_instance())
    'Anton Riedl'
    """
    __slots__ = ("__name",)

    __instance: Optional["PCSEChairLazy"] = None

    def __init__(self):
        self.__name = "Anton Riedl"

    @classmethod
    def get_instance(cls) -> "PCSEChairLazy":
        """Get the unique instance, creating it if necessary

        Returns
        -------
        PCSEChairLazy
            Always the same object
        """
        if cls.__instance is None:
            with _mutex:
                if cls.__instance is None:
                    cls.__instance = cls._construct()
        return cls.__instance

    def __str__(self) -> str:
        return self.__name
