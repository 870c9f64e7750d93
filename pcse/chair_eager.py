# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

"""Eagerly initialized chair singleton"""
from typing import Final

from .helper.singleton import SingletonMeta


class PCSEChairEager(metaclass=SingletonMeta, eager=True):
    """Chair singleton created when this module is imported

    The unique instance is stored in a final private slot. It exists before
    :py:meth:`get_instance` is called for the first time.

    Examples
    --------
    >>> chair = PCSEChairEager.get_instance()
    >>> str(chair)
    'Anton Riedl'
    >>> chair is PCSEChairEager.get_instance()
    True
    """
    __slots__ = ("__name",)

    __instance: Final["PCSEChairEager"]

    def __init__(self):
        self.__name = "Anton Riedl"

    @classmethod
    def get_instance(cls) -> "PCSEChairEager":
        """Get the unique instance

        Returns
        -------
        PCSEChairEager
            Always the same object
        """
        return cls.__instance

    def __str__(self) -> str:
        return self.__name
