# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

from typing import Final, Optional

import pytest

from pcse.helper import (SingletonMeta, instance_slot, is_final_annotation,
                         mangle)


@pytest.mark.parametrize("cls_name, name, expected", [
    ("Foo", "__x", "_Foo__x"),
    ("_Foo", "__x", "_Foo__x"),
    ("__Foo", "__x", "_Foo__x"),
    ("Foo", "__x__", "__x__"),
    ("Foo", "_x", "_x"),
    ("Foo", "x", "x"),
    ("___", "__x", "__x")])
def test_mangle(cls_name, name, expected):
    """helper.mangle"""
    assert mangle(cls_name, name) == expected


def test_is_final_annotation():
    """helper.is_final_annotation"""
    assert is_final_annotation(Final)
    assert is_final_annotation(Final[int])
    assert is_final_annotation(Final["Foo"])
    assert not is_final_annotation(int)
    assert not is_final_annotation(Optional[int])
    assert not is_final_annotation(None)


class TestSingletonMeta:
    def test_call(self):
        """helper.SingletonMeta: calling the type"""
        class S(metaclass=SingletonMeta):
            def __init__(self):
                self.x = 1

        with pytest.raises(TypeError,
                           match=r"must be accessed by get_instance\(\)"):
            S()

    def test_construct(self):
        """helper.SingletonMeta: private construction"""
        class S(metaclass=SingletonMeta):
            def __init__(self, x=1):
                self.x = x

        s = S._construct(10)
        assert isinstance(s, S)
        assert s.x == 10
        assert S._construct() is not s

    def test_eager(self):
        """helper.SingletonMeta: eager construction"""
        created = []

        class S(metaclass=SingletonMeta, eager=True):
            __instance: Final["S"]

            def __init__(self):
                created.append(self)

            @classmethod
            def get_instance(cls):
                return cls.__instance

        assert len(created) == 1
        assert vars(S)[instance_slot(S)] is created[0]
        assert S.get_instance() is created[0]
        assert len(created) == 1

    def test_not_eager(self):
        """helper.SingletonMeta: no eager construction by default"""
        created = []

        class S(metaclass=SingletonMeta):
            __instance: Optional["S"] = None

            def __init__(self):
                created.append(self)

        assert not created
        assert vars(S)[instance_slot(S)] is None

    def test_final(self):
        """helper.SingletonMeta: final slots cannot be rebound"""
        class S(metaclass=SingletonMeta, eager=True):
            __instance: Final["S"]

        slot = instance_slot(S)
        s = vars(S)[slot]
        with pytest.raises(AttributeError, match="cannot rebind final"):
            setattr(S, slot, None)
        with pytest.raises(AttributeError, match="cannot rebind final"):
            delattr(S, slot)
        assert vars(S)[slot] is s

    def test_not_final(self):
        """helper.SingletonMeta: other attributes can be rebound"""
        class S(metaclass=SingletonMeta):
            __instance: Optional["S"] = None
            x = 1

        slot = instance_slot(S)
        s = S._construct()
        setattr(S, slot, s)
        assert vars(S)[slot] is s
        S.x = 2
        assert S.x == 2
        del S.x
        assert not hasattr(S, "x")
