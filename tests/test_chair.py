# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

import threading

import pytest

from pcse import PCSEChairEager, PCSEChairLazy
from pcse.helper import instance_slot


class TestPCSEChairEager:
    def test_initialized_on_import(self):
        """chair_eager.PCSEChairEager: instance exists before access"""
        value = vars(PCSEChairEager)[instance_slot(PCSEChairEager)]
        assert isinstance(value, PCSEChairEager)
        assert PCSEChairEager.get_instance() is value

    def test_get_instance(self):
        """chair_eager.PCSEChairEager.get_instance"""
        one = PCSEChairEager.get_instance()
        two = PCSEChairEager.get_instance()
        assert one is not None
        assert two is one

    def test_str(self):
        """chair_eager.PCSEChairEager.__str__"""
        assert str(PCSEChairEager.get_instance()) == "Anton Riedl"

    def test_constructor(self):
        """chair_eager.PCSEChairEager: public construction fails"""
        with pytest.raises(TypeError):
            PCSEChairEager()

    def test_slot_final(self):
        """chair_eager.PCSEChairEager: slot cannot be rebound"""
        slot = instance_slot(PCSEChairEager)
        before = PCSEChairEager.get_instance()
        with pytest.raises(AttributeError):
            setattr(PCSEChairEager, slot, None)
        assert PCSEChairEager.get_instance() is before

    def test_no_instance_dict(self):
        """chair_eager.PCSEChairEager: no attributes can be added"""
        with pytest.raises(AttributeError):
            PCSEChairEager.get_instance().name = "Hans Huber"


class TestPCSEChairLazy:
    def test_initialized_on_access(self, lazy_chair):
        """chair_lazy.PCSEChairLazy: instance created on first access"""
        slot = instance_slot(lazy_chair)
        assert vars(lazy_chair)[slot] is None
        c = lazy_chair.get_instance()
        assert isinstance(c, lazy_chair)
        assert vars(lazy_chair)[slot] is c

    def test_get_instance(self, lazy_chair):
        """chair_lazy.PCSEChairLazy.get_instance"""
        one = lazy_chair.get_instance()
        two = lazy_chair.get_instance()
        assert one is not None
        assert two is one

    def test_construct_once(self, lazy_chair, monkeypatch):
        """chair_lazy.PCSEChairLazy.get_instance: construct only once"""
        construct = lazy_chair._construct
        calls = []

        def counting_construct():
            calls.append(None)
            return construct()

        monkeypatch.setattr(lazy_chair, "_construct", counting_construct)
        for _ in range(3):
            lazy_chair.get_instance()
        assert len(calls) == 1

    def test_concurrent_access(self, lazy_chair, monkeypatch):
        """chair_lazy.PCSEChairLazy.get_instance: concurrent first access"""
        construct = lazy_chair._construct
        calls = []

        def counting_construct():
            calls.append(None)
            return construct()

        monkeypatch.setattr(lazy_chair, "_construct", counting_construct)

        n_threads = 8
        barrier = threading.Barrier(n_threads)
        results = [None] * n_threads

        def worker(i):
            barrier.wait()
            results[i] = lazy_chair.get_instance()

        threads = [threading.Thread(target=worker, args=(i,))
                   for i in range(n_threads)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert results[0] is not None
        assert all(r is results[0] for r in results)

    def test_str(self, lazy_chair):
        """chair_lazy.PCSEChairLazy.__str__"""
        assert str(lazy_chair.get_instance()) == "Anton Riedl"

    def test_constructor(self, lazy_chair):
        """chair_lazy.PCSEChairLazy: public construction fails"""
        with pytest.raises(TypeError):
            lazy_chair()
        assert vars(lazy_chair)[instance_slot(lazy_chair)] is None
