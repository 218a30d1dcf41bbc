# tests/test_buffers.py
import numpy as np
from numpy.testing import assert_array_equal

from wavesim_core import FieldRing


def test_initial_state():
    initial = np.array([0.0, 0.1, 0.2, 0.0])
    ring = FieldRing(initial)

    assert len(ring) == 4
    assert_array_equal(ring.previous, initial)
    assert_array_equal(ring.current, initial)
    assert_array_equal(ring.next, np.zeros(4))


def test_ring_copies_the_initial_profile():
    initial = np.array([0.0, 0.5, 0.0])
    ring = FieldRing(initial)
    initial[1] = 7.0
    assert ring.current[1] == 0.5


def test_rotate_shifts_roles():
    ring = FieldRing(np.zeros(3))
    old_previous, old_current, old_next = ring.previous, ring.current, ring.next

    ring.rotate()

    assert np.shares_memory(ring.previous, old_current)
    assert np.shares_memory(ring.current, old_next)
    assert np.shares_memory(ring.next, old_previous)


def test_rotate_does_not_copy():
    ring = FieldRing(np.zeros(3))
    ring.next[:] = [0.0, 1.0, 0.0]
    ring.rotate()
    assert_array_equal(ring.current, [0.0, 1.0, 0.0])


def test_three_rotations_restore_the_roles():
    ring = FieldRing(np.zeros(5))
    previous, current, nxt = ring.previous, ring.current, ring.next
    for _ in range(3):
        ring.rotate()
    assert np.shares_memory(ring.previous, previous)
    assert np.shares_memory(ring.current, current)
    assert np.shares_memory(ring.next, nxt)


def test_slots_are_distinct():
    ring = FieldRing(np.zeros(4))
    assert not np.shares_memory(ring.previous, ring.current)
    assert not np.shares_memory(ring.current, ring.next)
    assert not np.shares_memory(ring.next, ring.previous)
