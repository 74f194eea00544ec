import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from artillery_game.core.entities import EntityPool, Particle, Projectile


def test_acquire_returns_first_free_slot():
    pool = EntityPool(Projectile, 3, "projectiles")
    assert pool.acquire() == 0
    assert pool.acquire() == 1
    pool.release(0)
    assert pool.acquire() == 0
    assert pool.active_count == 2


def test_full_pool_drops_spawn_without_raising():
    pool = EntityPool(Projectile, 2, "projectiles")
    assert pool.acquire() is not None
    assert pool.acquire() is not None
    assert pool.exhausted

    assert pool.acquire() is None
    assert pool.dropped == 1
    assert pool.active_count == 2


def test_clear_releases_everything():
    pool = EntityPool(Particle, 5, "particles")
    for _ in range(5):
        pool.acquire()
    pool.clear()
    assert not pool.any_active
    assert pool.active_handles() == []


def test_iteration_skips_inactive_slots():
    pool = EntityPool(Particle, 4, "particles")
    for _ in range(4):
        pool.acquire()
    pool.release(1)
    pool.release(3)
    assert [handle for handle, _ in pool.iter_active()] == [0, 2]


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        EntityPool(Particle, 0, "particles")


@pytest.mark.property
@settings(max_examples=50, deadline=None)
@given(capacity=st.integers(min_value=1, max_value=32), cycles=st.integers(min_value=0, max_value=200))
def test_acquire_release_cycles_never_leak(capacity: int, cycles: int) -> None:
    pool = EntityPool(Projectile, capacity, "projectiles")
    for _ in range(cycles):
        handle = pool.acquire()
        assert handle is not None
        pool.release(handle)
    assert pool.active_count == 0


@pytest.mark.property
@settings(max_examples=50, deadline=None)
@given(capacity=st.integers(min_value=1, max_value=32), requests=st.integers(min_value=0, max_value=64))
def test_never_more_active_than_capacity(capacity: int, requests: int) -> None:
    pool = EntityPool(Projectile, capacity, "projectiles")
    handles = [pool.acquire() for _ in range(requests)]
    granted = [handle for handle in handles if handle is not None]
    assert len(granted) == min(capacity, requests)
    assert len(set(granted)) == len(granted)
    assert pool.active_count <= capacity
    assert pool.dropped == max(0, requests - capacity)
