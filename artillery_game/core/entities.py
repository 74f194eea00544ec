"""Pooled simulation entities: projectiles, explosions and particles."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, List, Optional, Protocol, Tuple, TypeVar

from artillery_game.core.weapons import DEFAULT_WEAPON, WeaponKind

logger = logging.getLogger(__name__)


@dataclass
class Projectile:
    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    weapon: WeaponKind = DEFAULT_WEAPON
    active: bool = False
    travel_distance: float = 0.0
    sub_projectiles: int = 0


@dataclass
class Explosion:
    x: float = 0.0
    y: float = 0.0
    radius: float = 0.0
    max_radius: float = 0.0
    growth_rate: float = 0.0
    active: bool = False
    damage: int = 0
    terrain_deformation: float = 0.0


@dataclass
class Particle:
    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    lifetime: float = 0.0
    max_lifetime: float = 0.0
    size: float = 0.0
    active: bool = False

    @property
    def fade(self) -> float:
        """Remaining fraction of the particle's life, 1.0 when freshly spawned."""

        if self.max_lifetime <= 0:
            return 0.0
        return max(0.0, min(1.0, self.lifetime / self.max_lifetime))


class Poolable(Protocol):
    active: bool


T = TypeVar("T", bound=Poolable)


class EntityPool(Generic[T]):
    """Fixed number of reusable slots with an embedded active flag.

    A full pool refuses new entities instead of growing; callers treat a
    ``None`` handle from :meth:`acquire` as a dropped spawn.
    """

    def __init__(self, factory: Callable[[], T], capacity: int, name: str = "pool") -> None:
        if capacity < 1:
            raise ValueError(f"{name} capacity must be at least 1")
        self.name = name
        self.capacity = capacity
        self.slots: List[T] = [factory() for _ in range(capacity)]
        self.dropped = 0

    def acquire(self) -> Optional[int]:
        for handle, slot in enumerate(self.slots):
            if not slot.active:
                slot.active = True
                return handle
        self.dropped += 1
        logger.debug("%s exhausted (%d slots active), spawn dropped", self.name, self.capacity)
        return None

    def release(self, handle: int) -> None:
        self.slots[handle].active = False

    def clear(self) -> None:
        for slot in self.slots:
            slot.active = False

    def __getitem__(self, handle: int) -> T:
        return self.slots[handle]

    def __len__(self) -> int:
        return self.capacity

    def active_handles(self) -> List[int]:
        return [handle for handle, slot in enumerate(self.slots) if slot.active]

    def iter_active(self) -> Iterator[Tuple[int, T]]:
        for handle, slot in enumerate(self.slots):
            if slot.active:
                yield handle, slot

    @property
    def active_count(self) -> int:
        return sum(1 for slot in self.slots if slot.active)

    @property
    def any_active(self) -> bool:
        return any(slot.active for slot in self.slots)

    @property
    def exhausted(self) -> bool:
        return all(slot.active for slot in self.slots)


__all__ = ["EntityPool", "Explosion", "Particle", "Projectile"]
