"""
Rider - Riders and their starting state.

Provides:
- Rider value type
- Coordinate policies (fixed, random range, explicit list, evenly spaced)
- create_riders() to build many riders from policies
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence
import numpy as np

from linetrack.errors import InvalidParameterError, ParameterMismatchError
from linetrack.geometry.point import Point, ORIGIN


DEFAULT_RANDOM_LIMIT = 10.0


@dataclass(frozen=True)
class Rider:
    """A rider (character on a sled) with a starting position and velocity."""
    start_position: Point = ORIGIN
    start_velocity: Point = ORIGIN
    remountable: bool = False
    rider_id: Optional[int] = None
    
    def with_id(self, rider_id: Optional[int]) -> "Rider":
        return replace(self, rider_id=rider_id)
    
    def get_state(self) -> dict:
        """Wire representation of the rider."""
        return {
            "startPosition": self.start_position.to_dict(),
            "startVelocity": self.start_velocity.to_dict(),
            "remountable": int(self.remountable),
        }


class CoordPolicy:
    """How a coordinate is chosen for each of `count` riders."""
    
    def validate(self, count: int) -> None:
        """Check the policy can supply `count` values."""
    
    def resolve(self, index: int, count: int, rng: np.random.Generator) -> Point:
        """Get the value for rider `index` of `count`."""
        raise NotImplementedError


@dataclass(frozen=True)
class Fixed(CoordPolicy):
    """Same value for every rider."""
    value: Point = ORIGIN
    
    def resolve(self, index: int, count: int, rng: np.random.Generator) -> Point:
        return self.value


@dataclass(frozen=True)
class Range(CoordPolicy):
    """Uniform random value within [minimum, maximum] per axis."""
    minimum: Point
    maximum: Point
    
    def __post_init__(self):
        _check_min_max(self.minimum, self.maximum)
    
    @classmethod
    def default(cls) -> "Range":
        """Random in [-10, 10] on both axes."""
        return cls(
            Point(-DEFAULT_RANDOM_LIMIT, -DEFAULT_RANDOM_LIMIT),
            Point(DEFAULT_RANDOM_LIMIT, DEFAULT_RANDOM_LIMIT),
        )
    
    def resolve(self, index: int, count: int, rng: np.random.Generator) -> Point:
        return Point(
            rng.uniform(self.minimum.x, self.maximum.x),
            rng.uniform(self.minimum.y, self.maximum.y),
        )


@dataclass(frozen=True)
class Explicit(CoordPolicy):
    """One given value per rider."""
    values: Sequence[Point] = field(default_factory=tuple)
    
    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))
    
    def validate(self, count: int) -> None:
        if len(self.values) < count:
            raise ParameterMismatchError(
                f"Requested {count} riders but only {len(self.values)} values were given"
            )
    
    def resolve(self, index: int, count: int, rng: np.random.Generator) -> Point:
        return self.values[index]


@dataclass(frozen=True)
class EvenlySpaced(CoordPolicy):
    """Values spread evenly from minimum to maximum (inclusive)."""
    minimum: Point
    maximum: Point
    
    def __post_init__(self):
        _check_min_max(self.minimum, self.maximum)
    
    def resolve(self, index: int, count: int, rng: np.random.Generator) -> Point:
        if count < 2:
            return self.minimum
        t = index / (count - 1)
        return self.minimum + (self.maximum - self.minimum) * t


def create_riders(
    count: int,
    start_position: CoordPolicy | None = None,
    start_velocity: CoordPolicy | None = None,
    remountable: bool = False,
    rng: np.random.Generator | None = None,
) -> List[Rider]:
    """Create `count` riders.
    
    Args:
        count: Number of riders (>= 0)
        start_position: Position policy, origin if None
        start_velocity: Velocity policy, at rest if None
        remountable: Whether riders may remount after a fall
        rng: Random generator for Range policies. A fresh one if None.
    
    Returns:
        List of riders without ids
    """
    if count < 0:
        raise InvalidParameterError(f"Rider count must be >= 0, got {count}")
    
    start_position = start_position or Fixed()
    start_velocity = start_velocity or Fixed()
    start_position.validate(count)
    start_velocity.validate(count)
    
    rng = rng if rng is not None else np.random.default_rng()
    
    riders = []
    for i in range(count):
        riders.append(Rider(
            start_position=start_position.resolve(i, count, rng),
            start_velocity=start_velocity.resolve(i, count, rng),
            remountable=remountable,
        ))
    
    return riders


def _check_min_max(minimum: Point, maximum: Point) -> None:
    if maximum.x < minimum.x or maximum.y < minimum.y:
        raise InvalidParameterError(f"Max ({maximum}) is less than min ({minimum})")
