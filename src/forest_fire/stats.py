"""Running counters updated while the simulation advances."""

from dataclasses import asdict, dataclass


@dataclass
class FireStats:
    """Totals since the last reset.

    Attributes:
        lightnings: Lightning strikes triggered, manual or automatic
        spawned: Trees successfully placed on empty ground
        burnt: Trees that caught fire, by lightning or by spread
    """

    lightnings: int = 0
    spawned: int = 0
    burnt: int = 0

    def reset(self) -> None:
        self.lightnings = 0
        self.spawned = 0
        self.burnt = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)

    def snapshot(self) -> tuple[int, int, int]:
        return self.lightnings, self.spawned, self.burnt

    def __str__(self) -> str:
        return f"lightnings: {self.lightnings}, spawned: {self.spawned}, burnt: {self.burnt}"
