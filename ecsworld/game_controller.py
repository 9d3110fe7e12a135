"""Battery bookkeeping: battery count drives the player's speed and the battery icons."""

from __future__ import annotations

from typing import Any, Optional

__all__ = ["GameController", "BATTERY_DRAIN_COUNTER", "MAX_BATTERIES"]

MAX_BATTERIES = 5
# The drain counter value at which one battery is used up.
BATTERY_DRAIN_COUNTER = -180

_SPEED_FOR_BATTERIES = {5: 3.0, 4: 2.5, 3: 2.0, 2: 1.7, 1: 1.5}


def _icon(level: int) -> str:
    return f"plane{level}"


class GameController:
    """Tracks batteries and the speed they allow.

    Each battery is shown by an entity named ``plane<N>``. Losing the last
    battery switches the application to the ``"gameover"`` state.
    """

    def __init__(self) -> None:
        self.app: Any = None
        self.world: Any = None
        self.number_of_batteries = MAX_BATTERIES
        self.counter_to_remove = 0
        self.last_speed = _SPEED_FOR_BATTERIES[MAX_BATTERIES]

    def enter(self, app: Any, world: Any) -> None:
        """Attach to an application and a world and reset the speed."""
        self.app = app
        self.world = world
        self.last_speed = _SPEED_FOR_BATTERIES[MAX_BATTERIES]

    def _require_world(self) -> Any:
        if self.world is None:
            raise RuntimeError("game controller has not been entered")
        return self.world

    def increase_batteries(self) -> float:
        """Gain one battery, restoring its icon; return the new speed.

        With all batteries already present nothing changes.
        """
        world = self._require_world()
        level = self.number_of_batteries
        if 1 <= level < MAX_BATTERIES:
            level += 1
            self.number_of_batteries = level
            world.unmark_removal(_icon(level))
            self.last_speed = _SPEED_FOR_BATTERIES[level]
        return self.last_speed

    def decrease_batteries(self, remove: bool) -> float:
        """Lose one battery if the drain counter ran out or ``remove`` is set.

        Returns the resulting speed; losing the last battery ends the game
        and returns 0.0. Otherwise the current speed is returned unchanged.
        """
        world = self._require_world()
        if self.counter_to_remove != BATTERY_DRAIN_COUNTER and not remove:
            return self.last_speed
        self.counter_to_remove = 0
        level = self.number_of_batteries
        if level >= 2:
            world.mark_for_removal_by_name(_icon(level))
            self.number_of_batteries = level - 1
            self.last_speed = _SPEED_FOR_BATTERIES[level - 1]
            return self.last_speed
        self.number_of_batteries = 0
        world.mark_for_removal_by_name(_icon(1))
        app: Optional[Any] = self.app
        if app is None:
            raise RuntimeError("game controller has no application")
        app.change_state("gameover")
        return 0.0