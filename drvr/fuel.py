"""A small simulation of an engine drawing fuel from a tank through a pump."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from typing import TextIO

TANK_CAPACITY = 50
IDLE_PRESSURE = 0.3
CONSUMPTION_RATE = 0.1
OUT_OF_FUEL_MESSAGE = "Engine has run out of fuel!"


@dataclass
class Engine:
    """The engine: its speed and whether it is running."""

    speed: int = 0
    active: bool = False

    def start(self) -> bool:
        """Turn the engine on."""
        self.active = True
        return True

    def stop(self) -> bool:
        """Turn the engine off."""
        self.active = False
        return False


@dataclass
class FuelTank:
    """A fuel tank with a fixed capacity."""

    level: float = 0.0
    capacity: float = TANK_CAPACITY
    petrol: bool = True

    @property
    def level_percent(self) -> int:
        """Fuel level as a whole percentage of capacity, truncated."""
        return int(self.level / self.capacity * 100)

    def add_fuel(self, amount: float, petrol: bool) -> None:
        """Top up the tank and record the fuel type."""
        self.level += amount
        self.petrol = petrol


@dataclass
class FuelPump:
    """The fuel pump: its pressure and the fuel type it carries."""

    pressure: float = 0.0
    petrol: bool = True


@dataclass
class FuelSystem:
    """Engine, tank and pump working together."""

    engine: Engine = field(default_factory=Engine)
    tank: FuelTank = field(default_factory=FuelTank)
    pump: FuelPump = field(default_factory=FuelPump)
    out: TextIO = field(default_factory=lambda: sys.stdout)

    def engine_step(self) -> None:
        """Set the pump pressure from the engine state, stopping it when the tank is dry."""
        if not self.engine.active:
            self.pump.pressure = 0.0
            return
        if self.tank.level == 0:
            self.engine.stop()
            self.out.write(f"\n{OUT_OF_FUEL_MESSAGE}\n")
            return
        if self.engine.speed == 0:
            self.pump.pressure = IDLE_PRESSURE
        else:
            self.pump.pressure = IDLE_PRESSURE + self.engine.speed // 100

    def pump_step(self) -> None:
        """Draw fuel from the tank in proportion to the pump pressure."""
        self.pump.petrol = self.tank.petrol
        new_level = self.tank.level - self.pump.pressure * CONSUMPTION_RATE
        self.tank.level = max(new_level, 0.0)

    def run(self, steps: int, interval: float = 0.5) -> None:
        """Run ``steps`` cycles of engine and pump, pausing ``interval`` seconds each."""
        for _ in range(steps):
            self.engine_step()
            self.pump_step()
            if interval > 0:
                time.sleep(interval)