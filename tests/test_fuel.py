import io

import pytest

from drvr.fuel import (
    IDLE_PRESSURE,
    OUT_OF_FUEL_MESSAGE,
    TANK_CAPACITY,
    Engine,
    FuelPump,
    FuelSystem,
    FuelTank,
)


def _system(level=10.0, speed=0, started=True):
    system = FuelSystem(
        engine=Engine(speed=speed),
        tank=FuelTank(level=level),
        pump=FuelPump(),
        out=io.StringIO(),
    )
    if started:
        system.engine.start()
    return system


def test_engine_start_and_stop():
    engine = Engine()
    assert engine.start() is True
    assert engine.active is True
    assert engine.stop() is False
    assert engine.active is False


def test_tank_defaults_to_capacity():
    assert FuelTank().capacity == TANK_CAPACITY


def test_level_percent_full_and_half():
    assert FuelTank(level=TANK_CAPACITY).level_percent == 100
    assert FuelTank(level=TANK_CAPACITY / 2).level_percent == 50


def test_add_fuel_accumulates_and_sets_type():
    tank = FuelTank(level=5.0)
    tank.add_fuel(5.0, petrol=False)
    tank.add_fuel(5.0, petrol=False)
    assert tank.level == pytest.approx(15.0)
    assert tank.petrol is False


def test_idle_engine_sets_idle_pressure():
    system = _system()
    system.engine_step()
    assert system.pump.pressure == pytest.approx(IDLE_PRESSURE)


def test_low_speed_stays_at_idle_pressure():
    system = _system(speed=99)
    system.engine_step()
    assert system.pump.pressure == pytest.approx(IDLE_PRESSURE)


def test_pressure_grows_with_speed():
    slow, fast = _system(speed=200), _system(speed=300)
    slow.engine_step()
    fast.engine_step()
    assert IDLE_PRESSURE < slow.pump.pressure < fast.pump.pressure


def test_engine_off_zeroes_pressure():
    system = _system(started=False)
    system.pump.pressure = 5.0
    system.engine_step()
    assert system.pump.pressure == 0.0


def test_empty_tank_stops_engine():
    system = _system(level=0.0)
    system.engine_step()
    assert system.engine.active is False
    assert OUT_OF_FUEL_MESSAGE in system.out.getvalue()


def test_pump_step_reduces_fuel_and_copies_type():
    system = _system(level=10.0)
    system.tank.petrol = False
    system.engine_step()
    system.pump_step()
    assert 0 < system.tank.level < 10.0
    assert system.pump.petrol is False


def test_pump_never_leaves_negative_fuel():
    system = _system(level=0.01, speed=1000)
    system.engine_step()
    system.pump_step()
    assert system.tank.level == 0.0


def test_run_until_tank_is_empty():
    system = _system(level=1.0, speed=500)
    system.run(100, interval=0)
    assert system.tank.level == 0.0
    assert system.engine.active is False
    assert system.pump.pressure == 0.0
    assert system.out.getvalue().count(OUT_OF_FUEL_MESSAGE) == 1


def test_run_zero_steps_changes_nothing():
    system = _system(level=3.0)
    system.run(0, interval=0)
    assert system.tank.level == 3.0
    assert system.pump.pressure == 0.0