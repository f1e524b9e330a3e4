"""Tests for the hour-by-hour scenario runner."""

import logging
from unittest.mock import Mock

import pytest
from homesim.core.data.drivers import ConstantDriver
from homesim.core.devices.config import ClimateControlConfig, LightConfig
from homesim.core.devices.climate_control import ClimateControl
from homesim.core.devices.light import Light
from homesim.core.environment import EnvironmentInputs
from homesim.core.errors import InvalidArgumentError
from homesim.core.sources.config import SolarPanelConfig
from homesim.core.sources.solar import SolarPanel
from homesim.sim.engine import SimulationEngine
from homesim.sim.runner import (
    ScenarioRunner,
    ScheduledAction,
    results_to_frame,
    summarize,
)


@pytest.fixture
def engine():
    engine = SimulationEngine(price_per_kwh=0.30)
    engine.add_device(Light(LightConfig(name="Lamp", power_rating_watts=100.0, is_on=True)))
    engine.add_device(ClimateControl(ClimateControlConfig(name="HVAC", power_rating_watts=100.0, fan_speed=1)))
    engine.add_renewable_source(SolarPanel(SolarPanelConfig(name="Roof", surface_area_m2=1.0, efficiency=0.1)))
    return engine


@pytest.fixture
def driver():
    return ConstantDriver(EnvironmentInputs(sunlight_intensity_wm2=500.0, temperature_drift_c=0.5))


# ------------------------
# ScheduledAction
# ------------------------
def test_scheduled_action_unknown_action():
    # Act & Assert
    with pytest.raises(InvalidArgumentError, match="explode"):
        ScheduledAction(hour=1, device="Lamp", action="explode")


def test_scheduled_action_negative_hour():
    # Act & Assert
    with pytest.raises(InvalidArgumentError, match="hour"):
        ScheduledAction(hour=-1, device="Lamp", action="turn_on")


def test_scheduled_action_requires_value():
    # Act & Assert
    with pytest.raises(InvalidArgumentError, match="requires a value"):
        ScheduledAction(hour=1, device="Lamp", action="dim")


def test_scheduled_action_apply():
    # Arrange
    engine = Mock()

    # Act
    ScheduledAction(hour=1, device="Lamp", action="dim", value=40).apply(engine)
    ScheduledAction(hour=1, device="Lamp", action="turn_off").apply(engine)

    # Assert
    engine.dim.assert_called_once_with("Lamp", 40)
    engine.turn_off.assert_called_once_with("Lamp")


# ------------------------
# ScenarioRunner
# ------------------------
def test_runner_rejects_negative_step():
    # Act & Assert
    with pytest.raises(InvalidArgumentError):
        ScenarioRunner(SimulationEngine(price_per_kwh=0.1), ConstantDriver(EnvironmentInputs()), step_hours=-1.0)


def test_run_hour_applies_environment_then_actions(engine, driver):
    # Arrange
    runner = ScenarioRunner(
        engine,
        driver,
        schedule=[
            ScheduledAction(hour=0, device="Lamp", action="dim", value=50),
            ScheduledAction(hour=0, device="HVAC", action="turn_on"),
        ],
    )

    # Act
    result = runner.run_hour(0)

    # Assert
    assert result.hour == 0
    assert result.inputs.sunlight_intensity_wm2 == 500.0
    assert result.report.device("Lamp").energy_kwh == pytest.approx(0.05)
    assert result.report.device("HVAC").energy_kwh == pytest.approx(0.1)
    assert result.report.total_generated_kwh == pytest.approx(0.05)
    assert result.report.net_consumption_kwh == pytest.approx(0.1)
    assert engine.describe("HVAC").current_temperature_c == pytest.approx(25.5)


def test_run_schedule_fires_only_at_its_hour(engine, driver):
    # Arrange
    runner = ScenarioRunner(
        engine, driver, schedule=[ScheduledAction(hour=2, device="Lamp", action="turn_off")]
    )

    # Act
    results = runner.run(hours=4)

    # Assert
    assert [r.hour for r in results] == [0, 1, 2, 3]
    lamp = [r.report.device("Lamp").energy_kwh for r in results]
    assert lamp == pytest.approx([0.1, 0.1, 0.0, 0.0])


def test_run_with_start_hour(engine, driver):
    # Arrange
    runner = ScenarioRunner(engine, driver, step_hours=0.5)

    # Act
    results = runner.run(hours=2, start_hour=10)

    # Assert
    assert [r.hour for r in results] == [10, 11]
    assert results[0].report.duration_hours == 0.5


def test_run_hour_logs_summary(engine, driver, caplog):
    # Arrange
    runner = ScenarioRunner(engine, driver)

    # Act
    with caplog.at_level(logging.INFO, logger="homesim.sim.runner"):
        runner.run_hour(5)

    # Assert
    assert "Hour 5" in caplog.text


def test_runner_rejects_unknown_device_in_schedule(engine, driver):
    # Arrange
    schedule = [ScheduledAction(hour=3, device="Garage", action="turn_on")]

    # Act & Assert
    with pytest.raises(KeyError, match="Garage"):
        ScenarioRunner(engine, driver, schedule=schedule)
    assert engine.describe_source("Roof").sunlight_intensity_wm2 == 0.0


# ------------------------
# Aggregation
# ------------------------
def test_results_to_frame(engine, driver):
    # Arrange
    results = ScenarioRunner(engine, driver).run(hours=3)

    # Act
    df = results_to_frame(results)

    # Assert
    assert list(df.index) == [0, 1, 2]
    assert df.index.name == "hour"
    assert "Lamp_kwh" in df.columns
    assert "HVAC_kwh" in df.columns
    assert df["sunlight_intensity_wm2"].tolist() == [500.0, 500.0, 500.0]
    assert df["Lamp_kwh"].sum() == pytest.approx(0.3)


def test_results_to_frame_empty():
    # Act & Assert
    assert results_to_frame([]).empty


def test_summarize(engine, driver):
    # Arrange
    results = ScenarioRunner(engine, driver).run(hours=2)

    # Act
    totals = summarize(results)

    # Assert
    assert totals["total_consumption_kwh"] == pytest.approx(0.2)
    assert totals["total_generated_kwh"] == pytest.approx(0.1)
    assert totals["net_consumption_kwh"] == pytest.approx(0.1)
    assert totals["cost_usd"] == pytest.approx(0.03)
