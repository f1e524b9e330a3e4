"""Tests for the simulation report value."""
import dataclasses

import pytest
from homesim.core.devices.status import RefrigeratorStatus
from homesim.core.report import DeviceEnergy, SimulationReport


@pytest.fixture
def report():
    status = RefrigeratorStatus(
        name="Fridge", type="Refrigerator", is_on=True, power_rating_watts=150.0, internal_temperature_c=4.0
    )
    return SimulationReport(
        duration_hours=1.0,
        price_per_kwh=0.12,
        total_consumption_kwh=0.15,
        total_generated_kwh=2.0,
        net_consumption_kwh=0.0,
        cost_usd=0.0,
        devices=(DeviceEnergy(name="Fridge", energy_kwh=0.15, is_on=True, status=status),),
    )


def test_report_is_immutable(report):
    # Act & Assert
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.cost_usd = 1.0


def test_report_surplus(report):
    # Assert
    assert report.surplus_kwh == pytest.approx(1.85)


def test_report_device_lookup(report):
    # Act & Assert
    assert report.device("Fridge").energy_kwh == 0.15
    with pytest.raises(KeyError, match="Lamp"):
        report.device("Lamp")


def test_report_as_dict(report):
    # Act
    data = report.as_dict()

    # Assert
    assert data["total_generated_kwh"] == 2.0
    assert data["surplus_kwh"] == pytest.approx(1.85)
    assert data["devices"][0]["name"] == "Fridge"
    assert data["devices"][0]["status"]["type"] == "Refrigerator"
    assert data["devices"][0]["status"]["internal_temperature_c"] == 4.0
    assert data["sources"] == []


def test_report_summary(report):
    # Act
    summary = report.summary()

    # Assert
    assert "Total Energy Consumption: 0.150 kWh" in summary
    assert "Total Cost: $0.00" in summary
