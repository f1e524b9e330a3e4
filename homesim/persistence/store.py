import logging
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union

from homesim.core.devices.base import Device
from homesim.core.devices.status import DeviceStatus
from homesim.persistence.records import DeviceRecord, device_from_record, record_from_status
from homesim.sim.engine import SimulationEngine

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("smarthome.db")

EXTRA_COLUMNS = {
    "power_rating_watts": "REAL",
    "has_occupancy_sensor": "INTEGER",
    "current_temperature": "REAL",
    "internal_temperature": "REAL",
}
"""Columns this store adds to the shared ``devices`` table."""


class DeviceStore(ABC):
    """Abstract persistence collaborator for device state."""

    @abstractmethod
    def load(self) -> List[DeviceRecord]:
        """Return every stored device record."""
        pass

    @abstractmethod
    def save(self, status: DeviceStatus) -> None:
        """Insert or update the record with the same name as ``status``."""
        pass

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class SQLiteDeviceStore(DeviceStore):
    """
    Device store backed by a single SQLite ``devices`` table.

    The table keeps the column names of the earlier smart-home database
    (``brightness``, ``targetTemperature``, ``fanSpeed``) so those files open
    directly; the extra columns are added to an existing table on connect.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_DB_PATH):
        self.path = str(path)
        self._conn = sqlite3.connect(self.path)
        self._conn.row_factory = sqlite3.Row
        self._create_tables()
        logger.info("Connected to SQLite database %s.", self.path)

    def _create_tables(self) -> None:
        with self._conn:
            self._conn.execute("""
            CREATE TABLE IF NOT EXISTS devices (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                type TEXT NOT NULL,
                status INTEGER NOT NULL,
                brightness INTEGER,
                targetTemperature REAL,
                fanSpeed INTEGER
            );
            """)
            existing = {row["name"] for row in self._conn.execute("PRAGMA table_info(devices)")}
            for column, sql_type in EXTRA_COLUMNS.items():
                if column not in existing:
                    self._conn.execute(f"ALTER TABLE devices ADD COLUMN {column} {sql_type}")
                    logger.info("Added column %s to devices table.", column)

    def load(self) -> List[DeviceRecord]:
        rows = self._conn.execute("SELECT * FROM devices ORDER BY id").fetchall()
        return [
            DeviceRecord(
                name=row["name"],
                type=row["type"],
                is_on=row["status"] == 1,
                power_rating_watts=row["power_rating_watts"],
                brightness_percent=row["brightness"],
                has_occupancy_sensor=None if row["has_occupancy_sensor"] is None else bool(row["has_occupancy_sensor"]),
                target_temperature_c=row["targetTemperature"],
                current_temperature_c=row["current_temperature"],
                fan_speed=row["fanSpeed"],
                internal_temperature_c=row["internal_temperature"],
            )
            for row in rows
        ]

    def save(self, status: DeviceStatus) -> None:
        record = record_from_status(status)
        values = (
            record.type,
            1 if record.is_on else 0,
            record.power_rating_watts,
            record.brightness_percent,
            None if record.has_occupancy_sensor is None else int(record.has_occupancy_sensor),
            record.target_temperature_c,
            record.current_temperature_c,
            record.fan_speed,
            record.internal_temperature_c,
        )
        with self._conn:
            row = self._conn.execute(
                "SELECT id FROM devices WHERE name = ?", (record.name,)
            ).fetchone()
            if row is not None:
                self._conn.execute("""
                UPDATE devices
                SET type = ?, status = ?, power_rating_watts = ?, brightness = ?,
                    has_occupancy_sensor = ?, targetTemperature = ?,
                    current_temperature = ?, fanSpeed = ?, internal_temperature = ?
                WHERE id = ?;
                """, values + (row["id"],))
                logger.info("Updated device: %s", record.name)
            else:
                self._conn.execute("""
                INSERT INTO devices (
                    name, type, status, power_rating_watts, brightness,
                    has_occupancy_sensor, targetTemperature, current_temperature,
                    fanSpeed, internal_temperature
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?);
                """, (record.name,) + values)
                logger.info("Inserted device: %s", record.name)

    def close(self) -> None:
        self._conn.close()
        logger.info("SQLite connection closed.")


def load_devices(store: DeviceStore) -> List[Device]:
    """Rebuild every stored device. Unknown type tags raise UnknownDeviceTypeError."""
    return [device_from_record(record) for record in store.load()]


def load_into_engine(engine: SimulationEngine, store: DeviceStore) -> List[str]:
    """Add every stored device to ``engine`` and return their handles."""
    return [engine.add_device(device) for device in load_devices(store)]


def save_engine(engine: SimulationEngine, store: DeviceStore) -> None:
    """Upsert the current snapshot of every device owned by ``engine``."""
    for status in engine.describe_all():
        store.save(status)
