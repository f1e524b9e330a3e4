from homesim.persistence.records import DeviceRecord, device_from_record, record_from_status
from homesim.persistence.store import (
    DeviceStore,
    SQLiteDeviceStore,
    load_devices,
    load_into_engine,
    save_engine,
)

__all__ = [
    "DeviceRecord",
    "DeviceStore",
    "SQLiteDeviceStore",
    "device_from_record",
    "record_from_status",
    "load_devices",
    "load_into_engine",
    "save_engine",
]
