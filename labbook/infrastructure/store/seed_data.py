from __future__ import annotations

from datetime import datetime
from typing import Any


SEED_ASSETS: list[dict[str, Any]] = [
    {
        "asset_id": "OSC-001",
        "name": "Keysight DSOX1204G Oscilloscope",
        "description": "4-channel, 200 MHz digital oscilloscope with 2 GSa/s sampling rate",
        "location": "Lab B-204",
        "category": "Oscilloscopes",
        "calibration_status": "calibrated",
        "last_calibrated": datetime(2024, 11, 15),
        "next_due": datetime(2025, 11, 15),
        "is_available": True,
    },
    {
        "asset_id": "DMM-003",
        "name": "Fluke 8845A Precision Multimeter",
        "description": "6.5-digit precision multimeter with 0.0024% basic DCV accuracy",
        "location": "Lab A-101",
        "category": "Multimeters",
        "calibration_status": "due_soon",
        "last_calibrated": datetime(2024, 1, 20),
        "next_due": datetime(2025, 1, 20),
        "is_available": True,
    },
    {
        "asset_id": "PSU-002",
        "name": "Keysight E36313A Power Supply",
        "description": "Triple-output DC power supply, 6V/5A, ±25V/1A",
        "location": "Lab C-305",
        "category": "Power Supplies",
        "calibration_status": "calibrated",
        "last_calibrated": datetime(2024, 8, 10),
        "next_due": datetime(2025, 8, 10),
        "is_available": True,
    },
    {
        "asset_id": "SIG-001",
        "name": "Rohde & Schwarz SMC100A Signal Generator",
        "description": "RF signal generator, 9 kHz to 1.1 GHz",
        "location": "Lab B-204",
        "category": "Signal Generators",
        "calibration_status": "calibrated",
        "last_calibrated": datetime(2024, 9, 5),
        "next_due": datetime(2025, 9, 5),
        "is_available": False,
        "maintenance_status": "maintenance",
        "estimated_return": datetime(2024, 12, 28),
    },
    {
        "asset_id": "OSC-002",
        "name": "Tektronix MSO46 Mixed Signal Oscilloscope",
        "description": "4-channel, 1 GHz bandwidth with 16 digital channels",
        "location": "Lab A-101",
        "category": "Oscilloscopes",
        "calibration_status": "calibrated",
        "last_calibrated": datetime(2024, 10, 12),
        "next_due": datetime(2025, 10, 12),
        "is_available": True,
    },
    {
        "asset_id": "DMM-004",
        "name": "Keysight 34465A Digital Multimeter",
        "description": "6.5-digit bench multimeter with Truevolt technology",
        "location": "Lab C-305",
        "category": "Multimeters",
        "calibration_status": "calibrated",
        "last_calibrated": datetime(2024, 9, 20),
        "next_due": datetime(2025, 9, 20),
        "is_available": True,
    },
]
