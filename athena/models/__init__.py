# -*- coding: utf-8 -*-
"""
ATHENA Data Models
"""

from .log_entry import (
    EntryType,
    VisitorEntry,
    VehicleEntry,
    LogEntry,
    entry_from_dict,
    entry_to_dict,
)
from .reference_data import VehicleType, VEHICLE_TYPES, get_vehicle_type, vehicle_type_label

__all__ = [
    "EntryType",
    "VisitorEntry",
    "VehicleEntry",
    "LogEntry",
    "entry_from_dict",
    "entry_to_dict",
    "VehicleType",
    "VEHICLE_TYPES",
    "get_vehicle_type",
    "vehicle_type_label",
]
