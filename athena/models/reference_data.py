# -*- coding: utf-8 -*-
"""
Reference data for the entry form: access points and vehicle types.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from athena.app.config import Config


@dataclass(frozen=True)
class VehicleType:
    """Selectable vehicle category. Records store the French label."""
    type_id: str
    label: str
    label_ar: str

    def display_label(self, lang: str) -> str:
        return self.label_ar if lang == "ar" else self.label


VEHICLE_TYPES: Tuple[VehicleType, ...] = (
    VehicleType("car", "Voiture", "سيارة"),
    VehicleType("truck", "Camion", "شاحنة"),
    VehicleType("motorcycle", "Moto", "دراجة نارية"),
    VehicleType("other", "Autre", "أخرى"),
)

DEFAULT_VEHICLE_TYPE_ID = VEHICLE_TYPES[0].type_id
FALLBACK_VEHICLE_LABEL = "Autre"


def get_vehicle_type(type_id: str) -> Optional[VehicleType]:
    """Find a vehicle type by id."""
    for vehicle_type in VEHICLE_TYPES:
        if vehicle_type.type_id == type_id:
            return vehicle_type
    return None


def vehicle_type_label(type_id: str) -> str:
    """Label stored on the record; unknown ids fall back to "Autre"."""
    vehicle_type = get_vehicle_type(type_id)
    return vehicle_type.label if vehicle_type else FALLBACK_VEHICLE_LABEL


def access_points() -> Tuple[str, ...]:
    """Configured access-point labels, in display order."""
    return Config.ACCESS_POINTS


def default_access_point() -> str:
    points = access_points()
    return points[0] if points else ""
