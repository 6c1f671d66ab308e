# -*- coding: utf-8 -*-
"""
Log entry models.

A log entry is either a VisitorEntry or a VehicleEntry. The two records
share the common header fields but are separate types; consumers dispatch
on the concrete class (see entry_from_dict / entry_to_dict).

Serialized keys follow the stored log format (camelCase, French field
names for the post chief, entry/exit times and company).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union

from athena.services.exceptions import InvalidEntryError


class EntryType(str, Enum):
    """Discriminator stored under the "type" key."""
    VISITOR = "VISITOR"
    VEHICLE = "VEHICLE"


# attribute name -> JSON key
COMMON_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("entry_id", "id"),
    ("timestamp", "timestamp"),
    ("operator_name", "chefPoste"),
    ("access_point", "accessPoint"),
    ("entry_time", "heureEntree"),
    ("exit_time", "heureSortie"),
    ("destination", "destination"),
    ("observation", "observation"),
    ("registration", "registration"),
    ("company", "societe"),
)

VISITOR_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("visitor_name", "visitorName"),
    ("person_visited", "personVisited"),
    ("cin", "cin"),
    ("is_announced", "isAnnounced"),
)

VEHICLE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("vehicle_type", "vehicleType"),
    ("driver_name", "driverName"),
    ("bon_number", "bonNumber"),
)


@dataclass(frozen=True)
class VisitorEntry:
    """A person entering on foot (or as a passenger) at an access point."""

    entry_id: str
    timestamp: str
    operator_name: str = ""
    access_point: str = ""
    entry_time: str = ""
    exit_time: str = ""
    destination: str = ""
    observation: str = ""
    registration: str = ""
    company: str = ""

    visitor_name: str = ""
    person_visited: str = ""
    cin: str = ""
    is_announced: bool = True

    @property
    def entry_type(self) -> EntryType:
        return EntryType.VISITOR

    @property
    def display_name(self) -> str:
        return self.visitor_name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = _dump_fields(self, COMMON_FIELDS)
        data["type"] = EntryType.VISITOR.value
        data.update(_dump_fields(self, VISITOR_FIELDS))
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VisitorEntry":
        """Create from a serialized dictionary."""
        values = _load_fields(data, COMMON_FIELDS)
        values.update(_load_fields(data, VISITOR_FIELDS))
        values["is_announced"] = _as_bool(data.get("isAnnounced", True))
        return cls(**values)


@dataclass(frozen=True)
class VehicleEntry:
    """A vehicle movement (delivery, service, staff car) at an access point."""

    entry_id: str
    timestamp: str
    operator_name: str = ""
    access_point: str = ""
    entry_time: str = ""
    exit_time: str = ""
    destination: str = ""
    observation: str = ""
    registration: str = ""
    company: str = ""

    vehicle_type: str = ""
    driver_name: str = ""
    bon_number: str = ""

    @property
    def entry_type(self) -> EntryType:
        return EntryType.VEHICLE

    @property
    def display_name(self) -> str:
        return self.driver_name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = _dump_fields(self, COMMON_FIELDS)
        data["type"] = EntryType.VEHICLE.value
        data.update(_dump_fields(self, VEHICLE_FIELDS))
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VehicleEntry":
        """Create from a serialized dictionary."""
        values = _load_fields(data, COMMON_FIELDS)
        values.update(_load_fields(data, VEHICLE_FIELDS))
        return cls(**values)


LogEntry = Union[VisitorEntry, VehicleEntry]


def entry_from_dict(data: Dict[str, Any]) -> LogEntry:
    """
    Decode one stored record, dispatching on its "type" tag.

    Raises:
        InvalidEntryError: if the payload is not a mapping, has no id,
            or carries an unknown type tag
    """
    if not isinstance(data, dict):
        raise InvalidEntryError(f"Expected an object, got {type(data).__name__}")

    if not data.get("id"):
        raise InvalidEntryError("Entry has no identifier", field="id")

    tag = data.get("type")
    if tag == EntryType.VISITOR.value:
        return VisitorEntry.from_dict(data)
    if tag == EntryType.VEHICLE.value:
        return VehicleEntry.from_dict(data)

    raise InvalidEntryError(f"Unknown entry type: {tag!r}", field="type")


def entry_to_dict(entry: LogEntry) -> Dict[str, Any]:
    """Encode one record; anything other than the two entry types is rejected."""
    if isinstance(entry, (VisitorEntry, VehicleEntry)):
        return entry.to_dict()
    raise InvalidEntryError(f"Not a log entry: {type(entry).__name__}")


def _dump_fields(entry: LogEntry, fields: Tuple[Tuple[str, str], ...]) -> Dict[str, Any]:
    return {key: getattr(entry, attr) for attr, key in fields}


def _load_fields(data: Dict[str, Any], fields: Tuple[Tuple[str, str], ...]) -> Dict[str, Any]:
    values = {}
    for attr, key in fields:
        value = data.get(key)
        values[attr] = "" if value is None else str(value)
    return values


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)
