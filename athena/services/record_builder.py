# -*- coding: utf-8 -*-
"""
Record builder.

Turns the in-flight form state into an immutable log entry. The entry type
decides the shape: a visitor record never carries vehicle fields and a
vehicle record never carries visitor fields. Field contents are taken as-is.
"""

import uuid
from datetime import datetime
from typing import Callable, Optional, TYPE_CHECKING

from athena.models.log_entry import EntryType, LogEntry, VehicleEntry, VisitorEntry
from athena.models.reference_data import vehicle_type_label
from athena.services.exceptions import InvalidEntryError
from athena.utils.datetime_utils import utc_timestamp
from athena.utils.logger import get_logger

if TYPE_CHECKING:
    from athena.ui.wizards.entry_log.entry_context import EntryContext

logger = get_logger(__name__)


def generate_entry_id() -> str:
    """Opaque unique identifier for a new record."""
    return uuid.uuid4().hex


def build_entry(
    context: "EntryContext",
    entry_type: Optional[EntryType] = None,
    now: Optional[datetime] = None,
    id_factory: Callable[[], str] = generate_entry_id
) -> LogEntry:
    """
    Build a log entry from the current form fields.

    Args:
        context: Form state
        entry_type: Tag to build (default: context.entry_type)
        now: Creation time (default: current time)
        id_factory: Identifier generator

    Returns:
        VisitorEntry or VehicleEntry

    Raises:
        InvalidEntryError: if no entry type was chosen or the tag is unknown
    """
    entry_type = entry_type or context.entry_type
    if entry_type is None:
        raise InvalidEntryError("No entry type selected", field="type")

    try:
        entry_type = EntryType(entry_type)
    except ValueError:
        raise InvalidEntryError(f"Unsupported entry type: {entry_type}", field="type")

    common = dict(
        entry_id=id_factory(),
        timestamp=utc_timestamp(now),
        operator_name=context.operator_name,
        access_point=context.access_point,
        entry_time=context.entry_time,
        exit_time=context.exit_time,
        destination=context.destination,
        observation=context.observation,
        registration=context.registration,
        company=context.company,
    )

    if entry_type is EntryType.VISITOR:
        entry = VisitorEntry(
            visitor_name=context.visitor_name,
            person_visited=context.person_visited,
            cin=context.cin,
            is_announced=bool(context.is_announced),
            **common
        )
    elif entry_type is EntryType.VEHICLE:
        entry = VehicleEntry(
            vehicle_type=vehicle_type_label(context.vehicle_type_id),
            driver_name=context.driver_name,
            bon_number=context.bon_number,
            **common
        )
    else:
        raise InvalidEntryError(f"Unsupported entry type: {entry_type}", field="type")

    logger.debug(f"Built {entry_type.value} entry {entry.entry_id}")
    return entry
