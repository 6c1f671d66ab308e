# -*- coding: utf-8 -*-
"""
Entry Context - In-flight form state for the access-log wizard.

Holds one record's worth of fields plus the chosen entry type. Never
persisted; reset after every successful save.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from athena.models.log_entry import EntryType
from athena.models.reference_data import DEFAULT_VEHICLE_TYPE_ID, default_access_point
from athena.ui.wizards.framework.wizard_context import WizardContext
from athena.utils.datetime_utils import time_of_day


class EntryContext(WizardContext):
    """Form state shared by the four wizard steps."""

    def __init__(self, now: Optional[datetime] = None):
        super().__init__()

        # Step 1
        self.operator_name: str = ""
        self.access_point: str = default_access_point()

        # Step 2
        self.entry_type: Optional[EntryType] = None

        # Step 3 - common
        self.registration: str = ""
        self.company: str = ""
        self.entry_time: str = time_of_day(now)
        self.exit_time: str = ""
        self.destination: str = ""
        self.observation: str = ""

        # Step 3 - visitor
        self.visitor_name: str = ""
        self.person_visited: str = ""
        self.cin: str = ""
        self.is_announced: bool = True

        # Step 3 - vehicle
        self.vehicle_type_id: str = DEFAULT_VEHICLE_TYPE_ID
        self.driver_name: str = ""
        self.bon_number: str = ""

    @property
    def has_operator(self) -> bool:
        return bool(self.operator_name)

    def set_field(self, name: str, value: Any):
        """Update one form field by attribute name."""
        if not hasattr(self, name):
            raise AttributeError(f"Unknown form field: {name}")
        setattr(self, name, value)
        self.touch()

    def reset_form(self, now: Optional[datetime] = None):
        """
        Clear detail and variant fields after a save.

        Operator, access point and entry type are kept so the next entry at
        the same post starts from the type selection. Entry time is reset to
        the current time of day.
        """
        self.registration = ""
        self.company = ""
        self.exit_time = ""
        self.destination = ""
        self.observation = ""

        self.visitor_name = ""
        self.person_visited = ""
        self.cin = ""
        self.is_announced = True

        self.vehicle_type_id = DEFAULT_VEHICLE_TYPE_ID
        self.driver_name = ""
        self.bon_number = ""

        self.entry_time = time_of_day(now)
        self.touch()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize context to dictionary."""
        base_data = super().to_dict()
        base_data.update({
            "operator_name": self.operator_name,
            "access_point": self.access_point,
            "entry_type": self.entry_type.value if self.entry_type else None,
            "registration": self.registration,
            "company": self.company,
            "entry_time": self.entry_time,
            "exit_time": self.exit_time,
            "destination": self.destination,
            "observation": self.observation,
            "visitor_name": self.visitor_name,
            "person_visited": self.person_visited,
            "cin": self.cin,
            "is_announced": self.is_announced,
            "vehicle_type_id": self.vehicle_type_id,
            "driver_name": self.driver_name,
            "bon_number": self.bon_number,
        })
        return base_data
