"""
Safety travel screen state.

All state the screen needs lives on a SafetyScreen instance: the device
position, the route draft, the bottom panel and the menu modal. Each user
interaction is a method that updates that state and, where the screen
would pop up a dialog, records an Alert.

Author: SafeSteps Team
Date: 2026-10-16
"""

import logging
from typing import Dict, List, Optional

from .location import LocationResult, LocationStatus, fetch_current_position
from .panel import PanelController
from .route_draft import RouteDraft, is_valid_passenger_count

logger = logging.getLogger(__name__)

APP_TITLE = "SAFE STEPS"
FORM_TITLE = "Add a New Route"
MAP_PLACEHOLDER = "Loading map..."
MAP_DELTA = 0.01

# Quick-action icon label -> alert title
QUICK_ACTIONS = {
    "Safety Tips": "Safety Tips",
    "Alerts": "Alerts",
    "History": "Route History",
    "Location": "Current Location",
    "Report": "Report Issue",
}

MENU_OPTIONS = ["Profile", "Sign up/in", "notifications", "Ratings", "Reports", "Log Out"]


class Alert:
    """A blocking confirmation dialog shown to the user."""

    def __init__(self, title: str, message: str = ""):
        self.title = title
        self.message = message

    def __eq__(self, other):
        if not isinstance(other, Alert):
            return NotImplemented
        return (self.title, self.message) == (other.title, other.message)

    def __repr__(self):
        return f"Alert({self.title!r}, {self.message!r})"


class SafetyScreen:
    """Screen-owned state and event handlers.

    Attributes:
        location: Result of the one-shot location task.
        route: Current route draft.
        panel: Draggable bottom panel controller.
        menu_visible: Whether the options modal is showing.
        alerts: Every alert raised so far, oldest first.
    """

    def __init__(self, screen_height: float):
        self.location = LocationResult.pending()
        self.route = RouteDraft()
        self.panel = PanelController(screen_height)
        self.menu_visible = False
        self.alerts: List[Alert] = []

    def alert(self, title: str, message: str = "") -> Alert:
        entry = Alert(title, message)
        self.alerts.append(entry)
        return entry

    @property
    def last_alert(self) -> Optional[Alert]:
        return self.alerts[-1] if self.alerts else None

    # ------------------------------------------------------------------
    # Location / map
    # ------------------------------------------------------------------

    async def load_location(self, provider) -> LocationResult:
        """Run the location task and store its result.

        A denied permission raises an alert; the map stays on its
        placeholder for anything other than a granted lookup.
        """
        self.location = await fetch_current_position(provider)
        if self.location.status is LocationStatus.DENIED:
            self.alert("Permission Denied", "Permission to access location was denied.")
        return self.location

    def map_region(self) -> Optional[Dict]:
        """Region and marker for the map surface, or None while loading."""
        position = self.location.position
        if self.location.status is not LocationStatus.GRANTED or position is None:
            return None
        return {
            "latitude": position.latitude,
            "longitude": position.longitude,
            "latitude_delta": MAP_DELTA,
            "longitude_delta": MAP_DELTA,
            "marker": position.to_dict(),
        }

    @property
    def map_placeholder(self) -> Optional[str]:
        return MAP_PLACEHOLDER if self.map_region() is None else None

    # ------------------------------------------------------------------
    # Route form
    # ------------------------------------------------------------------

    def handle_change(self, name: str, value) -> RouteDraft:
        self.route = self.route.update(name, value)
        return self.route

    def handle_submit(self) -> Alert:
        logger.info(
            "Route Details: %s (passengers valid: %s)",
            self.route.to_dict(),
            is_valid_passenger_count(self.route.passengers),
        )
        return self.alert("Route Added", "Route details have been added successfully.")

    def handle_sos(self) -> Alert:
        return self.alert("SOS Alert", "Your location has been sent to emergency contacts.")

    def press_quick_action(self, label: str) -> Alert:
        """Tap one of the icons under the SOS button.

        Args:
            label: Icon label (e.g. "History") or its alert title
                (e.g. "Route History").

        Raises:
            KeyError: If label is not a quick action.
        """
        if label in QUICK_ACTIONS:
            return self.alert(QUICK_ACTIONS[label])
        if label in QUICK_ACTIONS.values():
            return self.alert(label)
        raise KeyError(label)

    # ------------------------------------------------------------------
    # Menu modal
    # ------------------------------------------------------------------

    def open_menu(self):
        self.menu_visible = True

    def close_menu(self):
        self.menu_visible = False

    def select_option(self, option: str) -> Alert:
        """Pick an entry in the options modal, then close it.

        Raises:
            KeyError: If option is not listed in the menu.
        """
        if option not in MENU_OPTIONS:
            raise KeyError(option)
        entry = self.alert(option, f"{option} selected!")
        self.close_menu()
        return entry
