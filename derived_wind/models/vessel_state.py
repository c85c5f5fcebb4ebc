import logging
import threading
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class NavigationField(Enum):
    """Navigation values tracked for wind calculations, keyed by SignalK path"""

    HEADING_TRUE = "navigation.headingTrue"
    HEADING_MAGNETIC = "navigation.headingMagnetic"
    COURSE_OVER_GROUND_MAGNETIC = "navigation.courseOverGroundMagnetic"
    SPEED_OVER_GROUND = "navigation.speedOverGround"
    AIR_TEMPERATURE = "environment.outside.tempest.observations.airTemperature"
    RELATIVE_HUMIDITY = "environment.outside.tempest.observations.relativeHumidity"


@dataclass(frozen=True)
class NavigationUpdate:
    """A single navigation value from the navigation feed"""

    field: NavigationField
    value: float

    @classmethod
    def from_path(cls, path: str, value: float) -> Optional["NavigationUpdate"]:
        """
        Build an update from a SignalK path.

        Returns:
            Optional[NavigationUpdate]: None if the path is not tracked
        """
        try:
            return cls(NavigationField(path), value)
        except ValueError:
            return None


@dataclass(frozen=True)
class VesselState:
    """Snapshot of the vessel state used by one wind derivation"""

    heading_true: float = 0.0  # radians
    heading_magnetic: float = 0.0  # radians
    course_over_ground_magnetic: Optional[float] = None  # radians
    speed_over_ground: float = 0.0  # m/s
    air_temperature: float = 0.0  # kelvin
    relative_humidity: float = 0.0  # percent
    anchored: bool = False
    anchored_apparent_bearing: float = 0.0  # radians

    @property
    def magnetic_reference(self) -> float:
        """Course over ground magnetic when known, else heading magnetic"""
        if self.course_over_ground_magnetic is not None:
            return self.course_over_ground_magnetic
        return self.heading_magnetic


class VesselStateTracker:
    """
    Holds the latest navigation values for the session.

    Updates may arrive from any thread. Every read goes through snapshot(),
    which copies all fields under the same lock that guards writes.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._state = VesselState()

    def apply_update(self, update: NavigationUpdate) -> None:
        """Store a navigation value. Last write wins, values are not validated."""
        field = update.field
        if field is NavigationField.HEADING_TRUE:
            changes = {"heading_true": update.value}
        elif field is NavigationField.HEADING_MAGNETIC:
            changes = {"heading_magnetic": update.value}
        elif field is NavigationField.COURSE_OVER_GROUND_MAGNETIC:
            changes = {"course_over_ground_magnetic": update.value}
        elif field is NavigationField.SPEED_OVER_GROUND:
            changes = {"speed_over_ground": update.value}
        elif field is NavigationField.AIR_TEMPERATURE:
            changes = {"air_temperature": update.value}
        elif field is NavigationField.RELATIVE_HUMIDITY:
            changes = {"relative_humidity": update.value}
        else:
            raise ValueError(f"Unhandled navigation field: {field}")

        with self._lock:
            self._state = replace(self._state, **changes)

    def apply_path_update(self, path: str, value: float) -> None:
        """Store a value received under a SignalK path; untracked paths are ignored."""
        update = NavigationUpdate.from_path(path, value)
        if update is None:
            logging.debug(f"Ignoring untracked navigation path: {path}")
            return
        self.apply_update(update)

    def set_anchored(self, apparent_bearing: float) -> None:
        """
        Switch to anchored mode.

        Args:
            apparent_bearing: Apparent wind bearing the vessel lies to, in radians
        """
        with self._lock:
            self._state = replace(
                self._state, anchored=True, anchored_apparent_bearing=apparent_bearing
            )

    def clear_anchored(self) -> None:
        with self._lock:
            self._state = replace(self._state, anchored=False)

    def snapshot(self) -> VesselState:
        """Get a consistent copy of all vessel state fields"""
        with self._lock:
            return self._state
