"""Replay of recorded navigation updates and wind samples."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .engine import WindEngine
from .exceptions import ConfigError
from .models.wind import RawWindSample


@dataclass(frozen=True)
class NavigationEvent:
    path: str
    value: float


@dataclass(frozen=True)
class AnchorEvent:
    bearing: Optional[float]  # radians, None when the anchor is raised


ReplayEvent = Union[NavigationEvent, AnchorEvent, RawWindSample]


def parse_event(entry: Dict[str, Any]) -> ReplayEvent:
    """
    Parse one scenario entry.

    Supported forms:
        {"navigation": {"path": str, "value": float}}
        {"wind": {"speed": float, "angle": float, "air_temperature": float}}
        {"anchor": {"bearing": float}} or {"anchor": null}
    """
    if not isinstance(entry, dict) or len(entry) != 1:
        raise ConfigError(f"Scenario event must have exactly one key: {entry}")

    kind, body = next(iter(entry.items()))
    try:
        if kind == "navigation":
            return NavigationEvent(path=body["path"], value=float(body["value"]))
        if kind == "wind":
            air_temperature = body.get("air_temperature")
            return RawWindSample(
                speed=float(body["speed"]),
                relative_angle_degrees=float(body["angle"]),
                air_temperature=(
                    float(air_temperature) if air_temperature is not None else None
                ),
            )
        if kind == "anchor":
            if body is None:
                return AnchorEvent(bearing=None)
            return AnchorEvent(bearing=float(body["bearing"]))
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ConfigError(f"Invalid {kind} event: {body}") from e

    raise ConfigError(f"Unknown scenario event type: {kind}")


def parse_events(entries: Optional[List[Dict[str, Any]]]) -> List[ReplayEvent]:
    return [parse_event(entry) for entry in entries or []]


def replay(engine: WindEngine, events: List[ReplayEvent]) -> int:
    """
    Feed events to the engine in order.

    Returns:
        int: Number of wind samples that produced a result
    """
    results = 0
    for event in events:
        if isinstance(event, NavigationEvent):
            engine.update_navigation_path(event.path, event.value)
        elif isinstance(event, AnchorEvent):
            if event.bearing is None:
                engine.tracker.clear_anchored()
            else:
                engine.tracker.set_anchored(event.bearing)
        elif engine.process_sample(event) is not None:
            results += 1

    logging.info(f"Replayed {len(events)} events, derived {results} wind results")
    return results
