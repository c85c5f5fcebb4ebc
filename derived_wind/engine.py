import logging
import threading
from typing import Callable, List, Optional

from .models.vessel_state import NavigationUpdate, VesselStateTracker
from .models.wind import RawWindSample, TrueWindResult
from .services.delta_service import Measurement, create_measurements
from .services.wind_service import (
    DEFAULT_SOURCE,
    calculate_derived_wind_values,
    resolve_apparent_wind,
)

MeasurementSink = Callable[[List[Measurement]], None]


class WindEngine:
    """
    Derives true wind and comfort values from apparent wind samples.

    Navigation updates and wind samples may arrive from different threads.
    Samples are processed one at a time, in arrival order, each against a
    single snapshot of the vessel state.
    """

    def __init__(
        self,
        source: str = DEFAULT_SOURCE,
        enabled: bool = True,
        sinks: Optional[List[MeasurementSink]] = None,
    ):
        """
        Args:
            source: Source tag attached to published values
            enabled: When False, samples are accepted but nothing is derived
            sinks: Callables receiving the measurements of each sample
        """
        self.source = source
        self.enabled = enabled
        self.tracker = VesselStateTracker()
        self.sinks: List[MeasurementSink] = list(sinks or [])
        self._process_lock = threading.Lock()

    def add_sink(self, sink: MeasurementSink):
        self.sinks.append(sink)

    def update_navigation(self, update: NavigationUpdate):
        self.tracker.apply_update(update)

    def update_navigation_path(self, path: str, value: float):
        self.tracker.apply_path_update(path, value)

    def process_sample(self, sample: RawWindSample) -> Optional[TrueWindResult]:
        """
        Derive and publish the values for one wind sample.

        Args:
            sample: Raw wind sample from the anemometer

        Returns:
            Optional[TrueWindResult]: Derived values, or None when disabled
        """
        with self._process_lock:
            if not self.enabled:
                logging.debug("Wind calculations disabled, sample not processed")
                return None

            state = self.tracker.snapshot()
            apparent = resolve_apparent_wind(sample, state)
            result = calculate_derived_wind_values(apparent, state, self.source)
            self._publish(create_measurements(result))
        return result

    def _publish(self, measurements: List[Measurement]):
        for sink in self.sinks:
            try:
                sink(measurements)
            except Exception as e:
                logging.error(f"Error publishing wind measurements: {e}")
                raise
