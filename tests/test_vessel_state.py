import threading
import unittest

from derived_wind.models.vessel_state import (
    NavigationField,
    NavigationUpdate,
    VesselState,
    VesselStateTracker,
)


class TestNavigationUpdate(unittest.TestCase):
    def test_from_path(self):
        update = NavigationUpdate.from_path("navigation.headingTrue", 1.2)
        self.assertEqual(update, NavigationUpdate(NavigationField.HEADING_TRUE, 1.2))

        update = NavigationUpdate.from_path(
            "environment.outside.tempest.observations.relativeHumidity", 55
        )
        self.assertEqual(update.field, NavigationField.RELATIVE_HUMIDITY)

    def test_from_untracked_path(self):
        self.assertIsNone(NavigationUpdate.from_path("navigation.position", 1.0))

    def test_six_tracked_fields(self):
        self.assertEqual(len(NavigationField), 6)


class TestVesselStateTracker(unittest.TestCase):
    def setUp(self):
        self.tracker = VesselStateTracker()

    def test_defaults(self):
        state = self.tracker.snapshot()
        self.assertEqual(state, VesselState())
        self.assertEqual(state.heading_true, 0.0)
        self.assertIsNone(state.course_over_ground_magnetic)
        self.assertFalse(state.anchored)

    def test_apply_each_field(self):
        values = {
            NavigationField.HEADING_TRUE: ("heading_true", 1.0),
            NavigationField.HEADING_MAGNETIC: ("heading_magnetic", 1.1),
            NavigationField.COURSE_OVER_GROUND_MAGNETIC: (
                "course_over_ground_magnetic",
                1.2,
            ),
            NavigationField.SPEED_OVER_GROUND: ("speed_over_ground", 3.5),
            NavigationField.AIR_TEMPERATURE: ("air_temperature", 290.0),
            NavigationField.RELATIVE_HUMIDITY: ("relative_humidity", 65.0),
        }
        for field, (attribute, value) in values.items():
            self.tracker.apply_update(NavigationUpdate(field, value))

        state = self.tracker.snapshot()
        for attribute, value in values.values():
            self.assertEqual(getattr(state, attribute), value)

    def test_last_write_wins(self):
        self.tracker.apply_path_update("navigation.speedOverGround", 2.0)
        self.tracker.apply_path_update("navigation.speedOverGround", 4.0)
        self.assertEqual(self.tracker.snapshot().speed_over_ground, 4.0)

    def test_no_validation(self):
        self.tracker.apply_path_update("navigation.speedOverGround", -3.0)
        self.assertEqual(self.tracker.snapshot().speed_over_ground, -3.0)

    def test_untracked_path_ignored(self):
        before = self.tracker.snapshot()
        self.assertIsNone(self.tracker.apply_path_update("navigation.position", 7.0))
        self.assertEqual(self.tracker.snapshot(), before)

    def test_snapshot_is_isolated_from_later_updates(self):
        snapshot = self.tracker.snapshot()
        self.tracker.apply_path_update("navigation.headingTrue", 2.0)
        self.assertEqual(snapshot.heading_true, 0.0)
        self.assertEqual(self.tracker.snapshot().heading_true, 2.0)

    def test_magnetic_reference(self):
        self.tracker.apply_path_update("navigation.headingMagnetic", 0.4)
        self.assertEqual(self.tracker.snapshot().magnetic_reference, 0.4)

        self.tracker.apply_path_update("navigation.courseOverGroundMagnetic", 0.7)
        self.assertEqual(self.tracker.snapshot().magnetic_reference, 0.7)

    def test_cog_zero_is_a_value(self):
        self.tracker.apply_path_update("navigation.headingMagnetic", 0.4)
        self.tracker.apply_path_update("navigation.courseOverGroundMagnetic", 0.0)
        self.assertEqual(self.tracker.snapshot().magnetic_reference, 0.0)

    def test_anchor(self):
        self.tracker.set_anchored(1.5)
        state = self.tracker.snapshot()
        self.assertTrue(state.anchored)
        self.assertEqual(state.anchored_apparent_bearing, 1.5)

        self.tracker.clear_anchored()
        self.assertFalse(self.tracker.snapshot().anchored)

    def test_concurrent_updates(self):
        """Paired writes from several threads never produce a torn snapshot"""

        def writer(value):
            for _ in range(200):
                self.tracker.apply_path_update("navigation.headingTrue", value)
                self.tracker.apply_path_update("navigation.speedOverGround", value)

        threads = [threading.Thread(target=writer, args=(v,)) for v in (1.0, 2.0, 3.0)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        state = self.tracker.snapshot()
        self.assertIn(state.heading_true, (1.0, 2.0, 3.0))
        self.assertIn(state.speed_over_ground, (1.0, 2.0, 3.0))


if __name__ == "__main__":
    unittest.main()
