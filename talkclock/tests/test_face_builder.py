"""
Face builder and clock configuration.
"""

from __future__ import annotations

import unittest

from talkclock.exceptions.errors import ClockConfigurationError
from talkclock.logic.face_builder import build_face, paint_cover, paint_face
from talkclock.models.clock_configuration import ClockConfiguration
from talkclock.tests.fakes import FakeScheduler, FakeSurface


class TestClockConfiguration(unittest.TestCase):
    def test_defaults_match_derived_configuration(self) -> None:
        self.assertEqual(ClockConfiguration(), ClockConfiguration.from_radius(200, 50))

    def test_size_includes_margin(self) -> None:
        cfg = ClockConfiguration.from_radius(100, 20)
        self.assertEqual(cfg.size, 240)
        self.assertEqual(cfg.cover_radius, 5)

    def test_hand_lengths_increase(self) -> None:
        cfg = ClockConfiguration()
        self.assertLess(cfg.hour_hand_length, cfg.minute_hand_length)
        self.assertLess(cfg.second_hand_length, cfg.minute_hand_length)

    def test_rejects_non_positive_lengths(self) -> None:
        with self.assertRaises(ClockConfigurationError):
            ClockConfiguration(margin=0)
        with self.assertRaises(ValueError):
            ClockConfiguration.from_radius(10)  # second hand would be negative

    def test_rejects_hour_hand_longer_than_minute_hand(self) -> None:
        with self.assertRaises(ClockConfigurationError):
            ClockConfiguration(hour_hand_length=250)

    def test_is_immutable(self) -> None:
        cfg = ClockConfiguration()
        with self.assertRaises(AttributeError):
            cfg.radius = 10  # type: ignore[misc]


class TestBuildFace(unittest.TestCase):
    def setUp(self) -> None:
        self.cfg = ClockConfiguration()
        self.face = build_face(self.cfg)

    def test_counts(self) -> None:
        self.assertEqual(len(self.face.second_ticks), 60)
        self.assertEqual(len(self.face.hour_ticks), 12)
        self.assertEqual([l.text for l in self.face.second_labels], [str(v) for v in range(5, 61, 5)])
        self.assertEqual([l.text for l in self.face.hour_labels], ["3", "6", "9", "12"])

    def test_tick_spacing(self) -> None:
        self.assertEqual([t.rotation for t in self.face.second_ticks[:3]], [0.0, 6.0, 12.0])
        self.assertEqual(self.face.hour_ticks[1].rotation, 30.0)
        self.assertEqual(self.face.hour_ticks[11].rotation, 330.0)

    def test_hour_ticks_are_longer_and_thicker(self) -> None:
        sec, hour = self.face.second_ticks[0], self.face.hour_ticks[0]
        self.assertGreater(hour.start - hour.end, sec.start - sec.end)
        self.assertGreater(hour.width, sec.width)
        self.assertEqual(sec.start, 200)
        self.assertEqual(sec.end, 190)
        self.assertEqual(hour.end, 182)

    def test_label_positions(self) -> None:
        twelve = self.face.hour_labels[-1]
        self.assertAlmostEqual(twelve.x, 0.0, places=6)
        self.assertAlmostEqual(twelve.y, -216 + 7, places=6)
        three = self.face.hour_labels[0]
        self.assertAlmostEqual(three.x, 216, places=6)
        self.assertAlmostEqual(three.y, 7, places=6)
        fifteen = self.face.second_labels[2]
        self.assertEqual(fifteen.text, "15")
        self.assertAlmostEqual(fifteen.x, 168, places=6)

    def test_building_twice_is_identical(self) -> None:
        self.assertEqual(build_face(self.cfg), build_face(ClockConfiguration()))

    def test_cover(self) -> None:
        self.assertEqual(self.face.cover.radius, 10)


class TestPaintFace(unittest.TestCase):
    def test_paints_ticks_labels_and_cover(self) -> None:
        surface = FakeSurface(FakeScheduler())
        face = build_face(ClockConfiguration())
        paint_face(surface, face)
        paint_cover(surface, face.cover)
        kinds = [item["kind"] for item in surface.items.values()]
        self.assertEqual(kinds.count("line"), 72)
        self.assertEqual(kinds.count("text"), 16)
        self.assertEqual(kinds.count("circle"), 1)
        first = surface.items[1]
        self.assertEqual(first["tags"], ("second-tick",))
        self.assertEqual(first["coords"], (0, 200, 0, 190))


if __name__ == "__main__":
    unittest.main()
