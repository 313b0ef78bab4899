import unittest

from report_cases import CASES

from venue_meta.devices import classify_device, discover_devices
from venue_meta.document import HtmlDocument
from venue_meta.hardware import Hardware
from venue_meta.models import (
    DuplicateDeviceError,
    MalformedTableError,
    MissingFieldError,
    UnknownDeviceTypeError,
    Venue,
)

HEADER = (
    "<table id='console'><tr><td class='product'>Avid VENUE</td>"
    "<td class='version'>VENUE 4.5.3</td></tr>"
    "<tr><td>Show</td><td class='show'>Test</td></tr></table>"
)


def _doc(*blocks: str) -> HtmlDocument:
    return HtmlDocument.from_string(f"<html><body>{HEADER}{''.join(blocks)}</body></html>")


def _block(name: str, inputs: list[str] | None = None, outputs: list[str] | None = None) -> str:
    parts = [f"<div class='device'><h3>{name}</h3>"]
    for cls, rows in (("inputs", inputs), ("outputs", outputs)):
        if rows is None:
            continue
        parts.append(f"<table class='{cls}'><tr><th>Ch</th><th>Name</th></tr>{''.join(rows)}</table>")
    parts.append("</div>")
    return "".join(parts)


def _rows(count: int) -> list[str]:
    return [f"<tr><td>{i}</td><td>Ch {i}</td></tr>" for i in range(1, count + 1)]


class TestDiscoverDevicesFixtures(unittest.TestCase):
    def test_fixture_reports(self) -> None:
        for case in CASES:
            with self.subTest(report=case.filename):
                devices = discover_devices(case.load())
                self.assertEqual(set(devices), set(case.devices))
                for name, (hw, num_inputs, num_outputs) in case.devices.items():
                    device = devices[name]
                    self.assertEqual(device.name, name)
                    self.assertIs(device.type, hw)
                    self.assertEqual(device.num_inputs, num_inputs)
                    self.assertEqual(device.num_outputs, num_outputs)

    def test_stereo_channel_names_are_kept_raw(self) -> None:
        devices = discover_devices(CASES[0].load())
        first = devices["Stage 1"].inputs[0]
        self.assertEqual(first.name, "eGit-L, eGit-R")
        self.assertEqual(first.clean_name, "eGit")

    def test_registry_does_not_touch_a_venue(self) -> None:
        venue = Venue()
        devices = discover_devices(CASES[0].load())
        self.assertEqual(venue.devices, {})
        venue.attach_devices(devices)
        self.assertEqual(len(venue.devices), 7)


class TestClassifyDevice(unittest.TestCase):
    def test_stage_boxes(self) -> None:
        for name in ("Stage 1", "Stage 4", "Stage 12"):
            self.assertIs(classify_device(name), Hardware.STAGE_BOX)

    def test_local(self) -> None:
        for name in ("Console", "Local", "Engine"):
            self.assertIs(classify_device(name), Hardware.LOCAL)

    def test_pro_tools(self) -> None:
        for name in ("Pro Tools", "Pro Tools 2", "HDX Pro Tools"):
            self.assertIs(classify_device(name), Hardware.PRO_TOOLS)

    def test_unknown(self) -> None:
        for name in ("Stage", "Stage A", "Local 2", "Mixer"):
            with self.subTest(name=name):
                with self.assertRaises(UnknownDeviceTypeError) as ctx:
                    classify_device(name)
                self.assertEqual(ctx.exception.device, name)


class TestDiscoverDevicesTables(unittest.TestCase):
    def test_missing_tables_count_as_zero(self) -> None:
        devices = discover_devices(
            _doc(
                _block("Stage 1", inputs=_rows(8)),
                _block("Engine", outputs=_rows(2)),
                _block("Console", inputs=[], outputs=[]),
            )
        )
        self.assertEqual((devices["Stage 1"].num_inputs, devices["Stage 1"].num_outputs), (8, 0))
        self.assertEqual((devices["Engine"].num_inputs, devices["Engine"].num_outputs), (0, 2))
        self.assertEqual((devices["Console"].num_inputs, devices["Console"].num_outputs), (0, 0))

    def test_no_device_blocks(self) -> None:
        self.assertEqual(discover_devices(_doc()), {})

    def test_row_with_single_cell_is_malformed(self) -> None:
        doc = _doc(_block("Stage 1", inputs=_rows(2) + ["<tr><td>3</td></tr>"]))
        with self.assertRaises(MalformedTableError) as ctx:
            discover_devices(doc)
        self.assertEqual(ctx.exception.device, "Stage 1")
        self.assertEqual(ctx.exception.table, "inputs")

    def test_row_without_channel_number_is_malformed(self) -> None:
        doc = _doc(_block("Engine", outputs=["<tr><td> </td><td>Mon 1</td></tr>"]))
        with self.assertRaises(MalformedTableError) as ctx:
            discover_devices(doc)
        self.assertEqual(ctx.exception.table, "outputs")

    def test_block_without_name(self) -> None:
        doc = _doc(_block("Stage 1", inputs=_rows(1)), "<div class='device'><h3> </h3></div>")
        with self.assertRaises(MissingFieldError) as ctx:
            discover_devices(doc)
        self.assertEqual(ctx.exception.field, "device name")

    def test_unknown_device_aborts_discovery(self) -> None:
        doc = _doc(_block("Stage 1", inputs=_rows(4)), _block("Talkback Box", inputs=_rows(1)))
        with self.assertRaises(UnknownDeviceTypeError):
            discover_devices(doc)

    def test_duplicate_name(self) -> None:
        doc = _doc(_block("Stage 1", inputs=_rows(4)), _block("Stage 1", inputs=_rows(4)))
        with self.assertRaises(DuplicateDeviceError) as ctx:
            discover_devices(doc)
        self.assertEqual(ctx.exception.device, "Stage 1")

    def test_unrecognized_document(self) -> None:
        doc = HtmlDocument.from_string("<html><body><div class='device'><h3>Stage 1</h3></div></body></html>")
        with self.assertRaises(MissingFieldError):
            discover_devices(doc)


if __name__ == "__main__":
    unittest.main()
