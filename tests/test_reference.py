import json
import os
import tempfile
import unittest

from beakerlab.errors import ReferenceTableError
from beakerlab.models import ChemicalDescriptor
from beakerlab.reference import StaticReferenceTable, default_reference_table, load_reference_table


class TestReferenceTables(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def _write(self, payload):
        path = os.path.join(self.tmpdir.name, "chemicals.json")
        with open(path, "w") as f:
            if isinstance(payload, str):
                f.write(payload)
            else:
                json.dump(payload, f)
        return path

    def test_default_table_covers_reactive_chemicals(self):
        table = default_reference_table()
        for chemical_id in ("hcl", "naoh", "phenolph", "agno3", "silver", "salt", "water"):
            self.assertIn(chemical_id, table)
        self.assertEqual(table.lookup("naoh").formula, "NaOH")
        self.assertIsNone(table.lookup("unobtainium"))

    def test_load_from_json(self):
        path = self._write(
            {
                "hcl": {
                    "name": "Hydrochloric Acid",
                    "formula": "HCl",
                    "density": 1.18,
                    "molar_mass": 36.46,
                    "hazard": "Corrosive",
                },
                "water": {"name": "Water", "formula": "H2O", "density": 1, "molar_mass": 18.015},
            }
        )
        table = load_reference_table(path)

        self.assertEqual(list(table.identifiers()), ["hcl", "water"])
        self.assertEqual(
            table.lookup("hcl"),
            ChemicalDescriptor("hcl", "Hydrochloric Acid", "HCl", 1.18, 36.46, "Corrosive"),
        )
        self.assertEqual(table.lookup("water").hazard, "")

    def test_missing_fields(self):
        path = self._write({"hcl": {"name": "Hydrochloric Acid", "formula": "HCl"}})
        with self.assertRaises(ReferenceTableError) as ctx:
            load_reference_table(path)
        self.assertIn("density", str(ctx.exception))

    def test_bad_number(self):
        path = self._write(
            {"hcl": {"name": "HCl", "formula": "HCl", "density": "heavy", "molar_mass": 36.46}}
        )
        with self.assertRaises(ReferenceTableError):
            load_reference_table(path)

    def test_malformed_json(self):
        with self.assertRaises(ReferenceTableError):
            load_reference_table(self._write("{not json"))
        with self.assertRaises(ReferenceTableError):
            load_reference_table(self._write([1, 2, 3]))

    def test_missing_file(self):
        with self.assertRaises(ReferenceTableError):
            load_reference_table(os.path.join(self.tmpdir.name, "absent.json"))

    def test_table_is_read_only(self):
        source = {"salt": ChemicalDescriptor("salt", "Salt", "NaCl", 1.07, 58.44)}
        table = StaticReferenceTable(source)
        source.clear()
        self.assertIn("salt", table)
        self.assertEqual(len(table), 1)
        with self.assertRaises(TypeError):
            table._descriptors["x"] = None


if __name__ == '__main__':
    unittest.main()
