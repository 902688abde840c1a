import unittest
from record_fields import canonicalize_record, get_field, num_field, optional_num_field, text_field

class TestGetField(unittest.TestCase):

    def test_lowercase_key(self):
        self.assertEqual(get_field({"pl_name": "Kepler-22 b"}, "pl_name"), "Kepler-22 b")

    def test_falls_back_to_uppercase_key(self):
        self.assertEqual(get_field({"PL_NAME": "Kepler-22 b"}, "pl_name"), "Kepler-22 b")

    def test_verbatim_key_wins(self):
        self.assertEqual(get_field({"st_rad": 1.0, "ST_RAD": 2.0}, "st_rad"), 1.0)

    def test_null_verbatim_falls_through(self):
        self.assertEqual(get_field({"st_rad": None, "ST_RAD": 2.0}, "st_rad"), 2.0)

    def test_missing_or_malformed(self):
        self.assertIsNone(get_field({}, "pl_name"))
        self.assertIsNone(get_field(None, "pl_name"))
        self.assertIsNone(get_field("not a record", "pl_name"))
        self.assertIsNone(get_field([1, 2, 3], "pl_name"))

class TestNumField(unittest.TestCase):

    def test_numeric_values(self):
        self.assertEqual(num_field({"st_rad": 1.2}, "st_rad", 1.0), 1.2)
        self.assertEqual(num_field({"ST_RAD": "0.8"}, "st_rad", 1.0), 0.8)

    def test_fallback(self):
        self.assertEqual(num_field({}, "st_rad", 1.0), 1.0)
        self.assertEqual(num_field({"st_rad": "n/a"}, "st_rad", 1.0), 1.0)
        self.assertEqual(num_field({"st_rad": float('nan')}, "st_rad", 1.0), 1.0)
        self.assertEqual(num_field({"st_rad": float('inf')}, "st_rad", 1.0), 1.0)
        self.assertEqual(num_field(None, "st_rad", 1.0), 1.0)

    def test_optional_num_field(self):
        self.assertIsNone(optional_num_field({"st_mass": ""}, "st_mass"))
        self.assertEqual(optional_num_field({"ST_MASS": 0.9}, "st_mass"), 0.9)

class TestTextField(unittest.TestCase):

    def test_text_field(self):
        self.assertEqual(text_field({"hostname": "TRAPPIST-1"}, "hostname", "Star"), "TRAPPIST-1")
        self.assertEqual(text_field({"hostname": "  "}, "hostname", "Star"), "Star")
        self.assertEqual(text_field({}, "hostname", "Star"), "Star")

class TestCanonicalizeRecord(unittest.TestCase):

    def test_keys_are_lowercased(self):
        canonical = canonicalize_record({"PL_NAME": "b", "St_Rad": 1.1})
        self.assertEqual(canonical, {"pl_name": "b", "st_rad": 1.1})

    def test_lowercase_spelling_wins_regardless_of_order(self):
        self.assertEqual(canonicalize_record({"ST_RAD": 2.0, "st_rad": 1.0})["st_rad"], 1.0)
        self.assertEqual(canonicalize_record({"st_rad": 1.0, "ST_RAD": 2.0})["st_rad"], 1.0)

    def test_nulls_dropped_so_other_spelling_survives(self):
        self.assertEqual(canonicalize_record({"st_rad": None, "ST_RAD": 2.0}), {"st_rad": 2.0})

    def test_exact_uppercase_beats_mixed_case(self):
        self.assertEqual(canonicalize_record({"Pl_Name": "mixed", "PL_NAME": "upper"})["pl_name"], "upper")
        self.assertEqual(canonicalize_record({"PL_NAME": "upper", "Pl_Name": "mixed"})["pl_name"], "upper")
        self.assertEqual(canonicalize_record({"Pl_Name": "mixed", "PL_NAME": "upper", "pl_name": "lower"})["pl_name"], "lower")
        self.assertEqual(canonicalize_record({"Pl_Name": "mixed"})["pl_name"], "mixed")

    def test_non_mapping_yields_empty(self):
        self.assertEqual(canonicalize_record(None), {})
        self.assertEqual(canonicalize_record(["pl_name"]), {})

    def test_input_not_modified(self):
        row = {"PL_NAME": "b"}
        canonicalize_record(row)
        self.assertEqual(row, {"PL_NAME": "b"})

if __name__ == '__main__':
    unittest.main()
