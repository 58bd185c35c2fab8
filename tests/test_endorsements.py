"""
Unit tests for the endorsement cell encoding
"""
from oceo_export.endorsements import decode_endorsements, encode_endorsements


class TestEndorsements:

    def test_round_trip(self):
        cell = encode_endorsements(["A", "B", "C"])
        assert cell == "A*|*B*|*C"
        assert decode_endorsements(cell) == ["A", "B", "C"]

    def test_empty_list(self):
        assert encode_endorsements([]) == ""
        assert encode_endorsements(None) == ""
        assert decode_endorsements("") == []

    def test_single(self):
        assert encode_endorsements(("Tankerman PIC",)) == "Tankerman PIC"

    def test_separator_inside_value_is_not_escaped(self):
        """Known limitation: the separator is not escaped"""
        assert decode_endorsements(encode_endorsements(["A*|*B"])) == ["A", "B"]

    def test_empty_entries_are_dropped(self):
        assert encode_endorsements(("",)) == ""
        assert decode_endorsements(encode_endorsements(["A", "", "B"])) == ["A", "B"]
