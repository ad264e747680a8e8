"""
Tests for the domain models and converters

Tests strict integer parsing, HutRecord construction from split rows and
the altitude fallback of MountainHut.
"""
import dataclasses

import pytest

from domain import HutRecord, MountainHut, Municipality, ParseError
from domain.converters import parse_int, parse_optional_int


class TestParseInt:
    def test_trims_whitespace(self):
        assert parse_int(" 42 ", "BedsNumber") == 42

    def test_invalid_value_names_field_and_line(self):
        with pytest.raises(ParseError) as exc_info:
            parse_int("many", "BedsNumber", line_number=7)
        err = exc_info.value
        assert err.field == "BedsNumber"
        assert err.value == "many"
        assert err.line_number == 7
        assert "line 7" in str(err)

    def test_empty_value_raises(self):
        with pytest.raises(ParseError):
            parse_int("", "MunicipalityAltitude")

    def test_none_raises(self):
        with pytest.raises(ParseError):
            parse_int(None, "MunicipalityAltitude")

    def test_digit_grouping_underscore_raises(self):
        with pytest.raises(ParseError) as exc_info:
            parse_int("1_000", "BedsNumber", line_number=2)
        assert exc_info.value.value == "1_000"


class TestParseOptionalInt:
    def test_empty_is_none(self):
        assert parse_optional_int("", "Altitude") is None
        assert parse_optional_int("   ", "Altitude") is None
        assert parse_optional_int(None, "Altitude") is None

    def test_zero_is_not_none(self):
        assert parse_optional_int("0", "Altitude") == 0

    def test_present_but_invalid_raises(self):
        with pytest.raises(ParseError):
            parse_optional_int("high", "Altitude")


class TestHutRecord:
    def test_from_fields(self):
        fields = "CN;Acceglio;1200;Rifugio Campo Base;1650;Rifugio alpino;40".split(";")
        record = HutRecord.from_fields(fields, line_number=2)
        assert record == HutRecord(
            province="CN",
            municipality_name="Acceglio",
            municipality_altitude=1200,
            hut_name="Rifugio Campo Base",
            hut_altitude=1650,
            category="Rifugio alpino",
            beds_number=40,
        )

    def test_empty_altitude_is_none(self):
        fields = "TO;Ceresole Reale;1612;Bivacco Leonessa;;Bivacco fisso;9".split(";")
        assert HutRecord.from_fields(fields).hut_altitude is None

    def test_short_row_raises(self):
        with pytest.raises(ParseError) as exc_info:
            HutRecord.from_fields(["CN", "Acceglio", "1200"], line_number=4)
        assert exc_info.value.line_number == 4

    def test_bad_beds_raises(self):
        fields = "CN;Acceglio;1200;Rifugio;1650;Rifugio alpino;n/a".split(";")
        with pytest.raises(ParseError, match="BedsNumber"):
            HutRecord.from_fields(fields, line_number=3)

    def test_bad_municipality_altitude_raises(self):
        fields = "CN;Acceglio;high;Rifugio;1650;Rifugio alpino;10".split(";")
        with pytest.raises(ParseError, match="MunicipalityAltitude"):
            HutRecord.from_fields(fields)

    def test_underscored_beds_rejected_on_load(self):
        from facades import Region

        lines = ["Province;Municipality;MunicipalityAltitude;Name;Altitude;Category;BedsNumber",
                 "CN;Acceglio;1200;Rifugio;;Rifugio alpino;1_000"]
        with pytest.raises(ParseError, match="BedsNumber"):
            Region.from_lines("Piemonte", lines)

    def test_underscored_hut_altitude_raises(self):
        fields = "CN;Acceglio;1200;Rifugio;2_100;Rifugio alpino;10".split(";")
        with pytest.raises(ParseError, match="Altitude"):
            HutRecord.from_fields(fields)


class TestMountainHut:
    def setup_method(self):
        self.municipality = Municipality(name="Acceglio", province="CN", altitude=1200)

    def test_effective_altitude_uses_own_altitude(self):
        hut = MountainHut("Rifugio", "Rifugio alpino", 20, self.municipality, altitude=2000)
        assert hut.effective_altitude == 2000

    def test_effective_altitude_falls_back_to_municipality(self):
        hut = MountainHut("Bivacco", "Bivacco fisso", 9, self.municipality)
        assert hut.altitude is None
        assert hut.effective_altitude == 1200

    def test_zero_altitude_is_kept(self):
        hut = MountainHut("Sea level", "Rifugio", 4, self.municipality, altitude=0)
        assert hut.effective_altitude == 0

    def test_province_comes_from_municipality(self):
        hut = MountainHut("Rifugio", "Rifugio alpino", 20, self.municipality)
        assert hut.province == "CN"

    def test_entities_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            self.municipality.altitude = 0
