"""
Tests for SuburbGazetteer

Tests the bundled dataset, state listing, suburb/postcode resolution and
CSV loading.
"""
import os
import tempfile

import pytest

from src.realestate_directory.geo.gazetteer import SuburbGazetteer
from src.realestate_directory.models.enums import AU_STATES
from src.realestate_directory.models.location import SuburbRecord


@pytest.fixture
def gazetteer():
    return SuburbGazetteer.default()


class TestDefaultDataset:
    """Tests for the bundled Australian suburb list"""

    def test_has_25_suburbs(self, gazetteer):
        assert len(gazetteer) == 25

    def test_covers_every_state(self, gazetteer):
        """Test each of the 8 states and territories has suburbs"""
        assert {record.state.value for record in gazetteer} == set(AU_STATES)

    def test_every_record_has_coordinates(self, gazetteer):
        assert all(record.has_coordinates() for record in gazetteer)

    def test_nt_postcodes_keep_leading_zero(self, gazetteer):
        darwin = gazetteer.find_by_suburb_or_postcode("Darwin")
        assert darwin.postcode == "0800"


class TestListByState:
    """Tests for list_by_state"""

    def test_no_state_returns_everything(self, gazetteer):
        assert gazetteer.list_by_state() == list(gazetteer.records)
        assert gazetteer.list_by_state("") == list(gazetteer.records)

    def test_state_filter(self, gazetteer):
        """Test only the requested state comes back, in dataset order"""
        suburbs = [record.suburb for record in gazetteer.list_by_state("TAS")]
        assert suburbs == ["Hobart", "Launceston"]

    def test_state_filter_case_insensitive(self, gazetteer):
        assert len(gazetteer.list_by_state("wa")) == 3

    def test_unknown_state_is_empty(self, gazetteer):
        assert gazetteer.list_by_state("ZZ") == []


class TestFindBySuburbOrPostcode:
    """Tests for find_by_suburb_or_postcode"""

    def test_name_case_insensitive(self, gazetteer):
        record = gazetteer.find_by_suburb_or_postcode("  st kilda ")
        assert record.suburb == "St Kilda"

    def test_postcode(self, gazetteer):
        assert gazetteer.find_by_suburb_or_postcode("6160").suburb == "Fremantle"

    def test_not_found(self, gazetteer):
        assert gazetteer.find_by_suburb_or_postcode("Atlantis") is None

    def test_blank_is_none(self, gazetteer):
        assert gazetteer.find_by_suburb_or_postcode("   ") is None
        assert gazetteer.find_by_suburb_or_postcode(None) is None

    def test_partial_name_does_not_match(self, gazetteer):
        """Test lookups are exact, not substring"""
        assert gazetteer.find_by_suburb_or_postcode("Syd") is None

    def test_first_record_wins(self):
        """Test dataset order breaks ties between equal names"""
        gazetteer = SuburbGazetteer([
            SuburbRecord(suburb="Richmond", postcode="3121", state="VIC"),
            SuburbRecord(suburb="Richmond", postcode="2753", state="NSW"),
        ])
        assert gazetteer.find_by_suburb_or_postcode("richmond").postcode == "3121"

    def test_name_beats_postcode(self):
        """Test a suburb-name match is preferred over an earlier postcode match"""
        gazetteer = SuburbGazetteer([
            SuburbRecord(suburb="Alpha", postcode="1234", state="NSW"),
            SuburbRecord(suburb="1234", postcode="9999", state="NSW"),
        ])
        assert gazetteer.find_by_suburb_or_postcode("1234").suburb == "1234"


class TestFromCsv:
    """Tests for loading a gazetteer from CSV"""

    def _write_csv(self, content):
        handle, path = tempfile.mkstemp(suffix=".csv")
        with os.fdopen(handle, "w") as f:
            f.write(content)
        return path

    def test_load_csv(self):
        """Test rows load in order with padded postcodes and optional coordinates"""
        path = self._write_csv(
            "suburb,postcode,state,latitude,longitude\n"
            "Darwin,800,NT,-12.4634,130.8456\n"
            ",2000,NSW,,\n"
            "Manly,2095,nsw,,\n"
        )
        try:
            gazetteer = SuburbGazetteer.from_csv(path)
        finally:
            os.remove(path)

        assert [record.suburb for record in gazetteer] == ["Darwin", "Manly"]
        darwin, manly = gazetteer.records
        assert darwin.postcode == "0800"
        assert darwin.has_coordinates()
        assert manly.state.value == "NSW"
        assert not manly.has_coordinates()

    def test_missing_columns_raise(self):
        path = self._write_csv("suburb,state\nSydney,NSW\n")
        try:
            with pytest.raises(ValueError, match="postcode"):
                SuburbGazetteer.from_csv(path)
        finally:
            os.remove(path)
