"""Tests for JSON input parsing."""

import json

import pytest

from carriage.models import CarrierCategory, Dimensions, InvalidParameter, ReasonCode
from carriage.utils.parser import as_dimensions, load_json_file, parse_carrier, parse_json_input

TRUCK = {
    "name": "Truck", "category": "standard", "weight": 8,
    "dimensions": [10, 2.5, 3], "max_weight": 20,
    "max_dimensions": {"length": 8, "width": 2.4, "height": 2.6},
}


class TestAsDimensions:
    def test_list(self):
        assert as_dimensions([1, 2, 3]) == Dimensions(1, 2, 3)

    def test_mapping(self):
        assert as_dimensions({"height": 3, "length": 1, "width": 2}) == Dimensions(1, 2, 3)

    def test_passthrough(self):
        d = Dimensions(1, 1, 1)
        assert as_dimensions(d) is d

    @pytest.mark.parametrize("value", [[1, 2], {"length": 1, "width": 2}, "1x2x3", 5, None])
    def test_malformed(self, value):
        with pytest.raises(InvalidParameter) as exc_info:
            as_dimensions(value, "max_dimensions")
        assert exc_info.value.reason is ReasonCode.INVALID_DIMENSIONS
        assert exc_info.value.field == "max_dimensions"

    def test_non_positive_axis(self):
        with pytest.raises(InvalidParameter) as exc_info:
            as_dimensions([1, 0, 1])
        assert exc_info.value.reason is ReasonCode.NON_POSITIVE_DIMENSION


class TestParseCarrier:
    def test_explicit_entry(self):
        truck = parse_carrier(TRUCK)
        assert truck.name == "Truck"
        assert truck.category is CarrierCategory.STANDARD
        assert truck.max_dimensions == Dimensions(8, 2.4, 2.6)

    def test_compartments(self):
        entry = dict(TRUCK, category="compartmented", compartments=2,
                     compartment_axis="height")
        carrier = parse_carrier(entry)
        assert carrier.compartments == 2
        assert carrier.compartment_axis == "height"

    def test_catalogue_entry(self):
        wagon = parse_carrier({"kind": "wagon", "weight": 9, "dimensions": [12, 2.55, 4],
                               "max_trailer_weight": 20,
                               "max_trailer_dimensions": [13.6, 2.48, 2.7]})
        assert wagon.name == "Wagon"
        assert wagon.max_dimensions == Dimensions(13.6, 2.48, 2.7)

    @pytest.mark.parametrize("missing", ["name", "category", "weight", "max_dimensions"])
    def test_missing_field(self, missing):
        entry = {k: v for k, v in TRUCK.items() if k != missing}
        with pytest.raises(InvalidParameter) as exc_info:
            parse_carrier(entry)
        assert exc_info.value.reason is ReasonCode.MISSING_FIELD
        assert exc_info.value.field == missing

    def test_unknown_category(self):
        with pytest.raises(InvalidParameter) as exc_info:
            parse_carrier(dict(TRUCK, category="teleporter"))
        assert exc_info.value.reason is ReasonCode.UNKNOWN_CATEGORY

    def test_not_an_object(self):
        with pytest.raises(InvalidParameter):
            parse_carrier(["Truck"])


class TestParseJsonInput:
    def test_cargo_defaults_to_carriers(self):
        carriers, cargo = parse_json_input({"carriers": [TRUCK, {"kind": "tardis"}]})
        assert [c.name for c in carriers] == ["Truck", "Tardis"]
        assert cargo == carriers

    def test_separate_cargo(self):
        carriers, cargo = parse_json_input({
            "carriers": [TRUCK],
            "cargo": [{"kind": "bicycle", "weight": 0.015, "dimensions": [1.8, 0.6, 1.1]}],
        })
        assert len(carriers) == 1
        assert cargo[0].name == "Bicycle"

    def test_missing_carriers(self):
        with pytest.raises(InvalidParameter) as exc_info:
            parse_json_input({"cargo": []})
        assert exc_info.value.reason is ReasonCode.MISSING_FIELD
        assert exc_info.value.field == "carriers"

    def test_not_an_object(self):
        with pytest.raises(InvalidParameter):
            parse_json_input([TRUCK])

    @pytest.mark.parametrize("field", ["carriers", "cargo"])
    @pytest.mark.parametrize("value", [5, None, "Truck", {"kind": "tardis"}])
    def test_entries_must_be_a_list(self, field, value):
        data = {"carriers": [TRUCK], field: value}
        with pytest.raises(InvalidParameter) as exc_info:
            parse_json_input(data)
        assert exc_info.value.reason is ReasonCode.MISSING_FIELD
        assert exc_info.value.field == field
        assert exc_info.value.value == value

    def test_unexpected_catalogue_field(self):
        with pytest.raises(InvalidParameter) as exc_info:
            parse_carrier({"kind": "bicycle", "name": "X", "weight": 0.01,
                           "dimensions": [1, 1, 1]})
        assert exc_info.value.reason is ReasonCode.UNEXPECTED_FIELD


def test_load_json_file(tmp_path):
    path = tmp_path / "fleet.json"
    path.write_text(json.dumps({"carriers": [TRUCK]}), encoding="utf-8")
    data = load_json_file(str(path))
    assert data["carriers"][0]["name"] == "Truck"


def test_sample_file_parses(sample_path):
    carriers, cargo = parse_json_input(load_json_file(sample_path))
    assert len(carriers) == 11
    assert {c.category for c in carriers} >= {
        CarrierCategory.NO_STORAGE, CarrierCategory.UNBOUNDED,
        CarrierCategory.COMPARTMENTED, CarrierCategory.DECK_AND_HOLD,
        CarrierCategory.ROOF, CarrierCategory.HULL, CarrierCategory.STANDARD,
    }
