"""Tests for the property domain catalog and payload validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from device_hub.domains import (
    check_field,
    domain_names,
    get_domain,
    list_domains,
    validate_command,
    validate_query,
    validate_state,
)
from device_hub.core.models import FieldDef, PropertyDomain


class TestCatalog:
    """Test suite for catalog lookups."""

    def test_water_state_fields(self):
        """Test water domain reports flow, leak and valve state."""
        water = get_domain("water")
        assert water is not None
        assert {"flow_rate", "leak_detected", "valve_open"} <= set(water.state_fields)

    def test_schedule_item_fields(self):
        """Test schedule domain is queryable with event item fields."""
        schedule = get_domain("schedule")
        assert schedule is not None
        assert schedule.is_queryable
        assert {"uid", "start", "end"} <= set(schedule.queryable.item_fields)
        assert {"from", "to"} <= set(schedule.queryable.params)

    def test_unknown_domain_returns_none(self):
        """Test lookup of an unknown name."""
        assert get_domain("teleportation") is None

    def test_catalog_order_and_names(self):
        """Test listing is stable and names are unique."""
        names = domain_names()
        assert names[0] == "illumination"
        assert len(names) == len(set(names))
        assert [d.name for d in list_domains()] == names
        assert {"occupancy", "weather", "air_quality"} <= set(names)

    def test_read_only_domains(self):
        """Test occupancy and weather accept no commands."""
        assert get_domain("occupancy").is_read_only
        assert get_domain("weather").is_read_only
        assert not get_domain("water").is_read_only

    def test_weather_is_queryable(self):
        """Test weather exposes a forecast range query."""
        weather = get_domain("weather")
        assert weather.is_queryable
        assert "granularity" in weather.queryable.params
        assert "temperature" in weather.queryable.item_fields

    def test_domains_are_frozen(self):
        """Test domain definitions cannot be reassigned."""
        water = get_domain("water")
        with pytest.raises(ValidationError):
            water.name = "sewage"

    def test_field_maps_are_read_only(self):
        """Test a domain's field maps reject mutation."""
        water = get_domain("water")
        with pytest.raises(TypeError):
            water.state_fields["injected"] = FieldDef(type="boolean")
        with pytest.raises(AttributeError):
            water.command_fields.clear()
        assert "injected" not in get_domain("water").state_fields
        assert get_domain("water").command_fields

    def test_query_maps_are_read_only(self):
        """Test queryable params and item fields reject mutation."""
        schedule = get_domain("schedule")
        with pytest.raises(TypeError):
            schedule.queryable.item_fields["uid"] = FieldDef(type="number")
        with pytest.raises(TypeError):
            del schedule.queryable.params["from"]
        assert "from" in get_domain("schedule").queryable.params

    def test_source_dict_not_shared(self):
        """Test later changes to the input dict do not leak into a built domain."""
        fields = {"level": FieldDef(type="number")}
        domain = PropertyDomain(name="custom", display_name="Custom", state_fields=fields)
        fields["extra"] = FieldDef(type="string")
        assert set(domain.state_fields) == {"level"}

    def test_list_is_a_copy(self):
        """Test mutating the returned list does not touch the catalog."""
        domains = list_domains()
        domains.clear()
        assert len(list_domains()) == len(domain_names())


class TestCheckField:
    """Test suite for single-field checks."""

    def test_boolean_rejects_number(self):
        assert check_field("on", FieldDef(type="boolean"), 1) == ["on: expected boolean, got int"]

    def test_number_rejects_boolean(self):
        errors = check_field("brightness", FieldDef(type="number"), True)
        assert errors == ["brightness: expected number, got bool"]

    def test_number_bounds(self):
        field = FieldDef(type="number", min=0, max=100)
        assert check_field("brightness", field, 50) == []
        assert check_field("brightness", field, 101) == ["brightness: 101 is above maximum 100"]
        assert check_field("brightness", field, -1) == ["brightness: -1 is below minimum 0"]

    def test_enumeration(self):
        field = FieldDef(type="string", values=("heat", "cool"))
        assert check_field("mode", field, "heat") == []
        assert check_field("mode", field, "boil") == ["mode: 'boil' is not one of heat, cool"]

    def test_object(self):
        assert check_field("color", FieldDef(type="object"), {"h": 10, "s": 50}) == []
        assert check_field("color", FieldDef(type="object"), "red")


class TestValidateState:
    """Test suite for state snapshot validation."""

    def test_valid_state(self):
        water = get_domain("water")
        assert validate_state(water, {"valve_open": True, "flow_rate": 2.5}) == []

    def test_extra_fields_tolerated(self):
        water = get_domain("water")
        assert validate_state(water, {"valve_open": True, "vendor_code": "X1"}) == []

    def test_none_means_unknown(self):
        water = get_domain("water")
        assert validate_state(water, {"flow_rate": None}) == []

    def test_wrong_type(self):
        water = get_domain("water")
        assert validate_state(water, {"leak_detected": "yes"}) == [
            "leak_detected: expected boolean, got str"
        ]

    def test_non_mapping(self):
        water = get_domain("water")
        assert validate_state(water, ["valve_open"]) == ["payload: expected object, got list"]


class TestValidateCommand:
    """Test suite for command payload validation."""

    def test_valid_command(self):
        light = get_domain("illumination")
        assert validate_command(light, {"on": True, "brightness": 40}) == []

    def test_unknown_field_rejected(self):
        water = get_domain("water")
        assert validate_command(water, {"flow_rate": 3}) == ["flow_rate: unknown field"]

    def test_out_of_range(self):
        light = get_domain("illumination")
        assert validate_command(light, {"brightness": 150}) == [
            "brightness: 150 is above maximum 100"
        ]

    def test_enumerated_mode(self):
        climate = get_domain("climate")
        assert validate_command(climate, {"mode": "auto"}) == []
        assert validate_command(climate, {"mode": "turbo"})

    def test_read_only_domain(self):
        occupancy = get_domain("occupancy")
        assert validate_command(occupancy, {"occupied": True}) == [
            "occupancy: domain is read-only and accepts no commands"
        ]
        assert validate_command(occupancy, {}) == []


class TestValidateQuery:
    """Test suite for range query validation."""

    def test_valid_range(self):
        schedule = get_domain("schedule")
        assert validate_query(schedule, {"from": 0, "to": 1000}) == []

    def test_inverted_range(self):
        schedule = get_domain("schedule")
        assert validate_query(schedule, {"from": 2000, "to": 1000}) == [
            "from: range start is after range end"
        ]

    def test_unknown_param(self):
        schedule = get_domain("schedule")
        assert validate_query(schedule, {"limit": 5}) == ["limit: unknown field"]

    def test_granularity_values(self):
        weather = get_domain("weather")
        assert validate_query(weather, {"granularity": "daily"}) == []
        assert validate_query(weather, {"granularity": "weekly"})

    def test_not_queryable(self):
        water = get_domain("water")
        assert validate_query(water, {}) == ["water: domain does not support range queries"]
