from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from app.domain.device import Device
from app.domain.exceptions import ConfigurationError
from app.schemas.household import DeviceSeed, EnergyPlanSeed, HouseholdSeed


def _write(tmp_path, payload, name="household.json"):
    path = tmp_path / name
    path.write_text(json.dumps(payload) if not isinstance(payload, str) else payload, encoding="utf-8")
    return path


class TestDeviceSeed:
    def test_to_domain(self):
        seed = DeviceSeed(id=4, name="Oven", is_on=True, power_usage_watts=2400)

        assert seed.to_domain() == Device(id=4, name="Oven", is_on=True, power_usage_watts=2400.0)

    @pytest.mark.parametrize(
        "payload",
        [
            {"id": 0},
            {"id": 1, "power_usage_watts": -1},
            {"id": 1, "colour": "red"},
        ],
    )
    def test_invalid_devices_rejected(self, payload):
        with pytest.raises(ValidationError):
            DeviceSeed.model_validate(payload)


class TestEnergyPlanSeed:
    def test_negative_limit_rejected(self):
        with pytest.raises(ValidationError):
            EnergyPlanSeed(daily_limit_kwh=-0.5)

    def test_to_domain(self):
        assert EnergyPlanSeed(daily_limit_kwh=0).to_domain().daily_limit_kwh == 0.0


class TestHouseholdSeed:
    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate device id 1"):
            HouseholdSeed.model_validate({"devices": [{"id": 1}, {"id": 1}]})

    def test_plan_is_optional(self):
        seed = HouseholdSeed.model_validate({"devices": [{"id": 1}]})

        assert seed.plan is None
        assert len(seed.devices) == 1

    def test_from_file(self, tmp_path):
        path = _write(
            tmp_path,
            {
                "devices": [{"id": 1, "name": "Heater", "is_on": True, "power_usage_watts": 2000}],
                "plan": {"daily_limit_kwh": 10},
            },
        )

        seed = HouseholdSeed.from_file(str(path))

        assert seed.devices[0].name == "Heater"
        assert seed.plan.daily_limit_kwh == 10.0

    def test_missing_file_raises_configuration_error(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read household seed"):
            HouseholdSeed.from_file(str(tmp_path / "absent.json"))

    def test_malformed_json_raises_configuration_error(self, tmp_path):
        path = _write(tmp_path, "{not json")

        with pytest.raises(ConfigurationError, match="Invalid household seed"):
            HouseholdSeed.from_file(str(path))

    def test_schema_violation_raises_configuration_error(self, tmp_path):
        path = _write(tmp_path, {"plan": {"daily_limit_kwh": -3}})

        with pytest.raises(ConfigurationError) as excinfo:
            HouseholdSeed.from_file(str(path))

        assert "daily_limit_kwh" in excinfo.value.detail["error"]
