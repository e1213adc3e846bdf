"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Интеграция с Pydantic моделями (model_dump → load_*)
"""

import json

import pytest
from jsonschema import Draft202012Validator, ValidationError

from jalali.core.contracts import (
    SCHEMA_DIR,
    JalaliDateTimeValidator,
    JalaliDateValidator,
    SchemaLoader,
    ZonedJalaliDateTimeValidator,
    load_jalali_date,
    load_jalali_date_time,
    load_zoned_jalali_date_time,
    validate_jalali_date,
    validate_jalali_date_time,
    validate_zoned_jalali_date_time,
)
from jalali.core.domain import (
    InvalidArgument,
    InvalidDate,
    JalaliDate,
    JalaliDateTime,
    ZonedJalaliDateTime,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_jalali_date():
    """Валидный jalali_date payload."""
    return {"year": 1403, "month": 12, "day": 30}


@pytest.fixture
def valid_jalali_date_time():
    """Валидный jalali_date_time payload."""
    return {
        "date": {"year": 1401, "month": 6, "day": 31},
        "hour": 23,
        "minute": 59,
        "second": 59,
        "nanosecond": 999_999_999,
    }


@pytest.fixture
def valid_zoned_jalali_date_time(valid_jalali_date_time):
    """Валидный zoned_jalali_date_time payload."""
    return {"date_time": valid_jalali_date_time, "zone": "Asia/Tehran"}


# =============================================================================
# ТЕСТЫ: Загрузка схем
# =============================================================================


class TestSchemaLoader:
    """Загрузка и meta-validation схем."""

    @pytest.mark.parametrize("name", ["jalali_date", "jalali_date_time", "zoned_jalali_date_time"])
    def test_schemas_are_valid(self, name):
        schema = SchemaLoader().load_schema(name)
        Draft202012Validator.check_schema(schema)
        assert (SCHEMA_DIR / f"{name}.json").exists()

    def test_cache(self):
        loader = SchemaLoader()
        assert loader.load_schema("jalali_date") is loader.load_schema("jalali_date")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("gregorian_date")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        loader = SchemaLoader(tmp_path)
        assert loader.schema_dir == tmp_path
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            loader.load_schema("broken")


# =============================================================================
# ТЕСТЫ: jalali_date
# =============================================================================


class TestJalaliDateContract:
    """Контракт jalali_date."""

    def test_valid(self, valid_jalali_date):
        validate_jalali_date(valid_jalali_date)
        assert JalaliDateValidator().is_valid(valid_jalali_date)

    @pytest.mark.parametrize("field", ["year", "month", "day"])
    def test_missing_required(self, valid_jalali_date, field):
        del valid_jalali_date[field]
        with pytest.raises(ValidationError):
            validate_jalali_date(valid_jalali_date)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("year", 0),
            ("year", 9378),
            ("month", 13),
            ("day", 32),
            ("month", "12"),
            ("day", 1.5),
        ],
    )
    def test_constraint_violation(self, valid_jalali_date, field, value):
        valid_jalali_date[field] = value
        with pytest.raises(ValidationError):
            validate_jalali_date(valid_jalali_date)

    def test_day_31_in_second_half(self):
        validate_jalali_date({"year": 1402, "month": 6, "day": 31})
        with pytest.raises(ValidationError):
            validate_jalali_date({"year": 1402, "month": 7, "day": 31})

    def test_additional_properties(self, valid_jalali_date):
        valid_jalali_date["calendar"] = "jalali"
        with pytest.raises(ValidationError):
            validate_jalali_date(valid_jalali_date)

    def test_iter_errors(self):
        errors = list(JalaliDateValidator().iter_errors({"year": 0, "month": 13}))
        assert len(errors) == 3  # year minimum, month maximum, day required

    def test_load(self, valid_jalali_date):
        assert load_jalali_date(valid_jalali_date) == JalaliDate.of(1403, 12, 30)

    def test_load_rejects_30_esfand_of_common_year(self):
        """Схема допускает day=30, модель отвергает в невисокосный год."""
        payload = {"year": 1402, "month": 12, "day": 30}
        validate_jalali_date(payload)
        with pytest.raises(InvalidDate):
            load_jalali_date(payload)

    def test_model_dump_round_trip(self):
        d = JalaliDate.of(1401, 6, 31)
        payload = d.model_dump()
        validate_jalali_date(payload)
        assert load_jalali_date(payload) == d


# =============================================================================
# ТЕСТЫ: jalali_date_time
# =============================================================================


class TestJalaliDateTimeContract:
    """Контракт jalali_date_time."""

    def test_valid(self, valid_jalali_date_time):
        validate_jalali_date_time(valid_jalali_date_time)
        assert JalaliDateTimeValidator().is_valid(valid_jalali_date_time)

    @pytest.mark.parametrize(
        "field,value",
        [("hour", 24), ("minute", 60), ("second", -1), ("nanosecond", 10**9)],
    )
    def test_time_constraint_violation(self, valid_jalali_date_time, field, value):
        valid_jalali_date_time[field] = value
        with pytest.raises(ValidationError):
            validate_jalali_date_time(valid_jalali_date_time)

    def test_nested_date_violation(self, valid_jalali_date_time):
        valid_jalali_date_time["date"]["month"] = 0
        with pytest.raises(ValidationError):
            validate_jalali_date_time(valid_jalali_date_time)

    def test_load(self, valid_jalali_date_time):
        dt = load_jalali_date_time(valid_jalali_date_time)
        assert dt == JalaliDateTime.of(1401, 6, 31, 23, 59, 59, 999_999_999)

    def test_model_dump_round_trip(self):
        dt = JalaliDateTime.of(1403, 12, 30, 6, 7, 8, 9)
        assert load_jalali_date_time(dt.model_dump()) == dt


# =============================================================================
# ТЕСТЫ: zoned_jalali_date_time
# =============================================================================


class TestZonedJalaliDateTimeContract:
    """Контракт zoned_jalali_date_time."""

    def test_valid(self, valid_zoned_jalali_date_time):
        validate_zoned_jalali_date_time(valid_zoned_jalali_date_time)
        assert ZonedJalaliDateTimeValidator().is_valid(valid_zoned_jalali_date_time)

    @pytest.mark.parametrize("zone", ["UTC", "UTC+03:30", "UTC-05:00", "America/Argentina/Buenos_Aires"])
    def test_zone_forms(self, valid_zoned_jalali_date_time, zone):
        valid_zoned_jalali_date_time["zone"] = zone
        validate_zoned_jalali_date_time(valid_zoned_jalali_date_time)

    @pytest.mark.parametrize("zone", ["", "not a zone", "UTC+3:30", 330, "UTC+03:75", "UTC+24:00"])
    def test_malformed_zone(self, valid_zoned_jalali_date_time, zone):
        valid_zoned_jalali_date_time["zone"] = zone
        with pytest.raises(ValidationError):
            validate_zoned_jalali_date_time(valid_zoned_jalali_date_time)

    def test_missing_zone(self, valid_zoned_jalali_date_time):
        del valid_zoned_jalali_date_time["zone"]
        with pytest.raises(ValidationError):
            validate_zoned_jalali_date_time(valid_zoned_jalali_date_time)

    def test_load(self, valid_zoned_jalali_date_time):
        zoned = load_zoned_jalali_date_time(valid_zoned_jalali_date_time)
        assert zoned.date_time == JalaliDateTime.of(1401, 6, 31, 23, 59, 59, 999_999_999)
        assert str(zoned).endswith("[Asia/Tehran]")

    def test_load_unknown_zone(self, valid_zoned_jalali_date_time):
        """Ключ корректной формы, но неизвестный zoneinfo."""
        valid_zoned_jalali_date_time["zone"] = "Mars/Olympus"
        validate_zoned_jalali_date_time(valid_zoned_jalali_date_time)
        with pytest.raises(InvalidArgument):
            load_zoned_jalali_date_time(valid_zoned_jalali_date_time)

    @pytest.mark.parametrize("zone", ["Asia/Tehran", "UTC", "UTC+03:30"])
    def test_model_dump_round_trip(self, zone):
        zoned = ZonedJalaliDateTime.of(1403, 1, 1, 12, 0, 0, 5, zone=zone)
        payload = zoned.model_dump(mode="json")
        validate_zoned_jalali_date_time(payload)
        assert load_zoned_jalali_date_time(payload) == zoned
