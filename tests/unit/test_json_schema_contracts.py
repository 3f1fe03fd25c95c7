"""
Тесты для JSON Schema контрактов

Проверяет:
1. Загрузку и meta-validation схем
2. Соответствие снапшотов Balance/Supply и отчёта аудита схемам
3. Отклонение невалидных данных
"""

from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    ContractValidator,
    SchemaLoader,
    validate_balance_snapshot,
    validate_conservation_report,
    validate_supply_snapshot,
)
from src.core.domain import audit_conservation, create_supply
from src.core.math import U64_MAX
from src.testing import create_for_testing, destroy_for_testing


class Gold:
    """Тег актива для тестов"""


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты для SchemaLoader"""

    def test_load_known_schemas(self) -> None:
        loader = SchemaLoader()
        for name in ("balance_snapshot", "supply_snapshot", "conservation_report"):
            schema = loader.load_schema(name)
            assert schema["title"] == name

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("balance_snapshot") is loader.load_schema("balance_snapshot")

    def test_unknown_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# SNAPSHOTS
# =============================================================================


class TestBalanceSnapshot:
    """Тесты balance_snapshot"""

    def test_live_balance_snapshot_valid(self) -> None:
        b = create_for_testing(Gold, U64_MAX)
        validate_balance_snapshot(b.snapshot())
        assert ContractValidator("balance_snapshot").is_valid(b.snapshot())
        destroy_for_testing(b)

    @pytest.mark.parametrize(
        "data",
        [
            {"asset": "mod::Gold", "value": -1},
            {"asset": "mod::Gold", "value": U64_MAX + 1},
            {"asset": "mod::Gold", "value": 1.5},
            {"asset": "Gold", "value": 1},
            {"asset": "mod::Gold"},
            {"asset": "mod::Gold", "value": 1, "extra": True},
        ],
    )
    def test_invalid_snapshot_rejected(self, data: dict) -> None:
        with pytest.raises(ValidationError):
            validate_balance_snapshot(data)

    def test_iter_errors_reports_all(self) -> None:
        errors = list(ContractValidator("balance_snapshot").iter_errors({"value": -1}))
        assert len(errors) >= 2


class TestSupplySnapshot:
    """Тесты supply_snapshot"""

    def test_supply_snapshot_valid(self) -> None:
        supply = create_supply(Gold())
        b = supply.increase_supply(123)

        data = supply.snapshot()
        validate_supply_snapshot(data)
        assert data["value"] == 123
        assert ContractValidator("supply_snapshot").is_valid(data)
        supply.decrease_supply(b)


class TestConservationReportContract:
    """Тесты conservation_report"""

    def test_report_valid(self) -> None:
        supply = create_supply(Gold())
        b = supply.increase_supply(10)
        forged = create_for_testing(Gold, 3)

        data = audit_conservation(supply, [b, forged]).to_contract()

        validate_conservation_report(data)
        assert data["balanced"] is False
        assert data["discrepancy"] == 3
        destroy_for_testing(forged)
        supply.decrease_supply(b)

    def test_missing_derived_field_rejected(self) -> None:
        supply = create_supply(Gold())
        data = audit_conservation(supply, []).to_contract()
        del data["balanced"]
        assert not ContractValidator("conservation_report").is_valid(data)
