"""
Тесты для тестовых фабрик

Проверяет:
1. Создание и растворение Balance/Supply в обход учёта
2. Отделённость тестовых фабрик от production-модулей
"""

from pathlib import Path

import pytest

from src.core.domain import ConsumedValueError, audit_conservation
from src.core.math import U64_MAX
from src.testing import (
    create_for_testing,
    create_supply_for_testing,
    destroy_for_testing,
    destroy_supply_for_testing,
)

SRC_ROOT = Path(__file__).resolve().parents[2] / "src"


class Gold:
    """Тег актива для тестов"""


class TestFactories:
    """Тесты фабрик"""

    def test_create_and_destroy_balance(self) -> None:
        b = create_for_testing(Gold, 42)
        assert b.value == 42
        assert destroy_for_testing(b) == 42
        assert b.consumed

    def test_create_rejects_non_u64(self) -> None:
        with pytest.raises(ValueError):
            create_for_testing(Gold, U64_MAX + 1)

    def test_destroy_twice_faults(self) -> None:
        b = create_for_testing(Gold, 1)
        destroy_for_testing(b)
        with pytest.raises(ConsumedValueError):
            destroy_for_testing(b)

    def test_supply_without_witness(self) -> None:
        supply = create_supply_for_testing(Gold)
        assert supply.value == 0
        assert supply.asset is Gold

        b = supply.increase_supply(9)
        audit_conservation(supply, [b]).require()
        supply.decrease_supply(b)

    def test_destroy_supply_returns_last_value(self) -> None:
        supply = create_supply_for_testing(Gold)
        b = supply.increase_supply(9)

        assert destroy_supply_for_testing(supply) == 9
        with pytest.raises(ConsumedValueError):
            destroy_supply_for_testing(supply)
        destroy_for_testing(b)


class TestPartition:
    """Production-модули не зависят от src.testing"""

    @pytest.mark.parametrize("package", ["core", "system"])
    def test_production_code_does_not_import_testing(self, package: str) -> None:
        for path in (SRC_ROOT / package).rglob("*.py"):
            source = path.read_text(encoding="utf-8")
            assert "src.testing" not in source, path
