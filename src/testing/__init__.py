"""
Test-only helpers.

Не входят в production интерфейс: фабрики и деструкторы в обход
учёта эмиссии для сборки тестовых фикстур и контексты транзакций
с произвольным отправителем.
"""

from .fixtures import (
    create_for_testing,
    create_supply_for_testing,
    destroy_for_testing,
    destroy_supply_for_testing,
    tx_context_for_testing,
)

__all__ = [
    "create_for_testing",
    "destroy_for_testing",
    "create_supply_for_testing",
    "destroy_supply_for_testing",
    "tx_context_for_testing",
]
