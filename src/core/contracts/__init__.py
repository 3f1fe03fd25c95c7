"""
Contract Validation Module

Модуль для валидации JSON снапшотов Balance, Supply и отчётов аудита.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    validate_balance_snapshot,
    validate_conservation_report,
    validate_supply_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "validate_balance_snapshot",
    "validate_supply_snapshot",
    "validate_conservation_report",
]
