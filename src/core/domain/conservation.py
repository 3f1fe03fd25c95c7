"""
Conservation — аудит инварианта сохранения стоимости

Для актива T в любой точке наблюдения:

    sum(живые Balance[T].value) + storage_rebates_destroyed
        == Supply[T].value + staking_rewards_issued

Системный путь вознаграждений добавляет стоимость мимо Supply,
путь возврата storage rebates удаляет её мимо Supply. Без системного
пути инвариант сводится к sum(balances) == supply.value.
"""

from typing import Any, Dict, Iterable, Optional, Protocol

from pydantic import BaseModel, Field

from .asset import ensure_same_asset
from .balance import Balance
from .errors import ConservationError
from .supply import Supply


class BypassTally(Protocol):
    """Источник учёта системного пути (например, SystemCapability)."""

    @property
    def staking_rewards_issued(self) -> int: ...

    @property
    def storage_rebates_destroyed(self) -> int: ...


class ConservationReport(BaseModel):
    """
    Результат аудита сохранения.

    Immutable модель (frozen=True).
    """

    asset: str = Field(..., min_length=1, description="Имя типа актива")
    supply_value: int = Field(..., ge=0, description="Supply[T].value")
    outstanding_value: int = Field(..., ge=0, description="Сумма живых Balance[T]")
    balance_count: int = Field(..., ge=0, description="Количество учтённых Balance")
    staking_rewards_issued: int = Field(0, ge=0, description="Выпущено мимо Supply")
    storage_rebates_destroyed: int = Field(0, ge=0, description="Уничтожено мимо Supply")

    model_config = {"frozen": True}

    @property
    def discrepancy(self) -> int:
        """
        Расхождение (0 если инвариант выполнен).

        > 0: в обороте больше, чем объясняет учёт (лишний выпуск)
        < 0: в обороте меньше (потеря стоимости)
        """
        return (self.outstanding_value + self.storage_rebates_destroyed) - (
            self.supply_value + self.staking_rewards_issued
        )

    @property
    def balanced(self) -> bool:
        return self.discrepancy == 0

    def require(self) -> "ConservationReport":
        """
        Потребовать выполнение инварианта.

        Raises:
            ConservationError: Если discrepancy != 0
        """
        if not self.balanced:
            raise ConservationError(
                f"Conservation violated for {self.asset}: outstanding={self.outstanding_value}, "
                f"supply={self.supply_value}, rewards={self.staking_rewards_issued}, "
                f"rebates={self.storage_rebates_destroyed}, discrepancy={self.discrepancy}"
            )
        return self

    def to_contract(self) -> Dict[str, Any]:
        """Dict для контракта conservation_report."""
        data = self.model_dump()
        data["discrepancy"] = self.discrepancy
        data["balanced"] = self.balanced
        return data


def audit_conservation(
    supply: Supply,
    balances: Iterable[Balance],
    staking_rewards_issued: int = 0,
    storage_rebates_destroyed: int = 0,
    bypass: Optional[BypassTally] = None,
) -> ConservationReport:
    """
    Аудит сохранения стоимости по одному активу.

    Args:
        supply: Supply актива
        balances: Все живые Balance этого актива
        staking_rewards_issued: Выпущено системным путём
        storage_rebates_destroyed: Уничтожено системным путём
        bypass: Источник учёта системного пути; прибавляется к явным значениям

    Returns:
        ConservationReport

    Raises:
        ConsumedValueError: Если среди balances есть поглощённые
        AssetMismatchError: Если актив Balance не совпадает с Supply
    """
    supply.ensure_live("audit_conservation")

    outstanding = 0
    count = 0
    for balance in balances:
        balance.ensure_live("audit_conservation")
        ensure_same_asset(supply.asset, balance.asset, "audit_conservation")
        outstanding += balance.value
        count += 1

    if bypass is not None:
        staking_rewards_issued += bypass.staking_rewards_issued
        storage_rebates_destroyed += bypass.storage_rebates_destroyed

    return ConservationReport(
        asset=supply.asset_name,
        supply_value=supply.value,
        outstanding_value=outstanding,
        balance_count=count,
        staking_rewards_issued=staking_rewards_issued,
        storage_rebates_destroyed=storage_rebates_destroyed,
    )
