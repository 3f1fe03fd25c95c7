"""System Issuance — выпуск и уничтожение стоимости мимо Supply.

Две операции только для процедуры смены эпохи:
- create_staking_rewards: выпуск вознаграждений за стейкинг
- destroy_storage_rebates: уничтожение возвратов за хранение

Обе локально нарушают инвариант Supply; глобальное сохранение
восстанавливается внешним макроэкономическим учётом (см. счётчики
SystemCapability и audit_conservation).
"""

import logging
from typing import Optional

from src.core.domain.asset import asset_type_name
from src.core.domain.balance import Balance, _consume, _mint
from src.core.domain.errors import E_NOT_NATIVE_ASSET, E_NOT_SYSTEM_ADDRESS, abort
from src.core.math.u64_safeguards import validate_u64

from .capability import SystemCapability

logger = logging.getLogger(__name__)


def _require_capability(cap: object, operation: str) -> SystemCapability:
    """Проверка, что вызывающий предъявил SystemCapability."""
    if not isinstance(cap, SystemCapability):
        abort(
            E_NOT_SYSTEM_ADDRESS,
            f"{operation}: caller did not present a system capability",
        )
    return cap


def _require_native(cap: SystemCapability, asset: type, operation: str) -> None:
    """Системный путь работает только с нативной валютой."""
    if asset is not cap.config.native_asset:
        abort(
            E_NOT_NATIVE_ASSET,
            f"{operation}: {asset_type_name(asset)} is not the native asset "
            f"{asset_type_name(cap.config.native_asset)}",
            asset_type_name(asset),
        )


def create_staking_rewards(
    cap: SystemCapability,
    amount: int,
    asset: Optional[type] = None,
) -> Balance:
    """Выпустить вознаграждения за стейкинг, не трогая Supply.

    Args:
        cap: SystemCapability процедуры смены эпохи
        amount: количество к выпуску
        asset: тег актива (default: нативная валюта из конфигурации)

    Returns:
        Balance нативной валюты с value == amount

    Raises:
        BalanceAbort(E_NOT_SYSTEM_ADDRESS): без SystemCapability
        BalanceAbort(E_NOT_NATIVE_ASSET): для не нативного актива
    """
    cap = _require_capability(cap, "create_staking_rewards")
    asset = asset if asset is not None else cap.config.native_asset
    _require_native(cap, asset, "create_staking_rewards")
    validate_u64(amount, "amount")

    rewards = _mint(asset, amount)
    cap._record_staking_rewards(amount)

    logger.info(
        "Staking rewards minted outside supply",
        extra={"asset": asset_type_name(asset), "amount": amount, "epoch": cap.epoch},
    )
    return rewards


def destroy_storage_rebates(cap: SystemCapability, balance: Balance) -> None:
    """Уничтожить возвраты за хранение, не трогая Supply.

    Raises:
        BalanceAbort(E_NOT_SYSTEM_ADDRESS): без SystemCapability
        BalanceAbort(E_NOT_NATIVE_ASSET): для не нативного актива
    """
    cap = _require_capability(cap, "destroy_storage_rebates")
    if not isinstance(balance, Balance):
        raise TypeError(
            f"destroy_storage_rebates expects a Balance, got {type(balance).__name__}"
        )
    balance.ensure_live("destroy_storage_rebates")
    _require_native(cap, balance.asset, "destroy_storage_rebates")

    amount = _consume(balance, "destroy_storage_rebates")
    cap._record_storage_rebates(amount)

    logger.info(
        "Storage rebates burned outside supply",
        extra={"asset": balance.asset_name, "amount": amount, "epoch": cap.epoch},
    )
