"""
Domain models and value objects.

Contains the value primitive entities: Balance, Supply, asset tags,
abort codes and the conservation audit.
"""

from src.core.domain.asset import NativeCoin, asset_type_name, witness_asset
from src.core.domain.balance import (
    Balance,
    destroy_zero,
    join,
    split,
    value,
    withdraw_all,
    zero,
)
from src.core.domain.conservation import ConservationReport, audit_conservation
from src.core.domain.errors import (
    E_NON_ZERO,
    E_NOT_ENOUGH,
    E_NOT_NATIVE_ASSET,
    E_NOT_SYSTEM_ADDRESS,
    E_OVERFLOW,
    AssetMismatchError,
    BalanceAbort,
    BalanceErrorCode,
    ConservationError,
    ConsumedValueError,
)
from src.core.domain.supply import (
    Supply,
    create_supply,
    decrease_supply,
    increase_supply,
    supply_value,
)

__all__ = [
    # Asset tags
    "NativeCoin",
    "asset_type_name",
    "witness_asset",
    # Balance
    "Balance",
    "value",
    "zero",
    "join",
    "split",
    "withdraw_all",
    "destroy_zero",
    # Supply
    "Supply",
    "create_supply",
    "supply_value",
    "increase_supply",
    "decrease_supply",
    # Conservation
    "ConservationReport",
    "audit_conservation",
    # Errors
    "BalanceErrorCode",
    "BalanceAbort",
    "ConsumedValueError",
    "AssetMismatchError",
    "ConservationError",
    "E_NON_ZERO",
    "E_OVERFLOW",
    "E_NOT_ENOUGH",
    "E_NOT_SYSTEM_ADDRESS",
    "E_NOT_NATIVE_ASSET",
]
