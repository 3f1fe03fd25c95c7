"""System — привилегированный путь эмиссии для процедуры смены эпохи.

- SystemCapability выдаётся только системному отправителю
- Выпуск staking rewards и уничтожение storage rebates мимо Supply
- Только для нативной валюты леджера
"""

from .capability import SystemCapability, TxContext, acquire_system_capability
from .config import SystemConfig
from .issuance import create_staking_rewards, destroy_storage_rebates

__all__ = [
    "SystemCapability",
    "SystemConfig",
    "TxContext",
    "acquire_system_capability",
    "create_staking_rewards",
    "destroy_storage_rebates",
]
