"""System Capability — токен привилегированного вызывающего.

Только процедура смены эпохи (отправитель с системным адресом) может
получить SystemCapability через acquire_system_capability. Конструкторы
TxContext и SystemCapability запечатаны, копирование запрещено: это
защищает от случайного вызова системного пути, а не от намеренного
обхода изнутри процесса. Токен ведёт учёт выпуска и уничтожения
стоимости мимо Supply, чтобы внешний учёт мог восстановить глобальное
сохранение.
"""

import logging
from typing import Any, Dict, Final, Optional

from pydantic import BaseModel, Field

from src.core.domain.asset import asset_type_name
from src.core.domain.errors import E_NOT_SYSTEM_ADDRESS, abort

from .config import SystemConfig

logger = logging.getLogger(__name__)

_CAPABILITY_SEAL: Final[object] = object()
_TX_CONTEXT_SEAL: Final[object] = object()


class TxContext(BaseModel):
    """Контекст транзакции, в которой выполняется вызов.

    Создаётся исполнителем транзакций через _new_tx_context, а не
    вызывающим кодом: sender подтверждён подписью транзакции.
    """

    sender: str = Field(..., min_length=1, description="Адрес отправителя")
    epoch: int = Field(0, ge=0, description="Текущая эпоха")

    model_config = {"frozen": True}

    def __init__(self, *, _seal: object = None, **data: Any) -> None:
        if _seal is not _TX_CONTEXT_SEAL:
            raise TypeError("TxContext is created by the transaction executor only")
        super().__init__(**data)

    @classmethod
    def model_construct(cls, _fields_set: Optional[set] = None, **values: Any) -> "TxContext":
        raise TypeError("TxContext is created by the transaction executor only")

    @classmethod
    def model_validate(cls, obj: Any, *args: Any, **kwargs: Any) -> "TxContext":
        raise TypeError("TxContext is created by the transaction executor only")

    @classmethod
    def model_validate_json(cls, json_data: Any, *args: Any, **kwargs: Any) -> "TxContext":
        raise TypeError("TxContext is created by the transaction executor only")

    def model_copy(self, *, update: Optional[dict] = None, deep: bool = False) -> "TxContext":
        raise TypeError("TxContext cannot be copied")

    def __copy__(self) -> "TxContext":
        raise TypeError("TxContext cannot be copied")

    def __deepcopy__(self, memo: Optional[dict] = None) -> "TxContext":
        raise TypeError("TxContext cannot be copied")

    def __getstate__(self) -> Dict[Any, Any]:
        raise TypeError("TxContext cannot be pickled")


def _new_tx_context(sender: str, epoch: int = 0) -> TxContext:
    """Контекст для исполнителя транзакций (sender уже аутентифицирован)."""
    return TxContext(_seal=_TX_CONTEXT_SEAL, sender=sender, epoch=epoch)


class SystemCapability:
    """Токен доступа к системному пути эмиссии.

    Создаётся только acquire_system_capability.
    """

    __slots__ = ("_config", "_epoch", "_staking_rewards_issued", "_storage_rebates_destroyed")

    def __init__(self, *, _seal: object = None, config: SystemConfig, epoch: int):
        if _seal is not _CAPABILITY_SEAL:
            raise TypeError("SystemCapability cannot be constructed directly")
        self._config = config
        self._epoch = epoch
        self._staking_rewards_issued = 0
        self._storage_rebates_destroyed = 0

    def __copy__(self) -> "SystemCapability":
        raise TypeError("SystemCapability cannot be copied")

    def __deepcopy__(self, memo: Optional[dict] = None) -> "SystemCapability":
        raise TypeError("SystemCapability cannot be copied")

    def __reduce__(self):
        raise TypeError("SystemCapability cannot be pickled")

    def __repr__(self) -> str:
        return (
            f"SystemCapability(epoch={self._epoch}, "
            f"native_asset={asset_type_name(self._config.native_asset)}, "
            f"staking_rewards_issued={self._staking_rewards_issued}, "
            f"storage_rebates_destroyed={self._storage_rebates_destroyed})"
        )

    @property
    def config(self) -> SystemConfig:
        return self._config

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def staking_rewards_issued(self) -> int:
        """Сколько выпущено create_staking_rewards под этим токеном."""
        return self._staking_rewards_issued

    @property
    def storage_rebates_destroyed(self) -> int:
        """Сколько уничтожено destroy_storage_rebates под этим токеном."""
        return self._storage_rebates_destroyed

    def _record_staking_rewards(self, amount: int) -> None:
        self._staking_rewards_issued += amount

    def _record_storage_rebates(self, amount: int) -> None:
        self._storage_rebates_destroyed += amount


def acquire_system_capability(
    ctx: TxContext,
    config: Optional[SystemConfig] = None,
) -> SystemCapability:
    """Выдать SystemCapability системному отправителю.

    Args:
        ctx: контекст транзакции
        config: конфигурация системного пути (default SystemConfig())

    Returns:
        SystemCapability для эпохи ctx.epoch

    Raises:
        BalanceAbort(E_NOT_SYSTEM_ADDRESS): если ctx.sender не системный адрес
            или ctx не выдан исполнителем транзакций
    """
    config = config or SystemConfig()

    if not isinstance(ctx, TxContext):
        logger.warning(
            "System capability denied: context of type %s",
            type(ctx).__name__,
        )
        abort(
            E_NOT_SYSTEM_ADDRESS,
            f"expected a TxContext from the transaction executor, got {type(ctx).__name__}",
        )

    if ctx.sender != config.system_address:
        logger.warning(
            "System capability denied",
            extra={"sender": ctx.sender, "epoch": ctx.epoch},
        )
        abort(
            E_NOT_SYSTEM_ADDRESS,
            f"sender {ctx.sender} is not the system address {config.system_address}",
        )

    logger.info(
        "System capability granted",
        extra={"sender": ctx.sender, "epoch": ctx.epoch},
    )
    return SystemCapability(_seal=_CAPABILITY_SEAL, config=config, epoch=ctx.epoch)
