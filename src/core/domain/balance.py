"""
Balance — количество актива, которым владеет вызывающий

Pydantic модель с дисциплиной владения "переместить, а не скопировать":
- Конструктор запечатан: Balance создаётся только через Supply, zero(),
  split(), системный путь вознаграждений или тестовые фабрики
- Поля asset и value доступны только на чтение (frozen=True); join/split
  пишут value через внутренний _set_value
- Копирование запрещено (copy, deepcopy, model_copy, pickle)
- Каждое значение поглощается ровно один раз (join, decrease_supply,
  destroy_zero, destroy_storage_rebates); после этого остаётся tombstone
  и любая операция поднимает ConsumedValueError
- Ненулевой Balance, собранный GC без поглощения, логируется как утечка

Все предусловия проверяются до мутации: отказ не оставляет
частично изменённого состояния.
"""

import logging
from typing import Any, Dict, Final, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from src.core.math.u64_safeguards import U64_MAX, checked_add, validate_u64

from .asset import asset_type_name, ensure_same_asset
from .errors import E_NON_ZERO, E_NOT_ENOUGH, E_OVERFLOW, ConsumedValueError, abort

logger = logging.getLogger(__name__)

# Печать конструктора для фабрик этого пакета. Защищает от случайного
# прямого создания, а не от намеренного обхода.
_MINT_SEAL: Final[object] = object()


# =============================================================================
# BALANCE MODEL
# =============================================================================


class Balance(BaseModel):
    """
    Количество актива одного типа.

    Не имеет собственной идентичности: это чистая стоимость.
    Мутабельна только через join/split/withdraw_all; внешнее
    присваивание полей отклоняется (frozen=True).
    """

    asset: Type[Any] = Field(..., description="Тег типа актива")
    value: int = Field(0, ge=0, le=U64_MAX, strict=True, description="Количество (u64)")

    model_config = ConfigDict(frozen=True)

    # Значение меняется внутри join/split, поэтому хеш по полям не имеет смысла
    __hash__ = None  # type: ignore[assignment]

    _consumed: bool = PrivateAttr(default=False)

    def __init__(self, *, _seal: object = None, **data: Any) -> None:
        if _seal is not _MINT_SEAL:
            raise TypeError(
                "Balance cannot be constructed directly; "
                "use Supply.increase_supply(), zero() or split()"
            )
        super().__init__(**data)

    @classmethod
    def model_construct(cls, _fields_set: Optional[set] = None, **values: Any) -> "Balance":
        raise TypeError("Balance cannot be constructed directly")

    @classmethod
    def model_validate(cls, obj: Any, *args: Any, **kwargs: Any) -> "Balance":
        raise TypeError("Balance cannot be constructed directly")

    # -------------------------------------------------------------------------
    # Запрет копирования
    # -------------------------------------------------------------------------

    def __copy__(self) -> "Balance":
        raise TypeError("Balance cannot be copied")

    def __deepcopy__(self, memo: Optional[dict] = None) -> "Balance":
        raise TypeError("Balance cannot be copied")

    def model_copy(self, *, update: Optional[dict] = None, deep: bool = False) -> "Balance":
        raise TypeError("Balance cannot be copied")

    def __getstate__(self) -> Dict[Any, Any]:
        raise TypeError("Balance cannot be pickled")

    def __del__(self) -> None:
        private = getattr(self, "__pydantic_private__", None) or {}
        if private.get("_consumed", True):
            return
        leaked = self.__dict__.get("value", 0)
        if leaked:
            asset = self.__dict__.get("asset")
            logger.warning(
                "Balance dropped without being consumed: %d units leaked",
                leaked,
                extra={
                    "asset": asset_type_name(asset) if asset is not None else None,
                    "amount": leaked,
                },
            )

    # -------------------------------------------------------------------------
    # Владение
    # -------------------------------------------------------------------------

    @property
    def asset_name(self) -> str:
        """Полное имя типа актива."""
        return asset_type_name(self.asset)

    @property
    def consumed(self) -> bool:
        """True если значение уже поглощено."""
        return self._consumed

    def ensure_live(self, operation: str) -> None:
        """
        Проверка, что значение ещё не поглощено.

        Raises:
            ConsumedValueError: Если значение уже поглощено
        """
        if self._consumed:
            raise ConsumedValueError(
                f"{operation}: balance of {self.asset_name} was already consumed"
            )

    def _set_value(self, amount: int) -> None:
        """Внутренняя запись value в обход frozen."""
        self.__dict__["value"] = validate_u64(amount, "value")

    def _consume(self) -> int:
        """Поглотить значение и вернуть его количество."""
        self._consumed = True
        return self.value

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def join(self, other: "Balance") -> int:
        """
        Влить other в self.

        other поглощается. Сложение проверяется на переполнение u64.

        Args:
            other: Balance того же актива

        Returns:
            Новое значение self

        Raises:
            BalanceAbort(E_OVERFLOW): Если сумма больше U64_MAX
            AssetMismatchError: Если активы различаются
        """
        self.ensure_live("join")
        if not isinstance(other, Balance):
            raise TypeError(f"join expects a Balance, got {type(other).__name__}")
        other.ensure_live("join")
        if other is self:
            raise ValueError("join: cannot join a balance into itself")
        ensure_same_asset(self.asset, other.asset, "join")

        total = checked_add(self.value, other.value)
        if total is None:
            abort(
                E_OVERFLOW,
                f"join: {self.value} + {other.value} exceeds {U64_MAX}",
                self.asset_name,
            )

        other._consume()
        self._set_value(total)
        return total

    def split(self, amount: int) -> "Balance":
        """
        Отделить amount в новый Balance.

        Raises:
            BalanceAbort(E_NOT_ENOUGH): Если self.value < amount
        """
        self.ensure_live("split")
        validate_u64(amount, "amount")

        if self.value < amount:
            abort(
                E_NOT_ENOUGH,
                f"split: requested {amount}, balance holds {self.value}",
                self.asset_name,
            )

        self._set_value(self.value - amount)
        return _mint(self.asset, amount)

    def withdraw_all(self) -> "Balance":
        """Перенести всё значение в новый Balance, оставив self нулевым."""
        self.ensure_live("withdraw_all")
        return self.split(self.value)

    def destroy_zero(self) -> None:
        """
        Уничтожить нулевой Balance.

        Единственный способ выбросить значение без слияния или погашения,
        и он работает только для нуля.

        Raises:
            BalanceAbort(E_NON_ZERO): Если value != 0
        """
        self.ensure_live("destroy_zero")
        if self.value != 0:
            abort(
                E_NON_ZERO,
                f"destroy_zero: balance holds {self.value}",
                self.asset_name,
            )
        self._consume()

    def snapshot(self) -> Dict[str, Any]:
        """Снапшот для контракта balance_snapshot."""
        self.ensure_live("snapshot")
        return {"asset": self.asset_name, "value": self.value}


# =============================================================================
# ФАБРИКА (внутренняя)
# =============================================================================


def _mint(asset: type, amount: int) -> Balance:
    """
    Создать Balance в обход учёта Supply.

    Только для модулей этого пакета, системного пути и тестовых фабрик:
    вызывающий сам отвечает за сохранение стоимости.
    """
    return Balance(_seal=_MINT_SEAL, asset=asset, value=amount)


def _consume(balance: Balance, operation: str) -> int:
    """Поглотить живой Balance и вернуть его количество."""
    balance.ensure_live(operation)
    return balance._consume()


# =============================================================================
# ФУНКЦИОНАЛЬНЫЙ API
# =============================================================================


def value(balance: Balance) -> int:
    """Количество в Balance (только чтение)."""
    balance.ensure_live("value")
    return balance.value


def zero(asset: type) -> Balance:
    """Нулевой Balance заданного актива."""
    if not isinstance(asset, type):
        raise TypeError(f"asset must be a type, got {type(asset).__name__}")
    return _mint(asset, 0)


def join(balance: Balance, other: Balance) -> int:
    """Влить other в balance. См. Balance.join."""
    return balance.join(other)


def split(balance: Balance, amount: int) -> Balance:
    """Отделить amount из balance. См. Balance.split."""
    return balance.split(amount)


def withdraw_all(balance: Balance) -> Balance:
    """Перенести всё значение balance в новый Balance."""
    return balance.withdraw_all()


def destroy_zero(balance: Balance) -> None:
    """Уничтожить нулевой Balance. См. Balance.destroy_zero."""
    balance.destroy_zero()
