"""
Supply — счётчик общей эмиссии актива

Supply[T].value — сколько единиц актива T выпущено и ещё не погашено.
Меняется только через increase_supply (выпуск Balance) и
decrease_supply (погашение Balance); внешнее присваивание полей
отклоняется (frozen=True).

Создаётся один раз на тип актива через create_supply(witness).
В production не уничтожается (только тестовыми фабриками).
"""

from typing import Any, Dict, Final, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from src.core.math.u64_safeguards import U64_MAX, checked_sub, has_headroom, validate_u64

from .asset import asset_type_name, ensure_same_asset, witness_asset
from .balance import Balance, _consume, _mint
from .errors import E_OVERFLOW, ConsumedValueError, abort

# Защищает от случайного прямого создания, а не от намеренного обхода
_SUPPLY_SEAL: Final[object] = object()


class Supply(BaseModel):
    """
    Счётчик эмиссии актива одного типа.

    Обычно хранится внутри привилегированного capability-объекта
    монеты на всё время жизни актива.
    """

    asset: Type[Any] = Field(..., description="Тег типа актива")
    value: int = Field(0, ge=0, le=U64_MAX, strict=True, description="Выпущено и не погашено (u64)")

    model_config = ConfigDict(frozen=True)

    __hash__ = None  # type: ignore[assignment]

    _destroyed: bool = PrivateAttr(default=False)

    def __init__(self, *, _seal: object = None, **data: Any) -> None:
        if _seal is not _SUPPLY_SEAL:
            raise TypeError("Supply cannot be constructed directly; use create_supply(witness)")
        super().__init__(**data)

    @classmethod
    def model_construct(cls, _fields_set: Optional[set] = None, **values: Any) -> "Supply":
        raise TypeError("Supply cannot be constructed directly")

    @classmethod
    def model_validate(cls, obj: Any, *args: Any, **kwargs: Any) -> "Supply":
        raise TypeError("Supply cannot be constructed directly")

    def __copy__(self) -> "Supply":
        raise TypeError("Supply cannot be copied")

    def __deepcopy__(self, memo: Optional[dict] = None) -> "Supply":
        raise TypeError("Supply cannot be copied")

    def model_copy(self, *, update: Optional[dict] = None, deep: bool = False) -> "Supply":
        raise TypeError("Supply cannot be copied")

    def __getstate__(self) -> Dict[Any, Any]:
        raise TypeError("Supply cannot be pickled")

    @property
    def asset_name(self) -> str:
        return asset_type_name(self.asset)

    def ensure_live(self, operation: str) -> None:
        if self._destroyed:
            raise ConsumedValueError(
                f"{operation}: supply of {self.asset_name} was already destroyed"
            )

    def _set_value(self, amount: int) -> None:
        """Внутренняя запись value: только increase_supply/decrease_supply."""
        self.__dict__["value"] = validate_u64(amount, "value")

    def _destroy(self) -> int:
        self._destroyed = True
        return self.value

    def increase_supply(self, amount: int) -> Balance:
        """
        Выпустить amount единиц.

        Предусловие (строгое): amount < U64_MAX - value.

        Args:
            amount: Количество к выпуску

        Returns:
            Новый Balance с value == amount

        Raises:
            BalanceAbort(E_OVERFLOW): Если нет запаса до U64_MAX
        """
        self.ensure_live("increase_supply")
        validate_u64(amount, "amount")

        if not has_headroom(self.value, amount):
            abort(
                E_OVERFLOW,
                f"increase_supply: {amount} leaves no headroom above supply {self.value}",
                self.asset_name,
            )

        self._set_value(self.value + amount)
        return _mint(self.asset, amount)

    def decrease_supply(self, balance: Balance) -> int:
        """
        Погасить balance.

        balance поглощается. Недостаток эмиссии сигнализируется тем же
        кодом E_OVERFLOW, что и переполнение.

        Returns:
            Погашенное количество

        Raises:
            BalanceAbort(E_OVERFLOW): Если value < balance.value
            AssetMismatchError: Если активы различаются
        """
        self.ensure_live("decrease_supply")
        if not isinstance(balance, Balance):
            raise TypeError(f"decrease_supply expects a Balance, got {type(balance).__name__}")
        balance.ensure_live("decrease_supply")
        ensure_same_asset(self.asset, balance.asset, "decrease_supply")

        remaining = checked_sub(self.value, balance.value)
        if remaining is None:
            abort(
                E_OVERFLOW,
                f"decrease_supply: redeeming {balance.value} exceeds supply {self.value}",
                self.asset_name,
            )

        redeemed = _consume(balance, "decrease_supply")
        self._set_value(remaining)
        return redeemed

    def snapshot(self) -> Dict[str, Any]:
        """Снапшот для контракта supply_snapshot."""
        self.ensure_live("snapshot")
        return {"asset": self.asset_name, "value": self.value}


# =============================================================================
# ФАБРИКА (внутренняя)
# =============================================================================


def _new_supply(asset: type) -> Supply:
    """Создать нулевой Supply без проверки witness."""
    return Supply(_seal=_SUPPLY_SEAL, asset=asset, value=0)


# =============================================================================
# ФУНКЦИОНАЛЬНЫЙ API
# =============================================================================


def create_supply(witness: Any) -> Supply:
    """
    Создать Supply для типа witness.

    Args:
        witness: Экземпляр класса-тега без состояния

    Returns:
        Supply с value == 0
    """
    return _new_supply(witness_asset(witness))


def supply_value(supply: Supply) -> int:
    """Текущая эмиссия (только чтение)."""
    supply.ensure_live("supply_value")
    return supply.value


def increase_supply(supply: Supply, amount: int) -> Balance:
    """См. Supply.increase_supply."""
    return supply.increase_supply(amount)


def decrease_supply(supply: Supply, balance: Balance) -> int:
    """См. Supply.decrease_supply."""
    return supply.decrease_supply(balance)
