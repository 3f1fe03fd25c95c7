"""
Errors — таксономия отказов примитива стоимости

Каждое нарушение предусловия немедленно прерывает операцию целиком
(BalanceAbort с фиксированным числовым кодом). Коды стабильны: внешние
компоненты сопоставляют их по значению.

Помимо кодов существуют ошибки программирования, которые не входят
в числовую таксономию:
- ConsumedValueError: повторное использование уже поглощённого значения
- AssetMismatchError: смешивание значений разных типов актива
"""

import logging
from enum import Enum
from typing import Final, NoReturn

logger = logging.getLogger(__name__)


# =============================================================================
# КОДЫ ОТКАЗОВ
# =============================================================================


class BalanceErrorCode(int, Enum):
    """Числовые коды отказов."""

    NON_ZERO = 0
    OVERFLOW = 1
    NOT_ENOUGH = 2
    NOT_SYSTEM_ADDRESS = 3
    NOT_NATIVE_ASSET = 4


# Короткие псевдонимы в нотации кодов отказа
E_NON_ZERO: Final[BalanceErrorCode] = BalanceErrorCode.NON_ZERO
E_OVERFLOW: Final[BalanceErrorCode] = BalanceErrorCode.OVERFLOW
E_NOT_ENOUGH: Final[BalanceErrorCode] = BalanceErrorCode.NOT_ENOUGH
E_NOT_SYSTEM_ADDRESS: Final[BalanceErrorCode] = BalanceErrorCode.NOT_SYSTEM_ADDRESS
E_NOT_NATIVE_ASSET: Final[BalanceErrorCode] = BalanceErrorCode.NOT_NATIVE_ASSET


# =============================================================================
# ИСКЛЮЧЕНИЯ
# =============================================================================


class BalanceAbort(ValueError):
    """
    Отказ операции с кодом.

    Attributes:
        code: BalanceErrorCode
    """

    def __init__(self, code: BalanceErrorCode, message: str) -> None:
        self.code = BalanceErrorCode(code)
        super().__init__(f"{message} (abort code {self.code.value}: {self.code.name})")


class ConsumedValueError(RuntimeError):
    """Операция над значением, которое уже было поглощено."""


class AssetMismatchError(TypeError):
    """Смешивание Balance/Supply разных типов актива."""


class ConservationError(AssertionError):
    """Нарушен инвариант сохранения стоимости."""


def abort(code: BalanceErrorCode, message: str, asset: str | None = None) -> NoReturn:
    """
    Поднять BalanceAbort.

    Args:
        code: Код отказа
        message: Описание нарушенного предусловия
        asset: Имя типа актива (для лога)

    Raises:
        BalanceAbort: Всегда
    """
    logger.debug(
        "Abort %s: %s",
        code.name,
        message,
        extra={"error_code": int(code), "asset": asset},
    )
    raise BalanceAbort(code, message)
