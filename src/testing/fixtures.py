"""
Test fixtures — фабрики Balance/Supply в обход всех инвариантов

ТОЛЬКО для тестов. Production-модули этот пакет не импортируют.
Позволяют собрать фикстуры без легитимной эмиссии и растворить
значения, не погашая их.
"""

from src.core.domain.balance import Balance, _consume, _mint
from src.core.domain.supply import Supply, _new_supply
from src.core.math.u64_safeguards import validate_u64
from src.system.capability import TxContext, _new_tx_context


def create_for_testing(asset: type, value: int) -> Balance:
    """Balance произвольного значения без увеличения Supply."""
    validate_u64(value, "value")
    return _mint(asset, value)


def destroy_for_testing(balance: Balance) -> int:
    """Поглотить Balance без погашения; возвращает его количество."""
    return _consume(balance, "destroy_for_testing")


def create_supply_for_testing(asset: type) -> Supply:
    """Нулевой Supply без witness."""
    return _new_supply(asset)


def destroy_supply_for_testing(supply: Supply) -> int:
    """Уничтожить Supply; возвращает его последнее значение."""
    supply.ensure_live("destroy_supply_for_testing")
    return supply._destroy()


def tx_context_for_testing(sender: str, epoch: int = 0) -> TxContext:
    """TxContext с произвольным отправителем, как его выдал бы исполнитель."""
    return _new_tx_context(sender, epoch)
