"""
Asset — теги типов актива и witness-значения

Тег актива — это Python-класс, используемый как маркер. Значения
с разными тегами никогда не взаимозаменяемы.

Witness — экземпляр класса-тега без состояния. Его предъявление
доказывает право создать Supply для этого типа.
"""

from typing import Any

from .errors import AssetMismatchError


# =============================================================================
# ТЕГИ
# =============================================================================


class NativeCoin:
    """Тег нативной валюты леджера (по умолчанию для системных операций)."""


def asset_type_name(asset: type) -> str:
    """
    Полное имя типа актива.

    Формат: "<module>::<qualname>", например "src.core.domain.asset::NativeCoin".
    """
    return f"{asset.__module__}::{asset.__qualname__}"


def witness_asset(witness: Any) -> type:
    """
    Тип актива, который удостоверяет witness.

    Args:
        witness: Экземпляр класса-тега без состояния

    Returns:
        type(witness)

    Raises:
        TypeError: Если передан сам класс, экземпляр встроенного типа
            или экземпляр с состоянием (в __dict__ или в __slots__)
    """
    if isinstance(witness, type):
        raise TypeError(
            f"witness must be an instance of the asset type, got class {witness.__qualname__}"
        )

    asset = type(witness)
    if asset.__module__ == "builtins":
        raise TypeError(
            f"witness must be an instance of a user-defined asset type, "
            f"got builtin {asset.__qualname__}"
        )

    if getattr(witness, "__dict__", None):
        raise TypeError(
            f"witness of {asset.__qualname__} must carry no state, "
            f"got fields {sorted(vars(witness))}"
        )

    slots = _slot_fields(asset)
    if slots:
        raise TypeError(
            f"witness of {asset.__qualname__} must carry no state, got slots {slots}"
        )

    return asset


def _slot_fields(cls: type) -> list:
    """Поля из __slots__ по всему MRO (без служебных __dict__/__weakref__)."""
    fields = set()
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        fields.update(s for s in slots if s not in ("__dict__", "__weakref__"))
    return sorted(fields)


def ensure_same_asset(expected: type, actual: type, operation: str) -> None:
    """
    Проверка совпадения тегов актива.

    Raises:
        AssetMismatchError: Если теги различаются
    """
    if expected is not actual:
        raise AssetMismatchError(
            f"{operation}: asset mismatch, expected {asset_type_name(expected)}, "
            f"got {asset_type_name(actual)}"
        )
