"""Конфигурация системного пути эмиссии."""

from dataclasses import dataclass

from src.core.domain.asset import NativeCoin


@dataclass(frozen=True)
class SystemConfig:
    """Конфигурация привилегированного вызывающего.

    - system_address: адрес отправителя процедуры смены эпохи
    - native_asset: тег нативной валюты; системный путь работает только с ним
    """
    system_address: str = "0x0"
    native_asset: type = NativeCoin
