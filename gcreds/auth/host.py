"""Определение платформы хоста."""

from __future__ import annotations

import platform
import threading
from typing import Optional

_lock = threading.Lock()
_is_windows: Optional[bool] = None


def is_windows() -> bool:
    """Вернуть True, если процесс запущен под Windows.

    Значение вычисляется один раз при первом обращении и далее не меняется.
    """
    global _is_windows
    if _is_windows is None:
        with _lock:
            if _is_windows is None:
                _is_windows = platform.system() == "Windows"
    return _is_windows


def reset_cache() -> None:
    """Сбросить закэшированный результат (используется в тестах)."""
    global _is_windows
    with _lock:
        _is_windows = None
