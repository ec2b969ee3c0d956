"""Runtime configuration defaults for pricing and logging."""

from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation

TAX_RATE_DEFAULT = Decimal("0.08")
CURRENCY_SYMBOL = "$"
DEBUG_LOG_PATH_DEFAULT = "/tmp/lunch-tray-debug.log"
LOG_LEVEL_DEFAULT = "INFO"

_TAX_RATE_ENV = "LUNCH_TRAY_TAX_RATE"
_DEBUG_LOG_ENV = "LUNCH_TRAY_DEBUG_LOG"
_LOG_LEVEL_ENV = "LUNCH_TRAY_LOG_LEVEL"


def resolve_tax_rate() -> Decimal:
    """
    Resolve the sales tax rate.

    Resolution order:
    1. LUNCH_TRAY_TAX_RATE (if set)
    2. TAX_RATE_DEFAULT
    """
    raw = os.environ.get(_TAX_RATE_ENV, "").strip()
    if not raw:
        return TAX_RATE_DEFAULT
    try:
        rate = Decimal(raw)
    except InvalidOperation as exc:
        raise ValueError(f"{_TAX_RATE_ENV} must be a decimal number, got {raw!r}") from exc
    if not rate.is_finite() or not (Decimal(0) <= rate < Decimal(1)):
        raise ValueError(f"{_TAX_RATE_ENV} must be in [0, 1), got {raw!r}")
    return rate


def resolve_debug_log_path() -> str:
    """Resolve the debug log file path, honouring LUNCH_TRAY_DEBUG_LOG."""
    return os.environ.get(_DEBUG_LOG_ENV, "").strip() or DEBUG_LOG_PATH_DEFAULT


def resolve_log_level() -> str:
    return (os.environ.get(_LOG_LEVEL_ENV, "").strip() or LOG_LEVEL_DEFAULT).upper()


TAX_RATE = resolve_tax_rate()
