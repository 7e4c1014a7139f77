"""Category pricing and billing strategy dispatch.

Everything here is a pure computation: a base bill is looked up from the
category table and passed through one of two fixed strategies.
"""

from __future__ import annotations

from enum import Enum
import logging
from typing import Any

from models.patient import Category, InvalidCategory, PatientRecord, coerce_category

logger = logging.getLogger(__name__)


CATEGORY_BASE_BILLS: dict[Category, float] = {
    Category.GENERAL: 2000.0,
    Category.EMERGENCY: 5000.0,
    Category.INSURANCE: 3000.0,
    Category.ICU: 8000.0,
    Category.DIAGNOSTIC: 1500.0,
}

INSURANCE_COVERAGE = 0.5
SERVICE_CHARGE = 500.0
TAX_RATE = 0.18


class BillingStrategy(Enum):
    INSURANCE_DISCOUNT = "insurance_discount"
    STANDARD_ENHANCED = "standard_enhanced"

    def apply(self, amount: float) -> float:
        if self is BillingStrategy.INSURANCE_DISCOUNT:
            return amount * INSURANCE_COVERAGE
        return amount + SERVICE_CHARGE + amount * TAX_RATE

    def __call__(self, amount: float) -> float:
        return self.apply(amount)


_STRATEGY_BY_CATEGORY: dict[Category, BillingStrategy] = {
    category: (
        BillingStrategy.INSURANCE_DISCOUNT
        if category is Category.INSURANCE
        else BillingStrategy.STANDARD_ENHANCED
    )
    for category in Category
}


def _lookup_category(category: Any) -> Category:
    if category is None:
        raise InvalidCategory(category)
    return coerce_category(category)


def base_bill(category: Any) -> float:
    """Return the fixed starting charge for ``category``."""

    return CATEGORY_BASE_BILLS[_lookup_category(category)]


def select_strategy(category: Any) -> BillingStrategy:
    """Pick the billing strategy that applies to ``category``.

    Insurance patients get the insurance discount; every other category is
    billed with the standard service charge and tax.
    """

    return _STRATEGY_BY_CATEGORY[_lookup_category(category)]


def apply_billing(patient: PatientRecord, strategy: BillingStrategy) -> float:
    amount = strategy.apply(base_bill(patient.category))
    logger.debug(
        "Billed patient %s (%s) with %s: %s",
        patient.patient_id,
        patient.category,
        strategy.value,
        amount,
    )
    return amount


def format_amount(amount: float) -> str:
    """Render ``amount`` without a trailing ``.0`` for whole values."""

    value = float(amount)
    if value.is_integer():
        return str(int(value))
    return repr(value)


__all__ = [
    "CATEGORY_BASE_BILLS",
    "INSURANCE_COVERAGE",
    "SERVICE_CHARGE",
    "TAX_RATE",
    "BillingStrategy",
    "apply_billing",
    "base_bill",
    "format_amount",
    "select_strategy",
]
