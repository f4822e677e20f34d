"""
Booking cost estimate.

The estimate is a pure function of bag count, weight category and service
tier:

    (base + (bags - 1) * per_extra_bag + weight_surcharge) * tier_multiplier

Rates are injected so tests and deployments can supply their own; the
defaults come from Settings.
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from shared.config import Settings, get_settings

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class PricingRates:
    """Rate card for the cost estimate (INR)."""

    base: Decimal
    per_extra_bag: Decimal
    weight_surcharges: dict[str, Decimal] = field(default_factory=dict)
    tier_multipliers: dict[str, Decimal] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PricingRates":
        settings = settings or get_settings()
        return cls(
            base=settings.pricing_base,
            per_extra_bag=settings.pricing_per_extra_bag,
            weight_surcharges=dict(settings.pricing_weight_surcharges),
            tier_multipliers=dict(settings.pricing_tier_multipliers),
        )


def _parse_bag_count(value: Union[int, str, None]) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        count = int(value)
    except (TypeError, ValueError):
        return None
    return count if count > 0 else None


def estimate_cost(
    bag_count: Union[int, str, None],
    weight_category: Optional[str],
    service_tier: Optional[str],
    rates: Optional[PricingRates] = None,
) -> Optional[Decimal]:
    """
    Estimate the price of a booking.

    Returns None when any input is unset or not on the rate card.
    """
    bags = _parse_bag_count(bag_count)
    if bags is None or not weight_category or not service_tier:
        return None

    rates = rates or PricingRates.from_settings()
    surcharge = rates.weight_surcharges.get(weight_category)
    multiplier = rates.tier_multipliers.get(service_tier)
    if surcharge is None or multiplier is None:
        return None

    subtotal = rates.base + (bags - 1) * rates.per_extra_bag + surcharge
    return (subtotal * multiplier).quantize(CENTS, rounding=ROUND_HALF_UP)
