"""
Common Value Objects

Value objects used across multiple domains:
- Discount: A percentage price reduction applied by an offer
- GeoPoint: Latitude/longitude pair of a property
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from shared.domain.base import ValueObject

CENTS = Decimal('0.01')


@dataclass(frozen=True)
class Discount(ValueObject):
    """
    Discount value object

    Percent is in the half-open range (0, 100] and is kept with two decimal
    places, the precision it is stored with.
    """
    percent: Decimal

    def __post_init__(self):
        if self.percent is None:
            raise ValueError("Discount percent is required")
        percent = self.percent if isinstance(self.percent, Decimal) else Decimal(str(self.percent))
        if not percent.is_finite():
            raise ValueError("Discount percent must be a finite number")
        object.__setattr__(self, 'percent', percent.quantize(CENTS, rounding=ROUND_HALF_UP))
        if self.percent <= 0 or self.percent > 100:
            raise ValueError("Discount percent must be greater than 0 and at most 100")

    def apply(self, price: Decimal) -> Decimal:
        """
        Price after the discount, rounded half-up to cents

        Example:
            Discount(Decimal('10')).apply(Decimal('1000')) -> Decimal('900.00')
        """
        price = Decimal(str(price))
        reduced = price * (Decimal('1') - self.percent / Decimal('100'))
        return reduced.quantize(CENTS, rounding=ROUND_HALF_UP)

    def __str__(self):
        return f"{self.percent}%"


@dataclass(frozen=True)
class GeoPoint(ValueObject):
    """Geographic coordinates, validated on construction"""
    latitude: float
    longitude: float

    def __post_init__(self):
        if self.latitude is None or self.longitude is None:
            raise ValueError("Invalid latitude or longitude values.")
        if not -90 <= self.latitude <= 90 or not -180 <= self.longitude <= 180:
            raise ValueError("Invalid latitude or longitude values.")

    def __str__(self):
        return f"{self.latitude:.6f}, {self.longitude:.6f}"
