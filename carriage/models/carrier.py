"""
Taşıyıcı Modeli
===============

Kendi ağırlığı/boyutları ve taşıyabileceği maksimum ağırlık/boyutları olan
varlık. Kargo da yapısal olarak bir Taşıyıcıdır.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .dimensions import AXES, Dimensions
from .errors import InvalidParameter, ReasonCode, require_count, require_positive

logger = logging.getLogger(__name__)


class CarrierCategory(str, Enum):
    """Kapasite kuralını seçen yetenek etiketi."""

    STANDARD = "standard"            # ağırlık + boyut
    NO_STORAGE = "no_storage"        # hiçbir şey taşıyamaz
    UNBOUNDED = "unbounded"          # her şeyi taşır
    COMPARTMENTED = "compartmented"  # N eşit bölme
    DECK_AND_HOLD = "deck_and_hold"  # güverte VEYA ambar
    ROOF = "roof"                    # sadece üstte
    HULL = "hull"                    # gövde genişliği sınırı

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidParameter(ReasonCode.UNKNOWN_CATEGORY, 'category', value) from None


@dataclass(frozen=True)
class Carrier:
    """
    Sistem içinde dolaşacak standart Taşıyıcı Objesi.

    Attributes:
        name (str): Taşıyıcı adı
        category (CarrierCategory): Kapasite kuralı etiketi
        weight (float): Kendi ağırlığı (ton)
        dimensions (Dimensions): Kendi boyutları (m)
        max_weight (float): Maksimum taşıma ağırlığı (ton)
        max_dimensions (Dimensions): Maksimum taşıma boyutları (m)
        compartments (int): Eşit bölme sayısı (sepet, römork, vagon)
        compartment_axis (str): Bölmelerin dizildiği eksen
    """

    name: str
    category: CarrierCategory
    weight: float
    dimensions: Dimensions
    max_weight: float
    max_dimensions: Dimensions
    compartments: int = 1
    compartment_axis: str = 'length'

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidParameter(ReasonCode.EMPTY_NAME, 'name', self.name)
        object.__setattr__(self, 'category', CarrierCategory.parse(self.category))
        object.__setattr__(self, 'weight',
                           require_positive('weight', self.weight, ReasonCode.NON_POSITIVE_WEIGHT))
        object.__setattr__(self, 'max_weight',
                           require_positive('max_weight', self.max_weight, ReasonCode.NON_POSITIVE_MAX_WEIGHT))

        for field_name in ('dimensions', 'max_dimensions'):
            value = getattr(self, field_name)
            if not isinstance(value, Dimensions):
                raise InvalidParameter(ReasonCode.INVALID_DIMENSIONS, field_name, value)

        object.__setattr__(self, 'compartments', require_count('compartments', self.compartments))
        if self.compartments != 1 and self.category is not CarrierCategory.COMPARTMENTED:
            raise InvalidParameter(ReasonCode.INVALID_COMPARTMENTS, 'compartments', self.compartments,
                                   message='compartments require the compartmented category')
        if self.compartment_axis not in AXES:
            raise InvalidParameter(ReasonCode.INVALID_AXIS, 'compartment_axis', self.compartment_axis)

        logger.debug("Created %r", self)

    @property
    def volume(self) -> float:
        """Kendi hacmi (m³)."""
        return self.dimensions.volume

    def can_carry(self, cargo) -> bool:
        """Bu taşıyıcı verilen kargoyu taşıyabilir mi?"""
        from ..core.capacity import can_carry
        return can_carry(self, cargo)

    def __repr__(self):
        return (f"Carrier({self.name!r}, {self.category.value}, "
                f"weight={self.weight}, max_weight={self.max_weight}, "
                f"max={self.max_dimensions!r})")
