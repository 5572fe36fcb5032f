"""
Hata Modeli
===========

Tüm parametre hataları tek bir tipte toplanır: ``InvalidParameter``.
Her hata makine tarafından kontrol edilebilir bir ``ReasonCode`` taşır.
"""

import logging
import math
import numbers
from decimal import Decimal
from enum import Enum

logger = logging.getLogger(__name__)


class ReasonCode(str, Enum):
    """InvalidParameter hata sebepleri."""

    NON_POSITIVE_WEIGHT = "non_positive_weight"
    NON_POSITIVE_MAX_WEIGHT = "non_positive_max_weight"
    NON_POSITIVE_DIMENSION = "non_positive_dimension"
    NOT_A_NUMBER = "not_a_number"
    EMPTY_NAME = "empty_name"
    INVALID_COMPARTMENTS = "invalid_compartments"
    INVALID_AXIS = "invalid_axis"
    UNKNOWN_CATEGORY = "unknown_category"
    UNKNOWN_KIND = "unknown_kind"
    MISSING_FIELD = "missing_field"
    UNEXPECTED_FIELD = "unexpected_field"
    INVALID_DIMENSIONS = "invalid_dimensions"


class InvalidParameter(ValueError):
    """
    Geçersiz yapılandırma parametresi.

    Attributes:
        reason (ReasonCode): Hata sebebi
        field (str): Hatalı alanın adı
        value: Reddedilen değer
    """

    def __init__(self, reason, field, value=None, message=None):
        self.reason = ReasonCode(reason)
        self.field = field
        self.value = value
        if message is None:
            message = f"{field}: {self.reason.value} (value={value!r})"
        super().__init__(message)

    def __reduce__(self):
        return (self.__class__, (self.reason, self.field, self.value, str(self)))


def require_number(field, value):
    """
    Değer sonlu bir reel sayı mı? Değilse InvalidParameter fırlatır.

    int, float, Fraction, Decimal ve numpy skalerleri kabul edilir; bool edilmez.
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        logger.debug("Rejected %s=%r: not a number", field, value)
        raise InvalidParameter(ReasonCode.NOT_A_NUMBER, field, value)
    try:
        number = float(value)
    except (ValueError, OverflowError):
        # Decimal("sNaN"), float aralığını aşan Fraction
        number = math.nan
    if math.isnan(number) or math.isinf(number):
        logger.debug("Rejected %s=%r: not finite", field, value)
        raise InvalidParameter(ReasonCode.NOT_A_NUMBER, field, value)
    return number


def require_count(field, value):
    """Değer 1 veya daha büyük bir tam sayı mı (bool hariç)?"""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        logger.debug("Rejected %s=%r: not a positive count", field, value)
        raise InvalidParameter(ReasonCode.INVALID_COMPARTMENTS, field, value)
    return int(value)


def require_positive(field, value, reason):
    """Sayısal ve kesin pozitif değeri float olarak döndürür."""
    number = require_number(field, value)
    if number <= 0:
        logger.debug("Rejected %s=%r: %s", field, value, ReasonCode(reason).value)
        raise InvalidParameter(reason, field, value)
    return number
