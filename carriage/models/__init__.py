"""
Veri Modelleri
==============

Kapasite problemi için değişmez (immutable) veri yapıları.
"""

from .errors import InvalidParameter, ReasonCode, require_count
from .dimensions import AXES, Dimensions
from .carrier import Carrier, CarrierCategory

__all__ = [
    'AXES',
    'Carrier',
    'CarrierCategory',
    'Dimensions',
    'InvalidParameter',
    'ReasonCode',
    'require_count',
]
