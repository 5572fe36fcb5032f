"""
Carriage Capacity Engine
=========================

Bir taşıyıcının (araç, gemi, tren ...) başka bir aracı ağırlık ve boyut
kısıtlarına göre taşıyıp taşıyamayacağını belirleyen motor.

Alt Modüller:
    - carriage.core    : Kapasite kuralları ve araç kataloğu
    - carriage.models  : Veri modelleri (Boyutlar, Taşıyıcı, Hatalar)
    - carriage.utils   : Yardımcı araçlar (Parser, Görselleştirme, Helpers)
"""

from .models import Carrier, CarrierCategory, Dimensions, InvalidParameter, ReasonCode
from .core import can_carry, fits

__version__ = "1.0.0"

__all__ = [
    'Carrier',
    'CarrierCategory',
    'Dimensions',
    'InvalidParameter',
    'ReasonCode',
    'can_carry',
    'fits',
]
