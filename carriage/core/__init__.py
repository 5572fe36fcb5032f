"""
Çekirdek Modüller
=================

Kapasite kuralları ve araç kataloğu.
"""

from .capacity import CARRY_RULES, can_carry, effective_limits, fits
from .fleet import CATALOGUE, build

__all__ = ['CARRY_RULES', 'CATALOGUE', 'build', 'can_carry', 'effective_limits', 'fits']
