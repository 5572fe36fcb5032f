"""
Kapasite Modeli
===============

Bir taşıyıcının verilen kargoyu kabul edip edemeyeceğine karar verir.

Sığma politikası kapsayıcıdır: her eksende ``kargo <= limit`` ve
ağırlıkta ``kargo.weight <= max_weight``. Döndürme (rotation) yoktur,
eksenler sırasıyla karşılaştırılır.

Kurallar:
    - STANDARD      : ağırlık + boyut
    - NO_STORAGE    : her zaman False
    - UNBOUNDED     : her zaman True
    - COMPARTMENTED : limitler N bölmeye bölünür, sonra STANDARD
    - DECK_AND_HOLD : ağırlık VE (güverteye sığar VEYA ambara sığar)
    - ROOF          : ağırlık + taban alanı kendi üst yüzeyine sığar
    - HULL          : STANDARD + kargo gövdeden geniş olamaz
"""

import logging

from ..models import CarrierCategory

logger = logging.getLogger(__name__)


# ====================================================================
# TEMEL KONTROLLER
# ====================================================================

def fits(limit_dimensions, candidate_dimensions):
    """
    Aday boyutlar limit boyutlarına sığar mı?

    Args:
        limit_dimensions: Dimensions - sınır
        candidate_dimensions: Dimensions - yerleştirilecek nesne

    Returns:
        bool: Her eksen limitten küçük veya eşitse True
    """
    return limit_dimensions.fits(candidate_dimensions)


def fits_on_top(surface_dimensions, candidate_dimensions):
    """Taban alanı (uzunluk × genişlik) yüzeye sığar mı? Yükseklik serbest."""
    return (candidate_dimensions.length <= surface_dimensions.length and
            candidate_dimensions.width <= surface_dimensions.width)


def effective_limits(carrier):
    """
    Temel kuralda uygulanan gerçek limitler.

    Bölmeli taşıyıcılarda ağırlık ve bölme ekseni N'e bölünür,
    böylece hacim de N'e bölünmüş olur.

    Returns:
        tuple: (max_weight, max_dimensions)
    """
    if carrier.category is CarrierCategory.COMPARTMENTED:
        n = carrier.compartments
        return (carrier.max_weight / n,
                carrier.max_dimensions.divided(n, carrier.compartment_axis))
    return carrier.max_weight, carrier.max_dimensions


# ====================================================================
# KATEGORİ KURALLARI
# ====================================================================

def _standard_rule(carrier, cargo):
    max_weight, max_dimensions = effective_limits(carrier)
    return cargo.weight <= max_weight and fits(max_dimensions, cargo.dimensions)


def _no_storage_rule(carrier, cargo):
    return False


def _unbounded_rule(carrier, cargo):
    return True


def _deck_and_hold_rule(carrier, cargo):
    if cargo.weight > carrier.max_weight:
        return False
    on_deck = fits_on_top(carrier.dimensions, cargo.dimensions)
    in_hold = fits(carrier.max_dimensions, cargo.dimensions)
    return on_deck or in_hold


def _roof_rule(carrier, cargo):
    return (cargo.weight <= carrier.max_weight and
            fits_on_top(carrier.dimensions, cargo.dimensions))


def _hull_rule(carrier, cargo):
    return (_standard_rule(carrier, cargo) and
            cargo.dimensions.width <= carrier.dimensions.width)


CARRY_RULES = {
    CarrierCategory.STANDARD: _standard_rule,
    CarrierCategory.NO_STORAGE: _no_storage_rule,
    CarrierCategory.UNBOUNDED: _unbounded_rule,
    CarrierCategory.COMPARTMENTED: _standard_rule,
    CarrierCategory.DECK_AND_HOLD: _deck_and_hold_rule,
    CarrierCategory.ROOF: _roof_rule,
    CarrierCategory.HULL: _hull_rule,
}


def can_carry(carrier, cargo):
    """
    Taşıyıcı kargoyu taşıyabilir mi?

    Args:
        carrier: Carrier nesnesi
        cargo: Carrier nesnesi (yapısal olarak kullanılır)

    Returns:
        bool
    """
    rule = CARRY_RULES[carrier.category]
    result = bool(rule(carrier, cargo))
    logger.debug("%s -> %s: %s (%s)", carrier.name, cargo.name,
                 result, carrier.category.value)
    return result
