"""
Araç Kataloğu
=============

Bilinen araç türleri için fabrika fonksiyonları. Her araç düz bir
``Carrier`` kaydıdır; davranış farkı sadece ``CarrierCategory`` etiketindedir.

Birimler: ağırlık ton, boyut metre.
"""

import inspect
import logging

from ..models import Carrier, CarrierCategory, Dimensions, InvalidParameter, ReasonCode
from ..models.errors import require_count, require_positive

logger = logging.getLogger(__name__)


# ====================================================================
# SABİTLER
# ====================================================================

BICYCLE_BASKET_WEIGHT = 0.1
BICYCLE_BASKET = Dimensions(0.2, 0.1, 0.1)

BOLID_MAX_WEIGHT = 0.2
BOLID_SPACE = Dimensions(0.5, 0.5, 0.5)

FISH_BOAT_MAX_WEIGHT = 0.2
FISH_BOAT_SPACE = Dimensions(3, 1, 0.5)

# Dışarıdan polis kulübesi, içeriden sonsuz.
TARDIS_WEIGHT = 0.01
TARDIS_SHELL = Dimensions(1.5, 1.5, 2.5)

PASSENGER_TRAIN_DECKS = 3


# ====================================================================
# FABRİKALAR
# ====================================================================

def _coupled(name, weight, dimensions, unit_weight, unit_dimensions, count, field):
    """
    Birbirine bağlı eşit birimlerden (römork, vagon) oluşan taşıyıcı.

    Bölmeli kural limitleri ``count``'a böler; bu yüzden birim limitleri
    ``count`` ile çarpılıp saklanır ve etkin limit birim limitine eşit olur.
    """
    count = require_count(field, count)
    if count == 1:
        return Carrier(name, CarrierCategory.STANDARD, weight, dimensions,
                       unit_weight, unit_dimensions)
    unit_weight = require_positive('max_weight', unit_weight, ReasonCode.NON_POSITIVE_MAX_WEIGHT)
    if not isinstance(unit_dimensions, Dimensions):
        raise InvalidParameter(ReasonCode.INVALID_DIMENSIONS, 'max_dimensions', unit_dimensions)
    return Carrier(name, CarrierCategory.COMPARTMENTED, weight, dimensions,
                   unit_weight * count, unit_dimensions.stacked(count),
                   compartments=count)


def vehicle(name, weight, dimensions, max_weight, max_dimensions):
    """Genel araç: ağırlık + boyut kuralı."""
    return Carrier(name, CarrierCategory.STANDARD, weight, dimensions,
                   max_weight, max_dimensions)


def bicycle(weight, dimensions):
    """Sadece sepette eşya taşır, başka araç taşıyamaz."""
    return Carrier("Bicycle", CarrierCategory.NO_STORAGE, weight, dimensions,
                   BICYCLE_BASKET_WEIGHT, BICYCLE_BASKET)


def car(name, weight, dimensions, max_weight, max_dimensions):
    """Çok büyük değilse başka aracı tavanında taşır."""
    return Carrier(name, CarrierCategory.ROOF, weight, dimensions,
                   max_weight, max_dimensions)


def bolid(weight, dimensions):
    """Yarış arabası. Bagajı yok."""
    return Carrier("Bolid", CarrierCategory.NO_STORAGE, weight, dimensions,
                   BOLID_MAX_WEIGHT, BOLID_SPACE)


def wagon(weight, dimensions, max_trailer_weight, max_trailer_dimensions, trailers=1):
    """
    Römorkta yük taşıyan araç.

    Limitler tek bir römork içindir. ``trailers`` > 1 ise römorklar uzunluk
    boyunca dizilir; kargo yine tek bir römorka sığmalıdır.
    """
    return _coupled("Wagon", weight, dimensions, max_trailer_weight,
                    max_trailer_dimensions, trailers, 'trailers')


def tardis():
    """Zaman makinesi. Her maddi kargoyu taşır."""
    return Carrier("Tardis", CarrierCategory.UNBOUNDED, TARDIS_WEIGHT, TARDIS_SHELL,
                   1, TARDIS_SHELL)


def ship(name, weight, dimensions, max_weight, max_dimensions):
    """Kargo gemiden geniş olamaz, yoksa gemi batar."""
    return Carrier(name, CarrierCategory.HULL, weight, dimensions,
                   max_weight, max_dimensions)


def fish_boat(weight, dimensions):
    return Carrier("Fish boat", CarrierCategory.NO_STORAGE, weight, dimensions,
                   FISH_BOAT_MAX_WEIGHT, FISH_BOAT_SPACE)


def super_tanker(weight, dimensions, max_weight, container_dimensions):
    """Kargo konteynere sığmalı."""
    return Carrier("Super tanker", CarrierCategory.HULL, weight, dimensions,
                   max_weight, container_dimensions)


def aircraft_carrier(weight, dimensions, max_weight, max_dimensions):
    """Güvertede veya iç ambarda taşır."""
    return Carrier("Aircraft carrier", CarrierCategory.DECK_AND_HOLD, weight, dimensions,
                   max_weight, max_dimensions)


def train(name, weight, dimensions, max_wagon_weight, max_wagon_dimensions, wagons=1):
    """
    Vagonlarla taşıyan tren.

    Limitler tek bir vagon içindir; ``wagons`` kaç tane olursa olsun kargo
    tek bir vagona sığmalıdır.
    """
    return _coupled(name, weight, dimensions, max_wagon_weight,
                    max_wagon_dimensions, wagons, 'wagons')


def oil_train(weight, dimensions, max_wagon_weight, max_wagon_dimensions):
    """Silindirik vagonlara araç konmaz."""
    return Carrier("Oil train", CarrierCategory.NO_STORAGE, weight, dimensions,
                   max_wagon_weight, max_wagon_dimensions)


def passenger_train(weight, dimensions, max_wagon_weight, max_wagon_dimensions):
    """
    Bisiklet, scooter gibi küçük araçlar vagon yüksekliğinin üçte birine sığmalı.

    Ağırlık limiti vagonun tamamıdır, sadece yükseklik bölünür.
    """
    max_wagon_weight = require_positive('max_wagon_weight', max_wagon_weight,
                                        ReasonCode.NON_POSITIVE_MAX_WEIGHT)
    return Carrier("Passenger train", CarrierCategory.COMPARTMENTED, weight, dimensions,
                   max_wagon_weight * PASSENGER_TRAIN_DECKS, max_wagon_dimensions,
                   compartments=PASSENGER_TRAIN_DECKS, compartment_axis='height')


CATALOGUE = {
    'vehicle': vehicle,
    'bicycle': bicycle,
    'car': car,
    'bolid': bolid,
    'wagon': wagon,
    'tardis': tardis,
    'ship': ship,
    'fish_boat': fish_boat,
    'super_tanker': super_tanker,
    'aircraft_carrier': aircraft_carrier,
    'train': train,
    'oil_train': oil_train,
    'passenger_train': passenger_train,
}


def build(kind, **params):
    """
    Katalogdan araç üretir.

    Args:
        kind: Araç türü ('bicycle', 'tardis', ...). Boşluk ve tire '_' sayılır.
        **params: Fabrika parametreleri

    Raises:
        InvalidParameter: Tür bilinmiyorsa (UNKNOWN_KIND), parametre eksikse
            (MISSING_FIELD) veya fazlaysa (UNEXPECTED_FIELD)
    """
    key = str(kind).strip().lower().replace(' ', '_').replace('-', '_')
    factory = CATALOGUE.get(key)
    if factory is None:
        raise InvalidParameter(ReasonCode.UNKNOWN_KIND, 'kind', kind)
    accepted = inspect.signature(factory).parameters
    unexpected = sorted(set(params) - set(accepted))
    if unexpected:
        raise InvalidParameter(ReasonCode.UNEXPECTED_FIELD, unexpected[0], params[unexpected[0]],
                               message=f"{key}: unexpected fields {unexpected}")
    missing = [name for name, p in accepted.items()
               if p.default is inspect.Parameter.empty and name not in params]
    if missing:
        raise InvalidParameter(ReasonCode.MISSING_FIELD, missing[0],
                               message=f"{key}: missing fields {missing}")

    carrier = factory(**params)
    logger.debug("Built %s from catalogue", carrier.name)
    return carrier
