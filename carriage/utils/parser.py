"""
JSON Girdi Parser'ı
===================

Filo ve kargo tanımlarını JSON'dan değer nesnelerine çevirir.

Girdi formatı:
    {
        "carriers": [
            {"name": "Truck", "category": "standard", "weight": 8,
             "dimensions": [10, 2.5, 3], "max_weight": 20,
             "max_dimensions": {"length": 8, "width": 2.4, "height": 2.6}},
            {"kind": "tardis"}
        ],
        "cargo": [ ... ]
    }

``cargo`` verilmezse taşıyıcıların kendisi kargo adayı kabul edilir.
"""

import json
import logging
from collections.abc import Mapping, Sequence

from ..core.fleet import build
from ..models import AXES, Carrier, Dimensions, InvalidParameter, ReasonCode

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('name', 'category', 'weight', 'dimensions', 'max_weight', 'max_dimensions')
DIMENSION_FIELDS = ('dimensions', 'max_dimensions', 'max_trailer_dimensions',
                    'max_wagon_dimensions', 'container_dimensions')


def as_dimensions(value, field='dimensions'):
    """
    [l, w, h] listesi, {"length", "width", "height"} sözlüğü veya
    Dimensions nesnesini Dimensions'a çevirir.
    """
    if isinstance(value, Dimensions):
        return value
    if isinstance(value, Mapping):
        missing = [axis for axis in AXES if axis not in value]
        if missing:
            raise InvalidParameter(ReasonCode.INVALID_DIMENSIONS, field, value,
                                   message=f"{field}: missing axes {missing}")
        return Dimensions(*(value[axis] for axis in AXES))
    if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 3:
        return Dimensions(*value)
    raise InvalidParameter(ReasonCode.INVALID_DIMENSIONS, field, value)


def parse_carrier(entry):
    """
    Tek bir JSON girdisini Carrier nesnesine çevirir.

    ``kind`` anahtarı varsa katalog fabrikası kullanılır, yoksa tüm
    alanlar açıkça verilmelidir.
    """
    if not isinstance(entry, Mapping):
        raise InvalidParameter(ReasonCode.MISSING_FIELD, 'entry', entry,
                               message="carrier entry must be an object")

    params = dict(entry)
    for field in DIMENSION_FIELDS:
        if field in params:
            params[field] = as_dimensions(params[field], field)

    if 'kind' in params:
        kind = params.pop('kind')
        return build(kind, **params)

    for field in REQUIRED_FIELDS:
        if field not in params:
            raise InvalidParameter(ReasonCode.MISSING_FIELD, field)

    return Carrier(
        name=params['name'],
        category=params['category'],
        weight=params['weight'],
        dimensions=params['dimensions'],
        max_weight=params['max_weight'],
        max_dimensions=params['max_dimensions'],
        compartments=params.get('compartments', 1),
        compartment_axis=params.get('compartment_axis', 'length'),
    )


def _entries(json_data, field):
    """Alan bir JSON dizisi olmalı; sayı, null veya metin reddedilir."""
    value = json_data[field]
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidParameter(ReasonCode.MISSING_FIELD, field, value,
                               message=f"{field}: expected a list of entries, got {type(value).__name__}")
    return value


def parse_json_input(json_data):
    """
    JSON verisini parse eder.

    Args:
        json_data: dict (load_json_file çıktısı)

    Returns:
        tuple: (carriers, cargo) - iki Carrier listesi
    """
    if not isinstance(json_data, Mapping):
        raise InvalidParameter(ReasonCode.MISSING_FIELD, 'carriers', json_data,
                               message="input must be a JSON object")
    if 'carriers' not in json_data:
        raise InvalidParameter(ReasonCode.MISSING_FIELD, 'carriers')

    carriers = [parse_carrier(entry) for entry in _entries(json_data, 'carriers')]

    if 'cargo' in json_data:
        cargo = [parse_carrier(entry) for entry in _entries(json_data, 'cargo')]
    else:
        cargo = list(carriers)

    logger.info("Parsed %d carriers, %d cargo items", len(carriers), len(cargo))
    return carriers, cargo


def load_json_file(path):
    """JSON dosyasını UTF-8 olarak okur."""
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)
