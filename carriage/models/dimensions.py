"""
Boyut Modeli
============

Uzunluk, genişlik ve yükseklik ile belirlenen kapladığı alan.
Birimler metre (m), hacim metreküp (m³).
"""

from dataclasses import dataclass, replace

from .errors import InvalidParameter, ReasonCode, require_count, require_positive

AXES = ('length', 'width', 'height')


@dataclass(frozen=True)
class Dimensions:
    """
    Değişmez boyut nesnesi.

    Attributes:
        length (float): Uzunluk (m) - X ekseni
        width (float):  Genişlik (m) - Y ekseni
        height (float): Yükseklik (m) - Z ekseni
    """

    length: float
    width: float
    height: float

    def __post_init__(self):
        for axis in AXES:
            value = require_positive(axis, getattr(self, axis), ReasonCode.NON_POSITIVE_DIMENSION)
            object.__setattr__(self, axis, value)

    @property
    def volume(self) -> float:
        """Toplam hacim (m³)."""
        return self.length * self.width * self.height

    def as_tuple(self):
        return (self.length, self.width, self.height)

    def fits(self, other) -> bool:
        """``other`` bu boyutların içine (döndürmeden) sığar mı?"""
        return (other.length <= self.length and
                other.width <= self.width and
                other.height <= self.height)

    def divided(self, parts, axis='length'):
        """
        Tek bir ekseni ``parts`` eşit parçaya böler.

        Args:
            parts: Bölme sayısı (>= 1 tam sayı)
            axis: 'length', 'width' veya 'height'

        Returns:
            Dimensions: Bir parçanın boyutları
        """
        if axis not in AXES:
            raise InvalidParameter(ReasonCode.INVALID_AXIS, 'axis', axis)
        parts = require_count('parts', parts)
        return replace(self, **{axis: getattr(self, axis) / parts})

    def stacked(self, count, axis='length'):
        """``count`` adet kopyanın tek eksende yan yana dizilmiş boyutu. ``divided`` tersidir."""
        if axis not in AXES:
            raise InvalidParameter(ReasonCode.INVALID_AXIS, 'axis', axis)
        count = require_count('count', count)
        return replace(self, **{axis: getattr(self, axis) * count})

    def __repr__(self):
        return f"Dimensions({self.length}x{self.width}x{self.height})"
