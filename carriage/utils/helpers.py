"""
Yardımcı Fonksiyonlar
=====================

Filo seviyesinde sorgular: hangi taşıyıcı neyi taşır, doluluk oranı.
"""

from ..core.capacity import can_carry, effective_limits


def carriers_for(cargo, fleet):
    """
    Kargoyu taşıyabilecek taşıyıcılar (filo sırasıyla).

    Kargo nesnesinin kendisi listeden çıkarılır; bir araç kendini taşıyamaz.
    """
    return [carrier for carrier in fleet
            if carrier is not cargo and can_carry(carrier, cargo)]


def carry_matrix(fleet, cargo=None):
    """
    Her taşıyıcı için taşıyabildiği kargolar, filo sırasıyla.

    Katalog araçlarının adları sabittir (iki "Wagon" olabilir), bu yüzden
    sonuç ada göre değil sıraya göre tutulur.

    Args:
        fleet: Carrier listesi
        cargo: Carrier listesi (None ise filonun kendisi)

    Returns:
        list[tuple]: [(carrier, [cargo, ...]), ...]
    """
    if cargo is None:
        cargo = fleet

    return [(carrier, [item for item in cargo
                       if item is not carrier and can_carry(carrier, item)])
            for carrier in fleet]


def fill_ratio(carrier, cargo):
    """Kargo hacminin, taşıyıcının efektif limit hacmine oranı."""
    _, max_dimensions = effective_limits(carrier)
    return cargo.dimensions.volume / max_dimensions.volume


def describe(carrier):
    """Tek satırlık okunabilir özet."""
    d = carrier.dimensions
    m = carrier.max_dimensions
    text = (f"{carrier.name} [{carrier.category.value}] "
            f"{carrier.weight:g} t, {d.length:g}×{d.width:g}×{d.height:g} m | "
            f"max {carrier.max_weight:g} t, {m.length:g}×{m.width:g}×{m.height:g} m")
    if carrier.compartments > 1:
        text += f" / {carrier.compartments} ({carrier.compartment_axis})"
    return text
