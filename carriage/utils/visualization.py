"""
3D Görselleştirme
=================

Taşıyıcının efektif yük alanını tel kafes kutu, kargoyu ise dolu kutu
olarak çizer. Çıktı PNG (BytesIO).
"""

import hashlib
import io

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from ..core.capacity import can_carry, effective_limits


def color_for(label):
    """Etikete göre deterministik renk (#rrggbb)."""
    digest = hashlib.md5(str(label).encode('utf-8')).hexdigest()
    r, g, b = (int(digest[i:i + 2], 16) for i in (0, 2, 4))
    # Çok koyu renkleri aç
    r, g, b = (96 + c * 159 // 255 for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def _box_faces(x, y, z, length, width, height):
    """Kutunun 6 yüzünün köşe listesi."""
    p = [
        (x, y, z), (x + length, y, z), (x + length, y + width, z), (x, y + width, z),
        (x, y, z + height), (x + length, y, z + height),
        (x + length, y + width, z + height), (x, y + width, z + height),
    ]
    return [
        [p[0], p[1], p[2], p[3]],  # alt
        [p[4], p[5], p[6], p[7]],  # üst
        [p[0], p[1], p[5], p[4]],  # ön
        [p[2], p[3], p[7], p[6]],  # arka
        [p[1], p[2], p[6], p[5]],  # sağ
        [p[0], p[3], p[7], p[4]],  # sol
    ]


def render_carriage_3d(carrier, cargo, title=None):
    """
    Taşıyıcı + kargo 3D görseli.

    Args:
        carrier: Carrier nesnesi
        cargo: Carrier nesnesi
        title: Başlık (None ise otomatik)

    Returns:
        io.BytesIO: PNG verisi (başa sarılmış)
    """
    _, space = effective_limits(carrier)
    item = cargo.dimensions

    fig = plt.figure(figsize=(8, 6))
    ax = fig.add_subplot(111, projection='3d')

    ax.add_collection3d(Poly3DCollection(
        _box_faces(0, 0, 0, space.length, space.width, space.height),
        facecolors=(0, 0, 0, 0), edgecolors='#444444', linewidths=1.0, linestyles='--'
    ))
    ax.add_collection3d(Poly3DCollection(
        _box_faces(0, 0, 0, item.length, item.width, item.height),
        facecolors=color_for(cargo.name), edgecolors='black', linewidths=0.5, alpha=0.8
    ))

    limit = max(space.length, space.width, space.height,
                item.length, item.width, item.height)
    ax.set_xlim(0, limit)
    ax.set_ylim(0, limit)
    ax.set_zlim(0, limit)
    ax.set_xlabel('Length (m)')
    ax.set_ylabel('Width (m)')
    ax.set_zlabel('Height (m)')

    if title is None:
        verdict = 'OK' if can_carry(carrier, cargo) else 'NO'
        title = f"{carrier.name} ← {cargo.name}: {verdict}"
    ax.set_title(title)

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=80, bbox_inches='tight')
    plt.close(fig)
    buf.seek(0)
    return buf
