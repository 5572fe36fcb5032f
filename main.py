#!/usr/bin/env python3
"""
Carriage Capacity Engine - Ana Giriş Noktası
=============================================

Filo tanımını JSON'dan okur, her taşıyıcı için hangi kargoyu
taşıyabileceğini raporlar.

Kullanım:
    python main.py                              # Varsayılan örnek dosya
    python main.py data/samples/fleet.json      # Belirli dosya
    python main.py --render                     # PNG görselleri de üret
"""

import sys
import os
import json
import argparse
import logging
import time

# Proje kökünü sys.path'e ekle
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from carriage.models import InvalidParameter
from carriage.utils.parser import parse_json_input, load_json_file
from carriage.utils.helpers import carry_matrix, describe, fill_ratio


def run_capacity_report(json_path, output_dir='output', render=False):
    """
    Kapasite raporunu üretir.

    Args:
        json_path: Girdi JSON dosya yolu
        output_dir: Çıktı klasörü
        render: True ise kabul edilen her çift için PNG üretilir

    Returns:
        dict: JSON rapor
    """
    print("=" * 70)
    print("  CARRIAGE CAPACITY ENGINE")
    print(f"  Girdi: {json_path}")
    print("=" * 70)

    # 1. Veriyi yükle
    json_data = load_json_file(json_path)
    carriers, cargo = parse_json_input(json_data)

    print(f"\n🚚 Taşıyıcı: {len(carriers)}")
    for carrier in carriers:
        print(f"   {describe(carrier)}")
    print(f"📦 Kargo: {len(cargo)}")

    start_time = time.time()

    # 2. Taşıma matrisi
    print("\n" + "=" * 50)
    print("  TAŞIMA MATRİSİ")
    print("=" * 50)

    matrix = carry_matrix(carriers, cargo)
    pairs = []
    for carrier, accepted in matrix:
        names = [item.name for item in accepted]
        mark = "✅" if accepted else "❌"
        print(f"  {mark} {carrier.name}: {', '.join(names) if names else '-'}")
        pairs.extend((carrier, item) for item in accepted)

    elapsed = time.time() - start_time

    # 3. Sonuç Raporu
    print("\n" + "=" * 70)
    print("  SONUÇ RAPORU")
    print("=" * 70)
    print(f"  Kabul edilen çift: {len(pairs)}")
    print(f"  Süre:              {elapsed:.4f} saniye")

    # 4. Görselleri kaydet
    if render:
        from carriage.utils.visualization import render_carriage_3d

        os.makedirs(os.path.join(output_dir, 'images'), exist_ok=True)
        for idx, (carrier, item) in enumerate(pairs):
            buf = render_carriage_3d(carrier, item)
            img_path = os.path.join(output_dir, 'images', f'pair_{idx + 1}.png')
            with open(img_path, 'wb') as f:
                f.write(buf.read())
            print(f"  📸 {img_path}")

    # JSON rapor
    report = {
        'input_file': json_path,
        'elapsed_seconds': round(elapsed, 4),
        'carriers': [describe(c) for c in carriers],
        'total_cargo': len(cargo),
        'matrix': [
            {
                'index': idx,
                'carrier': carrier.name,
                'cargo': [item.name for item in accepted],
            }
            for idx, (carrier, accepted) in enumerate(matrix)
        ],
        'pairs': [
            {
                'carrier': carrier.name,
                'cargo': item.name,
                'fill_ratio': round(fill_ratio(carrier, item), 4),
            }
            for carrier, item in pairs
        ],
    }

    os.makedirs(os.path.join(output_dir, 'reports'), exist_ok=True)
    report_path = os.path.join(output_dir, 'reports', 'carriage_result.json')
    with open(report_path, 'w', encoding='utf-8') as f:
        json.dump(report, f, indent=2, ensure_ascii=False)
    print(f"  📊 {report_path}")

    print("\n✅ Rapor tamamlandı.")
    return report


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Carriage Capacity Engine',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Örnekler:
  python main.py data/samples/fleet.json
  python main.py data/samples/fleet.json --render
  python main.py data/samples/fleet.json --output results/
        """
    )
    parser.add_argument('input', nargs='?', default=None,
                        help='Girdi JSON dosya yolu')
    parser.add_argument('--output', '-o', default='output',
                        help='Çıktı klasörü (varsayılan: output/)')
    parser.add_argument('--render', '-r', action='store_true',
                        help='Kabul edilen her çift için PNG üret')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='DEBUG seviyesinde log yaz')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s %(name)s %(levelname)s %(message)s')

    # Girdi dosyası kontrolü
    if args.input is None:
        # data/samples/ altındaki ilk JSON dosyasını bul
        samples_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data', 'samples')
        if os.path.exists(samples_dir):
            json_files = sorted([f for f in os.listdir(samples_dir) if f.endswith('.json')])
            if json_files:
                args.input = os.path.join(samples_dir, json_files[0])
                print(f"Varsayılan dosya: {args.input}")
            else:
                print("HATA: data/samples/ klasöründe JSON dosyası bulunamadı.")
                sys.exit(1)
        else:
            print("HATA: data/samples/ klasörü bulunamadı.")
            print("Kullanım: python main.py <girdi.json>")
            sys.exit(1)

    if not os.path.exists(args.input):
        print(f"HATA: Dosya bulunamadı: {args.input}")
        sys.exit(1)

    try:
        run_capacity_report(args.input, args.output, args.render)
    except json.JSONDecodeError as exc:
        print(f"HATA: Geçersiz JSON: {exc}")
        sys.exit(1)
    except InvalidParameter as exc:
        print(f"HATA: [{exc.reason.value}] {exc}")
        sys.exit(1)
    except OSError as exc:
        print(f"HATA: {exc}")
        sys.exit(1)


if __name__ == '__main__':
    main()
