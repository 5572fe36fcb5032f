"""
Yardımcı Araçlar
================

JSON parser, filo sorguları ve görselleştirme.
"""

from .parser import as_dimensions, load_json_file, parse_carrier, parse_json_input
from .helpers import carriers_for, carry_matrix, describe, fill_ratio

__all__ = [
    'as_dimensions',
    'carriers_for',
    'carry_matrix',
    'describe',
    'fill_ratio',
    'load_json_file',
    'parse_carrier',
    'parse_json_input',
]
