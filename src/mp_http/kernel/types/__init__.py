"""Kernel value types — public re-export surface.

Modules:
  headers.py — Headers (case-insensitive multimap), canonical_header_key
  params.py  — Params, iter_params
"""

from mp_http.kernel.types.headers import HeaderValues, Headers, HeadersLike, canonical_header_key
from mp_http.kernel.types.params import ParamValues, Params, iter_params

__all__ = [
    "HeaderValues",
    "Headers",
    "HeadersLike",
    "ParamValues",
    "Params",
    "canonical_header_key",
    "iter_params",
]
