"""Decoders turning interpreter output (normal-form lambda terms) into native values."""

from .church import decode_church_bool
from .clni import clni_to_int, decode_clni
from .rects import decode_rect, decode_rect_list, is_list_end

__all__ = [
    "clni_to_int",
    "decode_church_bool",
    "decode_clni",
    "decode_rect",
    "decode_rect_list",
    "is_list_end",
]
