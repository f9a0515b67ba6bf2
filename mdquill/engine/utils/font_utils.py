from __future__ import annotations

from typing import Optional

STANDARD_FAMILIES = {
    "Helvetica": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"),
    "Times-Roman": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "Courier": ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
}

MONOSPACE_FAMILY = "Courier"

FONT_FALLBACKS = {
    "arial": "Helvetica",
    "arial mt": "Helvetica",
    "calibri": "Helvetica",
    "helvetica": "Helvetica",
    "sans-serif": "Helvetica",
    "segoe ui": "Helvetica",
    "tahoma": "Helvetica",
    "verdana": "Helvetica",
    "cambria": "Times-Roman",
    "georgia": "Times-Roman",
    "serif": "Times-Roman",
    "times": "Times-Roman",
    "times-roman": "Times-Roman",
    "times new roman": "Times-Roman",
    "courier": "Courier",
    "courier new": "Courier",
    "consolas": "Courier",
    "lucida console": "Courier",
    "monospace": "Courier",
}


def _normalize_base_font(font_name: Optional[str]) -> str:
    if not font_name:
        return "Helvetica"

    cleaned = font_name.strip()
    if not cleaned:
        return "Helvetica"

    if cleaned in STANDARD_FAMILIES:
        return cleaned

    return FONT_FALLBACKS.get(cleaned.lower(), cleaned)


def resolve_font_variant(font_name: Optional[str], bold: bool, italic: bool, monospace: bool = False) -> str:
    """
    Map a family name plus style flags onto a concrete font name.

    Standard PDF families resolve to their built-in variants; any other
    (registered TrueType) family gets ``-Bold``/``-Italic``/``-BoldItalic``
    suffixes.
    """
    base = MONOSPACE_FAMILY if monospace else _normalize_base_font(font_name)

    variants = STANDARD_FAMILIES.get(base)
    if variants is not None:
        regular, bold_name, italic_name, bold_italic = variants
        if bold and italic:
            return bold_italic
        if bold:
            return bold_name
        if italic:
            return italic_name
        return regular

    if bold and italic:
        return f"{base}-BoldItalic"
    if bold:
        return f"{base}-Bold"
    if italic:
        return f"{base}-Italic"
    return base
