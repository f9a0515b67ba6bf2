"""
Render settings.

Settings are plain dataclasses that can be loaded from a dict or a JSON file
and converted into the engine's :class:`LayoutOptions` and :class:`PageConfig`.
Margins are given in millimetres; everything the engine receives is in points.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from reportlab.lib.pagesizes import A4, A5, LEGAL, LETTER

from .engine.layout_primitives import Alignment, LayoutOptions, PageConfig
from .exceptions import ConfigurationError
from .utils.units import mm_to_points

logger = logging.getLogger(__name__)

PAPER_SIZES = {
    "a4": A4,
    "a5": A5,
    "letter": LETTER,
    "legal": LEGAL,
}

PAGE_NUMBER_STYLES = ("arabic", "roman", "letters")
PAGE_NUMBER_POSITIONS = ("top", "bottom")


def _to_alignment(value: Union[Alignment, str]) -> Alignment:
    if isinstance(value, Alignment):
        return value
    try:
        return Alignment(str(value).strip().lower())
    except ValueError:
        raise ConfigurationError("Unknown alignment", repr(value)) from None


def _build(cls, data: Any, section: str):
    """Instantiate dataclass ``cls`` from a mapping, rejecting unknown keys."""
    if data is None:
        return cls()
    if isinstance(data, cls):
        return data
    if not isinstance(data, dict):
        raise ConfigurationError(f"Section '{section}' must be an object", type(data).__name__)
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown keys in '{section}'", ", ".join(unknown))
    try:
        return cls(**data)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid '{section}' settings", str(exc)) from exc


@dataclass(slots=True)
class FontSettings:
    """Font family, size (pt), line height multiplier and alignment of one text role."""

    family: str = "Helvetica"
    size: float = 12.0
    line_height: float = 1.2
    alignment: Alignment = Alignment.LEFT

    def __post_init__(self) -> None:
        if not self.family or not isinstance(self.family, str):
            raise ConfigurationError("Font family must be a non-empty string")
        if not isinstance(self.size, (int, float)) or self.size <= 0:
            raise ConfigurationError("Font size must be positive", repr(self.size))
        if not isinstance(self.line_height, (int, float)) or self.line_height <= 0:
            raise ConfigurationError("Line height must be positive", repr(self.line_height))
        self.alignment = _to_alignment(self.alignment)


@dataclass(slots=True)
class PageNumberingConfig:
    """Where and how page numbers are printed."""

    enabled: bool = True
    position: str = "bottom"
    alignment: Alignment = Alignment.CENTER
    style: str = "arabic"
    start: int = 1

    def __post_init__(self) -> None:
        if self.position not in PAGE_NUMBER_POSITIONS:
            raise ConfigurationError("Page number position must be 'top' or 'bottom'", repr(self.position))
        if self.style not in PAGE_NUMBER_STYLES:
            raise ConfigurationError("Unknown page number style", repr(self.style))
        self.alignment = _to_alignment(self.alignment)
        if self.alignment is Alignment.JUSTIFY:
            raise ConfigurationError("Page numbers cannot be justified")
        if not isinstance(self.start, int) or self.start < 1:
            raise ConfigurationError("Page numbering must start at 1 or later", repr(self.start))


@dataclass(slots=True)
class Margins:
    """Page margins in millimetres."""

    top: float = 25.4
    right: float = 25.4
    bottom: float = 25.4
    left: float = 25.4

    def __post_init__(self) -> None:
        for name in ("top", "right", "bottom", "left"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or value < 0:
                raise ConfigurationError(f"Margin '{name}' must be a non-negative number", repr(value))


@dataclass(slots=True)
class RenderSettings:
    """
    Complete settings of one PDF build.

    Args:
        paper_size: One of ``a4``, ``a5``, ``letter``, ``legal``
        margins_mm: Page margins in millimetres
        paragraph: Body text font
        footer: Page number font
        page_numbering: Page number placement
        indentation_em: Extra left indentation of every block, in em
        paragraph_spacing: Vertical gap after each text block, in points
    """

    paper_size: str = "a4"
    margins_mm: Margins = field(default_factory=Margins)
    paragraph: FontSettings = field(default_factory=FontSettings)
    footer: FontSettings = field(default_factory=lambda: FontSettings(size=10.0, alignment=Alignment.CENTER))
    page_numbering: PageNumberingConfig = field(default_factory=PageNumberingConfig)
    indentation_em: float = 0.0
    paragraph_spacing: float = 0.0

    def __post_init__(self) -> None:
        self.paper_size = str(self.paper_size).strip().lower()
        if self.paper_size not in PAPER_SIZES:
            raise ConfigurationError("Unknown paper size", repr(self.paper_size))
        if self.indentation_em < 0:
            raise ConfigurationError("indentation_em must be non-negative", repr(self.indentation_em))
        if self.paragraph_spacing < 0:
            raise ConfigurationError("paragraph_spacing must be non-negative", repr(self.paragraph_spacing))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderSettings":
        if not isinstance(data, dict):
            raise ConfigurationError("Settings must be a JSON object", type(data).__name__)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError("Unknown settings keys", ", ".join(unknown))

        values = dict(data)
        values["margins_mm"] = _build(Margins, data.get("margins_mm"), "margins_mm")
        values["paragraph"] = _build(FontSettings, data.get("paragraph"), "paragraph")
        if "footer" in data:
            values["footer"] = _build(FontSettings, data["footer"], "footer")
        values["page_numbering"] = _build(PageNumberingConfig, data.get("page_numbering"), "page_numbering")
        return cls(**values)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "RenderSettings":
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigurationError("Cannot read settings file", f"{path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigurationError("Settings file is not valid JSON", f"{path}: {exc}") from exc
        logger.debug("Loaded settings from %s", path)
        return cls.from_dict(data)

    def with_overrides(self, align: Optional[str] = None, font_size: Optional[float] = None) -> "RenderSettings":
        """Copy of the settings with the body alignment and/or font size replaced."""
        paragraph = self.paragraph
        if align is not None:
            paragraph = replace(paragraph, alignment=_to_alignment(align))
        if font_size is not None:
            paragraph = replace(paragraph, size=font_size)
        return replace(self, paragraph=paragraph)

    def to_page_config(self) -> PageConfig:
        width, height = PAPER_SIZES[self.paper_size]
        margins = self.margins_mm
        try:
            return PageConfig(
                page_width=width,
                page_height=height,
                margin_top=mm_to_points(margins.top),
                margin_right=mm_to_points(margins.right),
                margin_bottom=mm_to_points(margins.bottom),
                margin_left=mm_to_points(margins.left),
            )
        except ValueError as exc:
            raise ConfigurationError("Invalid page geometry", str(exc)) from exc

    def to_layout_options(self, page: Optional[PageConfig] = None) -> LayoutOptions:
        page = page or self.to_page_config()
        paragraph = self.paragraph
        return LayoutOptions(
            max_width=page.content_width,
            align=paragraph.alignment,
            font_size=float(paragraph.size),
            line_spacing=float(paragraph.line_height),
            font_family=paragraph.family,
            indentation_em=float(self.indentation_em),
            paragraph_spacing=float(self.paragraph_spacing),
        )
