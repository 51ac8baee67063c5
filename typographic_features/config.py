"""
Configuration constants for typographic feature requests.

Centralizes attribute key strings, font weights, and system font lookup.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

from .utils import validate_font_file


@dataclass(frozen=True)
class FeatureConfig:
    """Configuration for descriptors, fonts and reports."""

    # Descriptor attribute keys (Core Text spelling)
    FONT_URL_ATTRIBUTE: str = "NSCTFontFileURLAttribute"
    FONT_SIZE_ATTRIBUTE: str = "NSFontSizeAttribute"
    TRAITS_ATTRIBUTE: str = "NSCTFontTraitsAttribute"
    WEIGHT_TRAIT: str = "NSCTFontWeightTrait"
    FEATURE_SETTINGS_ATTRIBUTE: str = "NSCTFontFeatureSettingsAttribute"

    # Feature setting keys
    OPENTYPE_FEATURE_TAG: str = "CTFeatureOpenTypeTag"
    OPENTYPE_FEATURE_VALUE: str = "CTFeatureOpenTypeValue"
    FEATURE_TYPE_IDENTIFIER: str = "CTFeatureTypeIdentifier"
    FEATURE_SELECTOR_IDENTIFIER: str = "CTFeatureSelectorIdentifier"

    # Localized feature record keys
    FEATURE_TYPE_NAME_ID: str = "CTFeatureTypeNameID"
    FEATURE_TYPE_NAME: str = "CTFeatureTypeName"
    FEATURE_TYPE_EXCLUSIVE: str = "CTFeatureTypeExclusive"
    FEATURE_TYPE_SELECTORS: str = "CTFeatureTypeSelectors"
    FEATURE_SAMPLE_TEXT: str = "CTFeatureSampleText"
    FEATURE_TOOLTIP_TEXT: str = "CTFeatureTooltipText"
    FEATURE_SELECTOR_NAME_ID: str = "CTFeatureSelectorNameID"
    FEATURE_SELECTOR_NAME: str = "CTFeatureSelectorName"
    FEATURE_SELECTOR_DEFAULT: str = "CTFeatureSelectorDefault"

    # Report layout
    REPORT_SEPARATOR: str = "---------------------------"

    # Font weights
    WEIGHTS: Dict[str, float] = field(
        default_factory=lambda: {
            "ultraLight": -0.8,
            "thin": -0.6,
            "light": -0.4,
            "regular": 0.0,
            "medium": 0.23,
            "semibold": 0.3,
            "bold": 0.4,
            "heavy": 0.56,
            "black": 0.62,
        }
    )

    # System font lookup
    SYSTEM_FONT_ENV: str = "TYPOGRAPHIC_FEATURES_SYSTEM_FONT"
    SYSTEM_FONT_CANDIDATES: Tuple[str, ...] = (
        "/System/Library/Fonts/SFNS.ttf",
        "/System/Library/Fonts/SFNSText.ttf",
        "/Library/Fonts/SF-Pro.ttf",
        "/Library/Fonts/SF-Pro-Text-Regular.otf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/TTF/DejaVuSans.ttf",
    )
    DEFAULT_POINT_SIZE: float = 13.0

    # Windows language IDs used for name table lookups
    NAME_LANGUAGE_IDS: Dict[str, int] = field(
        default_factory=lambda: {
            "en": 0x0409,
            "ja": 0x0411,
            "de": 0x0407,
            "fr": 0x040C,
            "es": 0x0C0A,
            "it": 0x0410,
            "ko": 0x0412,
            "zh-Hans": 0x0804,
            "zh-Hant": 0x0404,
        }
    )

    def weight(self, name: str) -> float:
        """Return the numeric weight for a named weight (regular if unknown)."""
        return self.WEIGHTS.get(name, self.WEIGHTS["regular"])

    def system_font_path(self) -> Optional[Path]:
        """
        Locate the font file standing in for the system font.

        The environment variable wins over the built-in candidate list.

        Returns:
            Path to an existing font file, or None if nothing was found
        """
        override = os.environ.get(self.SYSTEM_FONT_ENV)
        if override:
            path = Path(override).expanduser()
            return path if validate_font_file(path) else None

        for candidate in self.SYSTEM_FONT_CANDIDATES:
            path = Path(candidate)
            if validate_font_file(path):
                return path
        return None


# Global configuration instance
CONFIG = FeatureConfig()
