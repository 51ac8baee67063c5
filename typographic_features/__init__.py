"""
Typographic features library.

Builders for OpenType and AAT font feature requests, font descriptors that
carry them, and a report of the features a font declares.
"""

__all__ = [
    "CONFIG",
    "FontFeatures",
    "FontAttributes",
    "SFProFeature",
    "SF_PRO_FEATURE_TAGS",
    "FontDescriptor",
    "Font",
    "TypographicFeaturesError",
    "SystemFontNotFoundError",
    "system_font",
    "monospaced_digit_system_font",
    "system_font_with_capital_forms",
    "localized_attributes",
    "format_localized_attributes",
    "print_localized_attributes",
    "OperationResult",
    "ResultLevel",
    "ResultMessage",
    "FeatureDemoController",
]

# Import main exports for convenience
from typographic_features.config import CONFIG
from typographic_features.features import (
    FontFeatures,
    FontAttributes,
    SFProFeature,
    SF_PRO_FEATURE_TAGS,
)
from typographic_features.descriptor import FontDescriptor
from typographic_features.font import (
    Font,
    TypographicFeaturesError,
    SystemFontNotFoundError,
    system_font,
    monospaced_digit_system_font,
    system_font_with_capital_forms,
)
from typographic_features.introspection import (
    localized_attributes,
    format_localized_attributes,
    print_localized_attributes,
)
from typographic_features.results import (
    OperationResult,
    ResultLevel,
    ResultMessage,
)
from typographic_features.demo import FeatureDemoController
