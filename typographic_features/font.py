"""
Fonts constructed from descriptors.

Construction reads the descriptor's font file with fontTools and fails
(returns None) on combinations that cannot produce a font. Helpers that
derive a font from another fall back to the original when that happens.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Set

from .config import CONFIG
from .descriptor import FontDescriptor
from .features import FontAttributes, FontFeatures, SFProFeature
from .layout_types import aat_to_opentype
from .utils import get_feature_tags, get_language_system_tags, get_logger, open_font

log = get_logger(__name__)


class TypographicFeaturesError(Exception):
    """Base error for this package."""


class SystemFontNotFoundError(TypographicFeaturesError):
    """No usable font file stands in for the system font."""


def _is_int(value: Any) -> bool:
    return isinstance(value, int)


def malformed_setting_reason(setting: Mapping[str, Any]) -> Optional[str]:
    """Describe why a feature setting cannot be honored, or None if it can."""
    if CONFIG.OPENTYPE_FEATURE_TAG in setting:
        tag = setting[CONFIG.OPENTYPE_FEATURE_TAG]
        if not isinstance(tag, str) or len(tag) != 4 or not tag.isascii():
            return f"invalid OpenType tag {tag!r}"
        if not _is_int(setting.get(CONFIG.OPENTYPE_FEATURE_VALUE)):
            return f"invalid value for {tag!r}"
        return None
    if CONFIG.FEATURE_TYPE_IDENTIFIER in setting:
        if not _is_int(setting[CONFIG.FEATURE_TYPE_IDENTIFIER]):
            return "invalid feature type"
        if not _is_int(setting.get(CONFIG.FEATURE_SELECTOR_IDENTIFIER)):
            return "invalid feature selector"
        return None
    return f"unrecognized feature setting {dict(setting)!r}"


class Font:
    """A font at a point size, backed by a font file."""

    def __init__(
        self, descriptor: FontDescriptor, point_size: float, feature_tags: Set[str]
    ):
        self._descriptor = descriptor
        self._point_size = point_size
        self._feature_tags = frozenset(feature_tags)

    def __repr__(self) -> str:
        return (
            f"Font(path={str(self._descriptor.font_path)!r}, "
            f"size={self._point_size}, weight={self.weight})"
        )

    @classmethod
    def from_descriptor(
        cls, descriptor: FontDescriptor, size: float
    ) -> Optional["Font"]:
        """
        Construct a font from a descriptor.

        Args:
            descriptor: Descriptor naming a font file and feature settings
            size: Point size, must be positive

        Returns:
            Font, or None if the combination cannot produce a font
        """
        if isinstance(size, bool) or not isinstance(size, (int, float)) or size <= 0:
            log.debug("Rejecting point size %r", size)
            return None

        for setting in descriptor.feature_settings:
            reason = malformed_setting_reason(setting)
            if reason:
                log.debug("Rejecting descriptor: %s", reason)
                return None

        with open_font(descriptor.font_path) as ttfont:
            if ttfont is None:
                return None
            feature_tags = get_feature_tags(ttfont)

        font = cls(
            descriptor.adding_attributes({CONFIG.FONT_SIZE_ATTRIBUTE: size}),
            size,
            feature_tags,
        )
        for setting in descriptor.feature_settings:
            tag = setting.get(CONFIG.OPENTYPE_FEATURE_TAG)
            if tag is not None and tag not in feature_tags:
                log.debug("Font does not carry %r, setting ignored", tag)
        return font

    @property
    def font_descriptor(self) -> FontDescriptor:
        return self._descriptor

    @property
    def point_size(self) -> float:
        return self._point_size

    @property
    def traits(self) -> Dict[str, Any]:
        return self._descriptor.traits

    @property
    def weight(self) -> float:
        weight = self.traits.get(CONFIG.WEIGHT_TRAIT)
        if isinstance(weight, (int, float)):
            return float(weight)
        return CONFIG.weight("regular")

    @property
    def feature_tags(self) -> Set[str]:
        """Feature tags the font file declares."""
        return set(self._feature_tags)

    @property
    def language_system_tags(self) -> List[str]:
        """
        OpenType language-system tags from the GSUB/GPOS script lists.

        These are tags such as "TRK" or "JAN", not BCP 47 language codes,
        and the default language system of each script is not listed.
        """
        with open_font(self._descriptor.font_path) as ttfont:
            if ttfont is None:
                return []
            return get_language_system_tags(ttfont)

    def active_opentype_features(self) -> Dict[str, int]:
        """
        Requested feature settings the font can act on.

        AAT type/selector settings are translated to their OpenType
        equivalent; settings for features the font lacks are left out.
        """
        active: Dict[str, int] = {}
        for setting in self._descriptor.feature_settings:
            if CONFIG.OPENTYPE_FEATURE_TAG in setting:
                record = (
                    setting[CONFIG.OPENTYPE_FEATURE_TAG],
                    setting[CONFIG.OPENTYPE_FEATURE_VALUE],
                )
            else:
                record = aat_to_opentype(
                    setting[CONFIG.FEATURE_TYPE_IDENTIFIER],
                    setting[CONFIG.FEATURE_SELECTOR_IDENTIFIER],
                )
            if record and record[0] in self._feature_tags:
                active[record[0]] = record[1]
        return active

    def adding_font_features(self, features: FontFeatures) -> Optional["Font"]:
        new_descriptor = self._descriptor.adding_font_features(features)
        return Font.from_descriptor(new_descriptor, self._point_size)

    def adding_font_attributes(self, attributes: FontAttributes) -> Optional["Font"]:
        new_descriptor = self._descriptor.adding_font_attributes(attributes)
        return Font.from_descriptor(new_descriptor, self._point_size)

    def system_font_with_sf_pro_features(
        self, features: Iterable[SFProFeature]
    ) -> "Font":
        return system_font(self._point_size, self.weight, features)


def system_font_descriptor(weight: float = 0.0) -> FontDescriptor:
    """Descriptor for the configured system font."""
    path = CONFIG.system_font_path()
    if path is None:
        raise SystemFontNotFoundError(
            f"No system font found; set {CONFIG.SYSTEM_FONT_ENV} to a font file"
        )
    return FontDescriptor.with_file(path, weight=weight)


def _base_system_font(size: float, weight: float) -> Font:
    descriptor = system_font_descriptor(weight)
    font = Font.from_descriptor(descriptor, size)
    if font is None:
        raise SystemFontNotFoundError(
            f"System font {descriptor.font_path} cannot be used at size {size!r}"
        )
    return font


def system_font(
    size: float,
    weight: float = 0.0,
    features: Optional[Iterable[SFProFeature]] = None,
) -> Font:
    """
    System font, optionally with SF Pro features enabled.

    Falls back to the plain system font if the feature combination cannot
    produce a font.
    """
    base = _base_system_font(size, weight)
    if features is None:
        return base

    attributes = FontAttributes()
    attributes.add_sf_pro_features(features)
    return base.adding_font_attributes(attributes) or base


def monospaced_digit_system_font(size: float, weight: float = 0.0) -> Font:
    base = _base_system_font(size, weight)
    features = FontFeatures()
    features.number_spacing_mono_digit()
    return base.adding_font_features(features) or base


def system_font_with_capital_forms(size: float, weight: float = 0.0) -> Font:
    base = _base_system_font(size, weight)
    features = FontFeatures()
    features.case_sensitive(True)
    return base.adding_font_features(features) or base
