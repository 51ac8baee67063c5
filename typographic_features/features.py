"""
Feature request builders.

FontFeatures accumulates legacy AAT type/selector pairs, FontAttributes
accumulates OpenType tag/value records. Both keep at most one entry per key
and serialize into the descriptor feature-settings format. Values are not
validated here; a descriptor built from bad values fails later, when a font
is constructed from it.

Syntax for OpenType features in CSS:
https://helpx.adobe.com/fonts/using/open-type-syntax.html
"""

from enum import Enum
from typing import Dict, Iterable, Iterator, List, Tuple

from . import layout_types as lt
from .config import CONFIG


class SFProFeature(Enum):
    """Named SF Pro glyph variants, in serialization order."""

    MONOSPACED_DIGIT = "monospacedDigit"
    STRAIGHT_SIDED_6_9 = "straightSided_6_9"
    OPEN_4 = "open_4"
    SLASHED_0 = "slashed_0"
    SERIFFED_CAPITAL_J = "seriffedCapital_J"
    SERIFFED_CAPITAL_I = "seriffedCapital_I"
    VERTICALLY_CENTERED_COLON = "verticallyCenteredColon"
    TAILED_LOWERCASE_L = "tailedLowercase_l"
    ONE_STOREY_A = "oneStorey_a"
    SMALL_DOLLAR_SIGN = "smallDollarSign"
    SERIFFED_DIGIT_1 = "seriffedDigit_1"
    OPEN_CURRENCIES = "openCurrencies"
    HIGH_LEGIBILITY = "highLegibility"
    CALCULATOR = "calculator"


# SF Pro feature -> OpenType tag enabled by it
SF_PRO_FEATURE_TAGS: Dict[SFProFeature, str] = {
    SFProFeature.MONOSPACED_DIGIT: "tnum",
    SFProFeature.STRAIGHT_SIDED_6_9: "cv01",
    SFProFeature.OPEN_4: "cv02",
    SFProFeature.SLASHED_0: "cv08",
    SFProFeature.SERIFFED_CAPITAL_J: "cv03",
    SFProFeature.SERIFFED_CAPITAL_I: "cv05",
    SFProFeature.VERTICALLY_CENTERED_COLON: "cv04",
    SFProFeature.TAILED_LOWERCASE_L: "cv06",
    SFProFeature.ONE_STOREY_A: "cv07",
    SFProFeature.SMALL_DOLLAR_SIGN: "cv09",
    SFProFeature.SERIFFED_DIGIT_1: "cv12",
    SFProFeature.OPEN_CURRENCIES: "ss04",
    SFProFeature.HIGH_LEGIBILITY: "ss06",
    SFProFeature.CALCULATOR: "ss09",
}


class FontFeatures:
    """Ordered AAT type/selector pairs, one per feature type."""

    def __init__(self):
        self._features: List[Tuple[int, int]] = []

    @property
    def entries(self) -> List[Tuple[int, int]]:
        return list(self._features)

    def __len__(self) -> int:
        return len(self._features)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(list(self._features))

    def __repr__(self) -> str:
        return f"FontFeatures({self._features!r})"

    def remove_feature(self, feature_type: int):
        """Drop the entry for a feature type, if any."""
        self._features = [f for f in self._features if f[0] != feature_type]

    def add_feature(self, feature_type: int, selector: int):
        """
        Set the selector for a feature type.

        An existing entry for the type is replaced and the new one moves to
        the end. Re-adding an identical pair leaves the order untouched.
        """
        pair = (feature_type, selector)
        if pair in self._features:
            return
        self.remove_feature(feature_type)
        self._features.append(pair)

    # More layout info: SFNTLayoutTypes.h

    def case_sensitive(self, is_on: bool):
        selector = (
            lt.kCaseSensitiveLayoutOnSelector
            if is_on
            else lt.kCaseSensitiveLayoutOffSelector
        )
        self.add_feature(lt.kCaseSensitiveLayoutType, selector)

    def number_spacing_mono_digit(self):
        self.add_feature(lt.kNumberSpacingType, lt.kMonospacedNumbersSelector)

    def number_spacing_proportional_digit(self):
        self.add_feature(lt.kNumberSpacingType, lt.kProportionalNumbersSelector)

    def text_spacing_mono_text(self):
        self.add_feature(lt.kTextSpacingType, lt.kMonospacedTextSelector)

    def text_spacing_proportional_text(self):
        self.add_feature(lt.kTextSpacingType, lt.kProportionalTextSelector)

    def text_spacing_half_width_text(self):
        self.add_feature(lt.kTextSpacingType, lt.kHalfWidthTextSelector)

    def extras_slashed_zero(self, is_on: bool):
        selector = lt.kSlashedZeroOnSelector if is_on else lt.kSlashedZeroOffSelector
        self.add_feature(lt.kTypographicExtrasType, selector)

    def contextual_alternates(self, is_on: bool):
        selector = (
            lt.kContextualAlternatesOnSelector
            if is_on
            else lt.kContextualAlternatesOffSelector
        )
        self.add_feature(lt.kContextualAlternatesType, selector)

    def sf_pro_vertically_centered_colon(self, is_on: bool = True):
        """
        Legacy form of SF Pro's vertically centered colon.

        SF Pro declares the colon as type 35, selector 6, which lines up with
        the third stylistic alternative. FontAttributes.sf_pro_vertically_centered_colon
        is the OpenType form (cv04).
        """
        selector = (
            lt.kStylisticAltThreeOnSelector
            if is_on
            else lt.kStylisticAltThreeOffSelector
        )
        self.add_feature(lt.kStylisticAlternativesType, selector)

    def feature_settings(self) -> List[Dict[str, int]]:
        """Serialize as one type/selector mapping per entry."""
        return [
            {
                CONFIG.FEATURE_TYPE_IDENTIFIER: feature_type,
                CONFIG.FEATURE_SELECTOR_IDENTIFIER: selector,
            }
            for feature_type, selector in self._features
        ]


class FontAttributes:
    """Ordered OpenType tag/value records, one per tag."""

    def __init__(self):
        self._attributes: List[Tuple[str, int]] = []

    @property
    def entries(self) -> List[Tuple[str, int]]:
        return list(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(list(self._attributes))

    def __repr__(self) -> str:
        return f"FontAttributes({self._attributes!r})"

    def is_contained(self, tag: str) -> bool:
        return any(t == tag for t, _ in self._attributes)

    def remove_feature(self, tag: str):
        """Drop the record for a tag, if any."""
        self._attributes = [a for a in self._attributes if a[0] != tag]

    def add_opentype_feature(self, tag: str, value: int):
        """
        Set the value for an OpenType feature tag.

        An existing record for the tag is replaced and the new one moves to
        the end. Re-adding an identical record leaves the order untouched.
        """
        record = (tag, value)
        if record in self._attributes:
            return
        self.remove_feature(tag)
        self._attributes.append(record)

    def _toggle(self, tag: str, is_on: bool):
        self.add_opentype_feature(tag, 1 if is_on else 0)

    def settings(self) -> Dict[str, List[Dict[str, object]]]:
        """Serialize under the feature-settings descriptor attribute."""
        return {
            CONFIG.FEATURE_SETTINGS_ATTRIBUTE: [
                {CONFIG.OPENTYPE_FEATURE_TAG: tag, CONFIG.OPENTYPE_FEATURE_VALUE: value}
                for tag, value in self._attributes
            ]
        }

    # Standard features

    def common_ligatures(self, is_on: bool):
        """Enabled by default."""
        self._toggle("liga", is_on)
        self._toggle("clig", is_on)

    def discretionary_ligatures(self, is_on: bool):
        self._toggle("dlig", is_on)

    def contextual_alternates(self, is_on: bool):
        """Enabled by default."""
        self._toggle("calt", is_on)

    def small_caps(self, is_on: bool):
        self._toggle("smcp", is_on)

    def capitals_to_small_caps(self, is_on: bool):
        self._toggle("c2sc", is_on)

    def swashes(self, is_on: bool):
        self._toggle("swsh", is_on)

    def stylistic_alternates(self, is_on: bool):
        self._toggle("salt", is_on)

    def lining_figures(self, is_on: bool):
        self._toggle("lnum", is_on)

    def old_style_figures(self, is_on: bool):
        self._toggle("onum", is_on)

    def proportional_figures(self, is_on: bool):
        self._toggle("pnum", is_on)

    def tabular_figures(self, is_on: bool):
        self._toggle("tnum", is_on)

    def fractions(self, is_on: bool):
        self._toggle("frac", is_on)

    def ordinals(self, is_on: bool):
        self._toggle("ordn", is_on)

    def proportional_widths(self, is_on: bool):
        self._toggle("pwid", is_on)

    def proportional_alternate_widths(self, is_on: bool):
        self._toggle("palt", is_on)

    def full_widths(self, is_on: bool):
        self._toggle("fwid", is_on)

    def half_widths(self, is_on: bool):
        self._toggle("hwid", is_on)

    def alternate_half_widths(self, is_on: bool):
        self._toggle("halt", is_on)

    def third_widths(self, is_on: bool):
        self._toggle("twid", is_on)

    def quarter_widths(self, is_on: bool):
        self._toggle("qwid", is_on)

    def alternate_annotation_forms(self, is_on: bool):
        self._toggle("nalt", is_on)

    def italics(self, is_on: bool):
        self._toggle("ital", is_on)

    def kerning(self, is_on: bool):
        self._toggle("kern", is_on)

    def glyph_composition(self, is_on: bool):
        """Enabled by default."""
        self._toggle("ccmp", is_on)

    def localized_forms(self, is_on: bool):
        """Enabled by default."""
        self._toggle("locl", is_on)

    def superscript(self, is_on: bool):
        self._toggle("sups", is_on)

    def subscript(self, is_on: bool):
        self._toggle("subs", is_on)

    # Vertical forms

    def vertical_kerning(self, is_on: bool):
        # https://helpx.adobe.com/fonts/using/open-type-syntax.html#vkrn
        self._toggle("vkrn", is_on)
        self._toggle("vpal", is_on)

    def vertical_alternates(self, is_on: bool):
        """Enabled by default."""
        self._toggle("vert", is_on)

    def proportional_alternate_vertical_metrics(self, is_on: bool):
        self._toggle("vpal", is_on)

    def alternate_vertical_half_metrics(self, is_on: bool):
        self._toggle("vhal", is_on)

    def vertical_kana_alternates(self, is_on: bool):
        self._toggle("vkna", is_on)

    # Japanese

    def jis78_forms(self, is_on: bool):
        self._toggle("jp78", is_on)

    def jis83_forms(self, is_on: bool):
        self._toggle("jp83", is_on)

    def jis90_forms(self, is_on: bool):
        self._toggle("jp90", is_on)

    def jis2004_forms(self, is_on: bool):
        self._toggle("jp04", is_on)

    def proportional_kana(self, is_on: bool):
        self._toggle("pkna", is_on)

    def horizontal_kana_alternates(self, is_on: bool):
        self._toggle("hkna", is_on)

    def ruby_notation_forms(self, is_on: bool):
        self._toggle("ruby", is_on)

    def nlc_kanji_forms(self, is_on: bool):
        self._toggle("nlck", is_on)

    def traditional_forms(self, is_on: bool):
        self._toggle("trad", is_on)

    # Character variants / stylistic sets
    # https://learn.microsoft.com/en-us/typography/opentype/spec/features_ae#tag-cv01--cv99

    def character_variant(self, number: int, is_on: bool = True):
        """Toggle cvNN (1-99)."""
        self._toggle(f"cv{number:02d}", is_on)

    def stylistic_set(self, number: int, is_on: bool = True):
        """Toggle ssNN (1-20)."""
        self._toggle(f"ss{number:02d}", is_on)

    # SF Pro

    def add_sf_pro_feature(self, feature: SFProFeature, is_on: bool = True):
        self._toggle(SF_PRO_FEATURE_TAGS[feature], is_on)

    def add_sf_pro_features(self, features: Iterable[SFProFeature]):
        """Enable a set of SF Pro features in declaration order."""
        wanted = set(features)
        for feature in SFProFeature:
            if feature in wanted:
                self.add_sf_pro_feature(feature)

    def sf_pro_monospaced_digit(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.MONOSPACED_DIGIT, is_on)

    def sf_pro_straight_sided_6_9(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.STRAIGHT_SIDED_6_9, is_on)

    def sf_pro_open_4(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.OPEN_4, is_on)

    def sf_pro_seriffed_capital_j(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.SERIFFED_CAPITAL_J, is_on)

    def sf_pro_vertically_centered_colon(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.VERTICALLY_CENTERED_COLON, is_on)

    def sf_pro_seriffed_capital_i(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.SERIFFED_CAPITAL_I, is_on)

    def sf_pro_tailed_lowercase_l(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.TAILED_LOWERCASE_L, is_on)

    def sf_pro_one_storey_a(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.ONE_STOREY_A, is_on)

    def sf_pro_slashed_0(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.SLASHED_0, is_on)

    def sf_pro_small_dollar_sign(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.SMALL_DOLLAR_SIGN, is_on)

    def sf_pro_seriffed_digit_1(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.SERIFFED_DIGIT_1, is_on)

    def sf_pro_open_currencies(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.OPEN_CURRENCIES, is_on)

    def sf_pro_high_legibility(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.HIGH_LEGIBILITY, is_on)

    def sf_pro_calculator(self, is_on: bool = True):
        self.add_sf_pro_feature(SFProFeature.CALCULATOR, is_on)
