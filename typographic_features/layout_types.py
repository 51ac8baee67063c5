"""
Feature constants from Apple's font feature registry and the OpenType spec.

AAT feature types and selectors follow CoreText/SFNTLayoutTypes.h:
https://developer.apple.com/fonts/TrueType-Reference-Manual/RM09/AppendixF.html

OpenType feature tags follow the Microsoft registry:
https://learn.microsoft.com/en-us/typography/opentype/spec/featuretags
"""

from typing import Dict, Optional, Set, Tuple

# AAT feature types
kLigaturesType = 1
kVerticalSubstitutionType = 4
kNumberSpacingType = 6
kVerticalPositionType = 10
kFractionsType = 11
kTypographicExtrasType = 14
kCharacterShapeType = 20
kNumberCaseType = 21
kTextSpacingType = 22
kRubyKanaType = 28
kItalicCJKRomanType = 32
kCaseSensitiveLayoutType = 33
kAlternateKanaType = 34
kStylisticAlternativesType = 35
kContextualAlternatesType = 36
kLowerCaseType = 37
kUpperCaseType = 38

# kLigaturesType
kCommonLigaturesOnSelector = 2
kCommonLigaturesOffSelector = 3
kRareLigaturesOnSelector = 4
kRareLigaturesOffSelector = 5
kContextualLigaturesOnSelector = 18
kContextualLigaturesOffSelector = 19

# kVerticalSubstitutionType
kSubstituteVerticalFormsOnSelector = 0
kSubstituteVerticalFormsOffSelector = 1

# kNumberSpacingType
kMonospacedNumbersSelector = 0
kProportionalNumbersSelector = 1

# kVerticalPositionType
kNormalPositionSelector = 0
kSuperiorsSelector = 1
kInferiorsSelector = 2
kOrdinalsSelector = 3

# kFractionsType
kNoFractionsSelector = 0
kDiagonalFractionsSelector = 2

# kTypographicExtrasType
kSlashedZeroOnSelector = 4
kSlashedZeroOffSelector = 5

# kCharacterShapeType
kTraditionalCharactersSelector = 0
kJIS1978CharactersSelector = 2
kJIS1983CharactersSelector = 3
kJIS1990CharactersSelector = 4
kJIS2004CharactersSelector = 11
kNLCCharactersSelector = 13

# kNumberCaseType
kLowerCaseNumbersSelector = 0
kUpperCaseNumbersSelector = 1

# kTextSpacingType
kProportionalTextSelector = 0
kMonospacedTextSelector = 1
kHalfWidthTextSelector = 2
kThirdWidthTextSelector = 3
kQuarterWidthTextSelector = 4
kAltProportionalTextSelector = 5
kAltHalfWidthTextSelector = 6

# kRubyKanaType
kRubyKanaOnSelector = 2
kRubyKanaOffSelector = 3

# kItalicCJKRomanType
kCJKItalicRomanOnSelector = 2
kCJKItalicRomanOffSelector = 3

# kCaseSensitiveLayoutType
kCaseSensitiveLayoutOnSelector = 0
kCaseSensitiveLayoutOffSelector = 1

# kAlternateKanaType
kAlternateHorizKanaOnSelector = 0
kAlternateHorizKanaOffSelector = 1
kAlternateVertKanaOnSelector = 2
kAlternateVertKanaOffSelector = 3

# kStylisticAlternativesType
kStylisticAltThreeOnSelector = 6
kStylisticAltThreeOffSelector = 7

# kContextualAlternatesType
kContextualAlternatesOnSelector = 0
kContextualAlternatesOffSelector = 1
kSwashAlternatesOnSelector = 2
kSwashAlternatesOffSelector = 3

# kLowerCaseType / kUpperCaseType
kDefaultLowerCaseSelector = 0
kLowerCaseSmallCapsSelector = 1
kDefaultUpperCaseSelector = 0
kUpperCaseSmallCapsSelector = 1

# AAT feature type flags ('feat' table)
FEATURE_FLAG_EXCLUSIVE = 0x8000
FEATURE_FLAG_DEFAULT_INDEX = 0x4000


# OpenType tag -> (AAT type, "on" selector, "off" selector or None for
# exclusive types whose selectors have no off state)
OPENTYPE_TO_AAT: Dict[str, Tuple[int, int, Optional[int]]] = {
    "liga": (kLigaturesType, kCommonLigaturesOnSelector, kCommonLigaturesOffSelector),
    "dlig": (kLigaturesType, kRareLigaturesOnSelector, kRareLigaturesOffSelector),
    "clig": (
        kLigaturesType,
        kContextualLigaturesOnSelector,
        kContextualLigaturesOffSelector,
    ),
    "vert": (
        kVerticalSubstitutionType,
        kSubstituteVerticalFormsOnSelector,
        kSubstituteVerticalFormsOffSelector,
    ),
    "tnum": (kNumberSpacingType, kMonospacedNumbersSelector, None),
    "pnum": (kNumberSpacingType, kProportionalNumbersSelector, None),
    "sups": (kVerticalPositionType, kSuperiorsSelector, kNormalPositionSelector),
    "subs": (kVerticalPositionType, kInferiorsSelector, kNormalPositionSelector),
    "ordn": (kVerticalPositionType, kOrdinalsSelector, kNormalPositionSelector),
    "frac": (kFractionsType, kDiagonalFractionsSelector, kNoFractionsSelector),
    "zero": (kTypographicExtrasType, kSlashedZeroOnSelector, kSlashedZeroOffSelector),
    "trad": (kCharacterShapeType, kTraditionalCharactersSelector, None),
    "jp78": (kCharacterShapeType, kJIS1978CharactersSelector, None),
    "jp83": (kCharacterShapeType, kJIS1983CharactersSelector, None),
    "jp90": (kCharacterShapeType, kJIS1990CharactersSelector, None),
    "jp04": (kCharacterShapeType, kJIS2004CharactersSelector, None),
    "nlck": (kCharacterShapeType, kNLCCharactersSelector, None),
    "onum": (kNumberCaseType, kLowerCaseNumbersSelector, None),
    "lnum": (kNumberCaseType, kUpperCaseNumbersSelector, None),
    "pwid": (kTextSpacingType, kProportionalTextSelector, None),
    "fwid": (kTextSpacingType, kMonospacedTextSelector, None),
    "hwid": (kTextSpacingType, kHalfWidthTextSelector, None),
    "twid": (kTextSpacingType, kThirdWidthTextSelector, None),
    "qwid": (kTextSpacingType, kQuarterWidthTextSelector, None),
    "palt": (kTextSpacingType, kAltProportionalTextSelector, None),
    "halt": (kTextSpacingType, kAltHalfWidthTextSelector, None),
    "ruby": (kRubyKanaType, kRubyKanaOnSelector, kRubyKanaOffSelector),
    "ital": (kItalicCJKRomanType, kCJKItalicRomanOnSelector, kCJKItalicRomanOffSelector),
    "case": (
        kCaseSensitiveLayoutType,
        kCaseSensitiveLayoutOnSelector,
        kCaseSensitiveLayoutOffSelector,
    ),
    "hkna": (
        kAlternateKanaType,
        kAlternateHorizKanaOnSelector,
        kAlternateHorizKanaOffSelector,
    ),
    "vkna": (
        kAlternateKanaType,
        kAlternateVertKanaOnSelector,
        kAlternateVertKanaOffSelector,
    ),
    "calt": (
        kContextualAlternatesType,
        kContextualAlternatesOnSelector,
        kContextualAlternatesOffSelector,
    ),
    "swsh": (
        kContextualAlternatesType,
        kSwashAlternatesOnSelector,
        kSwashAlternatesOffSelector,
    ),
    "smcp": (kLowerCaseType, kLowerCaseSmallCapsSelector, kDefaultLowerCaseSelector),
    "c2sc": (kUpperCaseType, kUpperCaseSmallCapsSelector, kDefaultUpperCaseSelector),
}

# ss01-ss20 map onto kStylisticAlternativesType, two selectors per set
for _ss_num in range(1, 21):
    OPENTYPE_TO_AAT[f"ss{_ss_num:02d}"] = (
        kStylisticAlternativesType,
        _ss_num * 2,
        _ss_num * 2 + 1,
    )
del _ss_num

# Features the shaper turns on without being asked
DEFAULT_ON_FEATURES: Set[str] = {
    "calt",
    "ccmp",
    "clig",
    "kern",
    "liga",
    "locl",
    "mark",
    "mkmk",
    "rlig",
    "vert",
}

# English names for feature tags without a name in the font
FEATURE_NAMES: Dict[str, str] = {
    "c2sc": "Small Capitals From Capitals",
    "calt": "Contextual Alternates",
    "case": "Case-Sensitive Forms",
    "ccmp": "Glyph Composition / Decomposition",
    "clig": "Contextual Ligatures",
    "dlig": "Discretionary Ligatures",
    "frac": "Fractions",
    "fwid": "Full Widths",
    "halt": "Alternate Half Widths",
    "hkna": "Horizontal Kana Alternates",
    "hwid": "Half Widths",
    "ital": "Italics",
    "jp04": "JIS2004 Forms",
    "jp78": "JIS78 Forms",
    "jp83": "JIS83 Forms",
    "jp90": "JIS90 Forms",
    "kern": "Kerning",
    "liga": "Standard Ligatures",
    "lnum": "Lining Figures",
    "locl": "Localized Forms",
    "nalt": "Alternate Annotation Forms",
    "nlck": "NLC Kanji Forms",
    "onum": "Oldstyle Figures",
    "ordn": "Ordinals",
    "palt": "Proportional Alternate Widths",
    "pkna": "Proportional Kana",
    "pnum": "Proportional Figures",
    "pwid": "Proportional Widths",
    "qwid": "Quarter Widths",
    "ruby": "Ruby Notation Forms",
    "salt": "Stylistic Alternates",
    "smcp": "Small Capitals",
    "subs": "Subscript",
    "sups": "Superscript",
    "swsh": "Swash",
    "tnum": "Tabular Figures",
    "trad": "Traditional Forms",
    "twid": "Third Widths",
    "vert": "Vertical Alternates",
    "vhal": "Alternate Vertical Half Metrics",
    "vkna": "Vertical Kana Alternates",
    "vkrn": "Vertical Kerning",
    "vpal": "Proportional Alternate Vertical Metrics",
    "zero": "Slashed Zero",
}


def feature_name(tag: str) -> Optional[str]:
    """Return the registered English name for a feature tag."""
    if tag in FEATURE_NAMES:
        return FEATURE_NAMES[tag]
    if len(tag) == 4 and tag[2:].isdigit():
        if tag.startswith("ss"):
            return f"Stylistic Set {int(tag[2:])}"
        if tag.startswith("cv"):
            return f"Character Variant {int(tag[2:])}"
    return None


def aat_to_opentype(feature_type: int, selector: int) -> Optional[Tuple[str, int]]:
    """
    Translate an AAT type/selector pair to its OpenType tag and value.

    An "off" selector shared by several tags of one type (the normal
    vertical position turns off sups, subs and ordn alike) names no single
    feature and has no equivalent.

    Returns:
        (tag, value) tuple, or None if the registry has no equivalent
    """
    off_tags = []
    for tag, (aat_type, on_selector, off_selector) in OPENTYPE_TO_AAT.items():
        if aat_type != feature_type:
            continue
        if selector == on_selector:
            return tag, 1
        if off_selector is not None and selector == off_selector:
            off_tags.append(tag)
    if len(off_tags) == 1:
        return off_tags[0], 0
    return None
