"""
One-screen demo: labels switching between the plain system font and SF Pro
glyph variants.

Each label is listed once, together with the features it shows, so the
switch handler is a loop over that table.
"""

import sys
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, TextIO, Tuple

from .config import CONFIG
from .features import FontAttributes, SFProFeature
from .font import Font, monospaced_digit_system_font, system_font
from .introspection import print_localized_attributes
from .results import OperationResult
from .utils import get_logger

log = get_logger(__name__)

SAMPLE_LABEL = "sf_sample"

# (label, text shown, features requested when the switch is on)
FEATURE_LABELS: List[Tuple[str, str, FrozenSet[SFProFeature]]] = [
    ("sf_69", "6 9", frozenset({SFProFeature.STRAIGHT_SIDED_6_9})),
    ("sf_4", "4", frozenset({SFProFeature.OPEN_4})),
    ("sf_0", "0", frozenset({SFProFeature.SLASHED_0})),
    ("sf_1", "1", frozenset({SFProFeature.SERIFFED_DIGIT_1})),
    (
        "sf_IJ",
        "I J",
        frozenset({SFProFeature.SERIFFED_CAPITAL_I, SFProFeature.SERIFFED_CAPITAL_J}),
    ),
    ("sf_l", "l", frozenset({SFProFeature.TAILED_LOWERCASE_L})),
    ("sf_a", "a", frozenset({SFProFeature.ONE_STOREY_A})),
    ("sf_colon", "12:30", frozenset({SFProFeature.VERTICALLY_CENTERED_COLON})),
    ("sf_dollarsign", "$", frozenset({SFProFeature.SMALL_DOLLAR_SIGN})),
    ("sf_openCurrencies", "€ £ ¥", frozenset({SFProFeature.OPEN_CURRENCIES})),
]

SAMPLE_TEXT = "Illegal 0O 1l 69 4 $12:30 €100"
SAMPLE_FEATURES: FrozenSet[SFProFeature] = frozenset(
    {
        SFProFeature.STRAIGHT_SIDED_6_9,
        SFProFeature.OPEN_4,
        SFProFeature.SLASHED_0,
        SFProFeature.SERIFFED_DIGIT_1,
        SFProFeature.SERIFFED_CAPITAL_I,
        SFProFeature.SERIFFED_CAPITAL_J,
        SFProFeature.ONE_STOREY_A,
        SFProFeature.VERTICALLY_CENTERED_COLON,
        SFProFeature.SMALL_DOLLAR_SIGN,
        SFProFeature.OPEN_CURRENCIES,
        SFProFeature.MONOSPACED_DIGIT,
    }
)


@dataclass
class Label:
    """Text shown in a font."""

    identifier: str
    text: str
    font: Font

    def set_sf_features(self, features: FrozenSet[SFProFeature]):
        self.font = self.font.system_font_with_sf_pro_features(features)

    def set_default_system_font(self):
        self.font = system_font(self.font.point_size, self.font.weight)

    def set_monospaced_digit_system_font(self):
        self.font = monospaced_digit_system_font(self.font.point_size, self.font.weight)


class FeatureDemoController:
    """Owns the demo labels and handles the feature switch."""

    def __init__(
        self,
        point_size: float = CONFIG.DEFAULT_POINT_SIZE,
        weight: float = 0.0,
        report_stream: Optional[TextIO] = None,
        language: Optional[str] = None,
    ):
        self.report_stream = report_stream
        self.language = language
        self.is_on = False

        base = system_font(point_size, weight)
        self.labels: Dict[str, Label] = {
            identifier: Label(identifier, text, base)
            for identifier, text, _ in FEATURE_LABELS
        }
        self.labels[SAMPLE_LABEL] = Label(SAMPLE_LABEL, SAMPLE_TEXT, base)

    @property
    def sample_label(self) -> Label:
        return self.labels[SAMPLE_LABEL]

    def view_did_load(self):
        self.sample_label.set_monospaced_digit_system_font()

    def switch_sf_features(self, is_on: bool) -> OperationResult:
        """
        Apply the switch state to every label.

        The whole feature set is reapplied on each call.

        Returns:
            OperationResult whose data maps label ids to the OpenType
            features their font acts on
        """
        result = OperationResult()
        self.is_on = is_on

        if is_on:
            for identifier, _, features in FEATURE_LABELS:
                self.labels[identifier].set_sf_features(features)

            sample = self.sample_label
            sample.set_sf_features(SAMPLE_FEATURES)

            attributes = FontAttributes()
            attributes.alternate_half_widths(True)
            half_width = sample.font.adding_font_attributes(attributes)
            if half_width is None:
                result.add_warning(
                    "Alternate half widths unavailable",
                    details="Sample label keeps its previous font",
                )
            else:
                sample.font = half_width
        else:
            for identifier, _, _ in FEATURE_LABELS:
                self.labels[identifier].set_default_system_font()
            self.sample_label.set_monospaced_digit_system_font()

        active = {
            identifier: label.font.active_opentype_features()
            for identifier, label in self.labels.items()
        }
        result.data = active

        if is_on:
            missing = [
                identifier
                for identifier, _, _ in FEATURE_LABELS
                if not active[identifier]
            ]
            if missing:
                result.add_warning(
                    f"Font lacks the requested glyph variants for {len(missing)} label(s)",
                    details=", ".join(missing),
                )
        result.add_success(f"SF Pro features switched {'on' if is_on else 'off'}")
        log.debug("Active features: %s", active)

        print_localized_attributes(
            self.sample_label.font.font_descriptor,
            language=self.language,
            stream=self.report_stream or sys.stdout,
        )
        return result
