#!/usr/bin/env python3
"""
Show SF Pro glyph variants switching on and off.

Builds the demo labels on the system font, flips the feature switch, lists
which OpenType features each label's font acts on, and prints the feature
report for the sample label.
"""

import argparse
import os
import sys

from rich.table import Table

import typographic_features.console as cs
from typographic_features.config import CONFIG
from typographic_features.demo import FEATURE_LABELS, FeatureDemoController
from typographic_features.font import SystemFontNotFoundError
from typographic_features.utils import configure_logging


def render_labels(controller: FeatureDemoController, active) -> Table:
    """Table of labels, their text and the features their font acts on."""
    table = Table(title=f"SF Pro features {'ON' if controller.is_on else 'OFF'}")
    table.add_column("Label")
    table.add_column("Text")
    table.add_column("Requested")
    table.add_column("Active")

    requested = {identifier: features for identifier, _, features in FEATURE_LABELS}
    for identifier, label in controller.labels.items():
        wanted = requested.get(identifier)
        table.add_row(
            identifier,
            label.text,
            ", ".join(sorted(f.value for f in wanted)) if wanted and controller.is_on else "-",
            ", ".join(f"{tag}={value}" for tag, value in active[identifier].items())
            or "-",
        )
    return table


def main():
    """Main entry point for the feature demo CLI."""
    parser = argparse.ArgumentParser(
        description="Toggle SF Pro typographic features on demo labels"
    )
    parser.add_argument(
        "--font",
        "-f",
        type=str,
        help=f"Font file to use as the system font (default: ${CONFIG.SYSTEM_FONT_ENV} "
        "or a platform font)",
    )
    parser.add_argument(
        "--size",
        "-s",
        type=float,
        default=CONFIG.DEFAULT_POINT_SIZE,
        help="Point size of the labels",
    )
    parser.add_argument(
        "--weight",
        "-w",
        choices=sorted(CONFIG.WEIGHTS),
        default="regular",
        help="Font weight of the labels",
    )
    state = parser.add_mutually_exclusive_group()
    state.add_argument(
        "--on",
        dest="is_on",
        action="store_true",
        default=True,
        help="Switch features on (default)",
    )
    state.add_argument(
        "--off",
        dest="is_on",
        action="store_false",
        help="Switch features off",
    )
    parser.add_argument(
        "--language",
        "-l",
        type=str,
        help="Language code for feature names in the report (e.g. en, ja)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show detailed output",
    )

    args = parser.parse_args()
    configure_logging(args.verbose)

    if args.font:
        os.environ[CONFIG.SYSTEM_FONT_ENV] = args.font

    try:
        controller = FeatureDemoController(
            point_size=args.size,
            weight=CONFIG.weight(args.weight),
            language=args.language,
        )
        controller.view_did_load()
        result = controller.switch_sf_features(args.is_on)
    except SystemFontNotFoundError as e:
        cs.StatusIndicator("error").add_message(str(e)).emit()
        return 1

    cs.emit("")
    cs.console.print(render_labels(controller, result.data))
    result.emit_all()

    return 0


if __name__ == "__main__":
    sys.exit(main())
