"""
Feature introspection for font descriptors.

Lists every feature type a font declares, in the record layout Core Text
uses for its localized feature attributes, and prints it as a plain text
report. Fields the font does not provide are left out of the records.
"""

import sys
from typing import Any, Dict, List, Optional, Set, TextIO

from fontTools.ttLib import TTFont

from .config import CONFIG
from .descriptor import FontDescriptor
from .layout_types import (
    DEFAULT_ON_FEATURES,
    FEATURE_FLAG_DEFAULT_INDEX,
    FEATURE_FLAG_EXCLUSIVE,
    OPENTYPE_TO_AAT,
    aat_to_opentype,
    feature_name,
)
from .utils import get_logger, open_font

log = get_logger(__name__)

FeatureRecord = Dict[str, Any]


def _lookup_name(font: TTFont, name_id: Optional[int], language: Optional[str]) -> Optional[str]:
    """Resolve a name ID, preferring the requested language."""
    if not name_id or "name" not in font:
        return None
    name_table = font["name"]
    lang_id = CONFIG.NAME_LANGUAGE_IDS.get(language) if language else None
    if lang_id is not None:
        record = name_table.getName(name_id, 3, 1, lang_id)
        if record is not None:
            return record.toUnicode()
    return name_table.getDebugName(name_id)


def _aat_feature_records(font: TTFont, language: Optional[str]) -> List[FeatureRecord]:
    """Records from the AAT 'feat' table."""
    if "feat" not in font:
        return []

    records = []
    table = font["feat"].table
    feature_names = getattr(table, "FeatureNames", None)
    for feature in getattr(feature_names, "FeatureName", None) or []:
        feature_type = feature.FeatureType
        flags = getattr(feature, "FeatureFlags", 0) or 0
        exclusive = bool(flags & FEATURE_FLAG_EXCLUSIVE)
        default_index = flags & 0xFF if flags & FEATURE_FLAG_DEFAULT_INDEX else 0

        record: FeatureRecord = {
            CONFIG.FEATURE_TYPE_IDENTIFIER: feature_type,
            CONFIG.FEATURE_TYPE_NAME_ID: feature.FeatureNameID,
            CONFIG.FEATURE_TYPE_EXCLUSIVE: exclusive,
        }
        name = _lookup_name(font, feature.FeatureNameID, language)
        if name:
            record[CONFIG.FEATURE_TYPE_NAME] = name

        settings = getattr(getattr(feature, "Settings", None), "Setting", None) or []
        selectors = []
        for index, setting in enumerate(settings):
            selector: FeatureRecord = {
                CONFIG.FEATURE_SELECTOR_IDENTIFIER: setting.SettingValue,
                CONFIG.FEATURE_SELECTOR_NAME_ID: setting.SettingNameID,
            }
            name = _lookup_name(font, setting.SettingNameID, language)
            if name:
                selector[CONFIG.FEATURE_SELECTOR_NAME] = name

            opentype = aat_to_opentype(feature_type, setting.SettingValue)
            if opentype:
                selector[CONFIG.OPENTYPE_FEATURE_TAG] = opentype[0]
                selector[CONFIG.OPENTYPE_FEATURE_VALUE] = opentype[1]

            if exclusive:
                is_default = index == default_index
            elif opentype and opentype[0] in DEFAULT_ON_FEATURES:
                is_default = opentype[1] == 1
            else:
                # Non-exclusive selectors come in on/off pairs; off is odd
                is_default = setting.SettingValue % 2 == 1
            selector[CONFIG.FEATURE_SELECTOR_DEFAULT] = is_default
            selectors.append(selector)

        if selectors:
            record[CONFIG.FEATURE_TYPE_SELECTORS] = selectors
        records.append(record)
    return records


def _opentype_feature_params(font: TTFont) -> Dict[str, Any]:
    """First FeatureParams found for each GSUB/GPOS feature tag."""
    params: Dict[str, Any] = {}
    order: List[str] = []
    for table_tag in ("GSUB", "GPOS"):
        if table_tag not in font:
            continue
        table = font[table_tag].table
        if not getattr(table, "FeatureList", None):
            continue
        for frec in table.FeatureList.FeatureRecord:
            tag = frec.FeatureTag
            if tag not in order:
                order.append(tag)
            feature_params = getattr(frec.Feature, "FeatureParams", None)
            if feature_params is not None and tag not in params:
                params[tag] = feature_params
    return {tag: params.get(tag) for tag in order}


def _opentype_feature_records(
    font: TTFont, language: Optional[str], covered: Set[str]
) -> List[FeatureRecord]:
    """Records for GSUB/GPOS features not already described by 'feat'."""
    records = []
    for tag, feature_params in _opentype_feature_params(font).items():
        if tag in covered:
            continue

        aat = OPENTYPE_TO_AAT.get(tag)
        record: FeatureRecord = {}
        if aat:
            record[CONFIG.FEATURE_TYPE_IDENTIFIER] = aat[0]

        name_id = None
        if feature_params is not None:
            # Stylistic sets carry UINameID, character variants FeatUILabelNameID
            name_id = getattr(feature_params, "UINameID", None) or getattr(
                feature_params, "FeatUILabelNameID", None
            )
        if name_id:
            record[CONFIG.FEATURE_TYPE_NAME_ID] = name_id
        name = _lookup_name(font, name_id, language) or feature_name(tag)
        if name:
            record[CONFIG.FEATURE_TYPE_NAME] = name

        record[CONFIG.OPENTYPE_FEATURE_TAG] = tag
        record[CONFIG.FEATURE_TYPE_EXCLUSIVE] = bool(aat) and aat[2] is None

        if feature_params is not None:
            sample = _lookup_name(
                font, getattr(feature_params, "SampleTextNameID", None), language
            )
            if sample:
                record[CONFIG.FEATURE_SAMPLE_TEXT] = sample
            tooltip = _lookup_name(
                font, getattr(feature_params, "FeatUITooltipTextNameID", None), language
            )
            if tooltip:
                record[CONFIG.FEATURE_TOOLTIP_TEXT] = tooltip

        default_on = tag in DEFAULT_ON_FEATURES
        on_selector: FeatureRecord = {}
        if aat:
            on_selector[CONFIG.FEATURE_SELECTOR_IDENTIFIER] = aat[1]
        on_selector[CONFIG.FEATURE_SELECTOR_NAME] = "On"
        on_selector[CONFIG.OPENTYPE_FEATURE_TAG] = tag
        on_selector[CONFIG.OPENTYPE_FEATURE_VALUE] = 1
        on_selector[CONFIG.FEATURE_SELECTOR_DEFAULT] = default_on
        selectors = [on_selector]

        if not aat or aat[2] is not None:
            off_selector: FeatureRecord = {}
            if aat:
                off_selector[CONFIG.FEATURE_SELECTOR_IDENTIFIER] = aat[2]
            off_selector[CONFIG.FEATURE_SELECTOR_NAME] = "Off"
            off_selector[CONFIG.OPENTYPE_FEATURE_TAG] = tag
            off_selector[CONFIG.OPENTYPE_FEATURE_VALUE] = 0
            off_selector[CONFIG.FEATURE_SELECTOR_DEFAULT] = not default_on
            selectors.append(off_selector)

        record[CONFIG.FEATURE_TYPE_SELECTORS] = selectors
        records.append(record)
    return records


def localized_attributes(
    descriptor: FontDescriptor, language: Optional[str] = None
) -> List[FeatureRecord]:
    """
    Feature type records available for a descriptor's font.

    Args:
        descriptor: Descriptor naming the font file
        language: Language code for names (e.g. "en", "ja"); None picks the
            font's default

    Returns:
        List of feature records, empty if the font cannot be read
    """
    with open_font(descriptor.font_path) as font:
        if font is None:
            return []

        records = _aat_feature_records(font, language)
        covered = {
            selector[CONFIG.OPENTYPE_FEATURE_TAG]
            for record in records
            for selector in record.get(CONFIG.FEATURE_TYPE_SELECTORS, [])
            if CONFIG.OPENTYPE_FEATURE_TAG in selector
        }
        records.extend(_opentype_feature_records(font, language, covered))

    log.debug("Found %d feature records in %s", len(records), descriptor.font_path)
    return records


def format_localized_attributes(records: List[FeatureRecord]) -> List[str]:
    """Render feature records as report lines."""
    lines = []
    for record in records:
        if CONFIG.FEATURE_TYPE_IDENTIFIER in record:
            lines.append(f"Feature Type ID: {record[CONFIG.FEATURE_TYPE_IDENTIFIER]}")
        if CONFIG.FEATURE_TYPE_NAME_ID in record:
            lines.append(f"Feature Type Name ID: {record[CONFIG.FEATURE_TYPE_NAME_ID]}")
        if CONFIG.FEATURE_TYPE_NAME in record:
            lines.append(f"Feature Type Name: {record[CONFIG.FEATURE_TYPE_NAME]}")
        if CONFIG.OPENTYPE_FEATURE_TAG in record:
            lines.append(f"OpenType Feature Tag: {record[CONFIG.OPENTYPE_FEATURE_TAG]}")

        exclusive = record.get(CONFIG.FEATURE_TYPE_EXCLUSIVE) is True
        lines.append(f"Is exclusive: {'YES' if exclusive else 'NO'}")

        if CONFIG.FEATURE_SAMPLE_TEXT in record:
            lines.append(f"Sample: {record[CONFIG.FEATURE_SAMPLE_TEXT]}")

        selectors = record.get(CONFIG.FEATURE_TYPE_SELECTORS)
        if selectors is not None:
            lines.append("Feature selectors:")
            for selector in selectors:
                if CONFIG.FEATURE_SELECTOR_IDENTIFIER in selector:
                    lines.append(
                        f"  Selector ID: {selector[CONFIG.FEATURE_SELECTOR_IDENTIFIER]}"
                    )
                if CONFIG.FEATURE_SELECTOR_NAME_ID in selector:
                    lines.append(
                        f"  Selector Name ID: {selector[CONFIG.FEATURE_SELECTOR_NAME_ID]}"
                    )
                if CONFIG.FEATURE_SELECTOR_NAME in selector:
                    lines.append(
                        f"  Selector Name: {selector[CONFIG.FEATURE_SELECTOR_NAME]}"
                    )
                if CONFIG.OPENTYPE_FEATURE_TAG in selector:
                    lines.append(
                        f"  OpenType Feature Tag: {selector[CONFIG.OPENTYPE_FEATURE_TAG]}"
                    )
                if CONFIG.OPENTYPE_FEATURE_VALUE in selector:
                    lines.append(
                        f"  OpenType Feature Value: {selector[CONFIG.OPENTYPE_FEATURE_VALUE]}"
                    )
                is_default = selector.get(CONFIG.FEATURE_SELECTOR_DEFAULT) is True
                lines.append(f"  Is default: {'YES' if is_default else 'NO'}")
                lines.append("")
                lines.append("")

        if CONFIG.FEATURE_TOOLTIP_TEXT in record:
            lines.append(f"Tooltip: {record[CONFIG.FEATURE_TOOLTIP_TEXT]}")

        lines.append(CONFIG.REPORT_SEPARATOR)
    return lines


def print_localized_attributes(
    descriptor: FontDescriptor,
    language: Optional[str] = None,
    stream: Optional[TextIO] = None,
):
    """Write the feature report for a descriptor's font to a stream."""
    stream = stream or sys.stdout
    for line in format_localized_attributes(localized_attributes(descriptor, language)):
        print(line, file=stream)
