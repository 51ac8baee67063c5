from pathlib import Path

import pytest

from fontTools.feaLib.builder import addOpenTypeFeaturesFromString
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import newTable
from fontTools.ttLib.tables import otTables

from typographic_features.config import CONFIG

GLYPH_ORDER = [
    ".notdef",
    "space",
    "zero",
    "zero.slash",
    "one",
    "one.tnum",
    "four",
    "four.open",
    "colon",
    "colon.center",
    "a",
    "a.single",
    "dollar",
    "dollar.open",
]

CMAP = {
    0x20: "space",
    0x24: "dollar",
    0x30: "zero",
    0x31: "one",
    0x34: "four",
    0x3A: "colon",
    0x61: "a",
}

FEATURES = """
languagesystem DFLT dflt;
languagesystem latn dflt;
languagesystem latn TRK;

feature tnum {
    sub one by one.tnum;
} tnum;

feature cv02 {
    sub four by four.open;
} cv02;

feature cv04 {
    sub colon by colon.center;
} cv04;

feature cv07 {
    sub a by a.single;
} cv07;

feature cv08 {
    cvParameters {
        FeatUILabelNameID {
            name "Slashed zero";
        };
        FeatUITooltipTextNameID {
            name "Zero with a diagonal slash";
        };
        SampleTextNameID {
            name "100";
        };
    };
    sub zero by zero.slash;
} cv08;

feature ss04 {
    featureNames {
        name "Open currencies";
    };
    sub dollar by dollar.open;
} ss04;
"""

# (type, flags, name, [(selector, name), ...]); names are {language: text}
AAT_FEATURES = [
    (
        6,
        0x8000 | 0x4000 | 1,
        {"en": "Number Spacing", "ja": "数字の間隔"},
        [
            (0, {"en": "Monospaced Numbers"}),
            (1, {"en": "Proportional Numbers"}),
        ],
    ),
    (
        14,
        0,
        {"en": "Typographic Extras"},
        [
            (4, {"en": "Slashed Zero"}),
            (5, {"en": "Normal Zero"}),
        ],
    ),
]


def add_feat_table(font):
    """Attach an AAT 'feat' table describing AAT_FEATURES."""
    name_table = font["name"]

    records = []
    for feature_type, flags, names, settings in AAT_FEATURES:
        record = otTables.FeatureName()
        record.FeatureType = feature_type
        record.FeatureFlags = flags
        record.FeatureNameID = name_table.addMultilingualName(names, mac=False)
        record.Settings = otTables.Settings()
        record.Settings.Setting = []
        for value, setting_names in settings:
            setting = otTables.Setting()
            setting.SettingValue = value
            setting.SettingNameID = name_table.addMultilingualName(setting_names, mac=False)
            record.Settings.Setting.append(setting)
        record.SettingsCount = len(record.Settings.Setting)
        records.append(record)

    feature_names = otTables.FeatureNames()
    feature_names.Reserved1 = 0
    feature_names.Reserved2 = 0
    feature_names.FeatureName = records
    feature_names.FeatureNameCount = len(records)

    feat = newTable("feat")
    feat.table = otTables.feat()
    feat.table.Version = 0x00010000
    feat.table.FeatureNames = feature_names
    font["feat"] = feat


def build_test_font(path: Path):
    """Small TrueType font carrying a handful of SF Pro style features.

    GSUB holds the OpenType features; a 'feat' table describes two AAT
    feature types the way Apple fonts do.
    """
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap(CMAP)

    glyphs = {}
    metrics = {}
    for name in GLYPH_ORDER:
        pen = TTGlyphPen(None)
        if name != "space":
            pen.moveTo((100, 0))
            pen.lineTo((100, 700))
            pen.lineTo((500, 700))
            pen.lineTo((500, 0))
            pen.closePath()
        glyphs[name] = pen.glyph()
        metrics[name] = (600, 0 if name == "space" else 100)

    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Feature Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    addOpenTypeFeaturesFromString(fb.font, FEATURES)
    add_feat_table(fb.font)
    fb.save(str(path))


@pytest.fixture(scope="session")
def font_path(tmp_path_factory) -> Path:
    path = tmp_path_factory.mktemp("fonts") / "FeatureTest-Regular.ttf"
    build_test_font(path)
    return path


@pytest.fixture
def system_font_path(font_path, monkeypatch) -> Path:
    """Use the test font as the system font."""
    monkeypatch.setenv(CONFIG.SYSTEM_FONT_ENV, str(font_path))
    return font_path
