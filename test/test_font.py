import pytest

from typographic_features.config import CONFIG
from typographic_features.descriptor import FontDescriptor
from typographic_features.features import FontAttributes, FontFeatures, SFProFeature
from typographic_features.font import (
    Font,
    SystemFontNotFoundError,
    monospaced_digit_system_font,
    system_font,
    system_font_with_capital_forms,
)


@pytest.fixture
def font(font_path):
    return Font.from_descriptor(FontDescriptor.with_file(font_path), 12)


def test_from_descriptor(font, font_path):
    assert font is not None
    assert font.point_size == 12
    assert font.font_descriptor.font_path == font_path
    assert font.font_descriptor.object_for_key(CONFIG.FONT_SIZE_ATTRIBUTE) == 12
    assert {"tnum", "cv02", "cv04", "cv07", "cv08", "ss04"} <= font.feature_tags


def test_missing_file_gives_no_font(tmp_path):
    descriptor = FontDescriptor.with_file(tmp_path / "missing.ttf")
    assert Font.from_descriptor(descriptor, 12) is None


def test_unreadable_file_gives_no_font(tmp_path):
    path = tmp_path / "broken.ttf"
    path.write_bytes(b"this is certainly not a font file")
    assert Font.from_descriptor(FontDescriptor.with_file(path), 12) is None


def test_descriptor_without_file_gives_no_font():
    assert Font.from_descriptor(FontDescriptor(), 12) is None


@pytest.mark.parametrize("size", [0, -3, "12"])
def test_bad_size_gives_no_font(font_path, size):
    assert Font.from_descriptor(FontDescriptor.with_file(font_path), size) is None


def test_malformed_tag_gives_no_font_and_caller_falls_back(font):
    atts = FontAttributes()
    atts.add_opentype_feature("toolong", 1)
    assert font.adding_font_attributes(atts) is None

    derived = font.adding_font_attributes(atts) or font
    assert derived is font


def test_unsupported_tag_is_ignored(font):
    atts = FontAttributes()
    atts.alternate_half_widths(True)
    derived = font.adding_font_attributes(atts)
    assert derived is not None
    assert derived.active_opentype_features() == {}


def test_active_features(font):
    atts = FontAttributes()
    atts.add_sf_pro_features({SFProFeature.SLASHED_0, SFProFeature.STRAIGHT_SIDED_6_9})
    derived = font.adding_font_attributes(atts)
    assert derived.active_opentype_features() == {"cv08": 1}


def test_legacy_settings_translate_to_opentype(font):
    features = FontFeatures()
    features.number_spacing_mono_digit()
    derived = font.adding_font_features(features)
    assert derived.active_opentype_features() == {"tnum": 1}


def test_weight_defaults_to_regular(font_path):
    font = Font.from_descriptor(FontDescriptor({CONFIG.FONT_URL_ATTRIBUTE: str(font_path)}), 9)
    assert font.weight == 0.0


def test_language_system_tags(font):
    assert font.language_system_tags == ["TRK"]


class TestSystemFont:
    def test_plain(self, system_font_path):
        font = system_font(14, CONFIG.weight("bold"))
        assert font.font_descriptor.font_path == system_font_path
        assert font.weight == 0.4
        assert font.active_opentype_features() == {}

    def test_with_features(self, system_font_path):
        font = system_font(14, features={SFProFeature.OPEN_CURRENCIES, SFProFeature.OPEN_4})
        assert font.active_opentype_features() == {"cv02": 1, "ss04": 1}

    def test_with_empty_feature_set(self, system_font_path):
        assert system_font(14, features=set()).active_opentype_features() == {}

    def test_monospaced_digit(self, system_font_path):
        font = monospaced_digit_system_font(11)
        assert font.active_opentype_features() == {"tnum": 1}

    def test_capital_forms_absent_from_font(self, system_font_path):
        font = system_font_with_capital_forms(11)
        assert font.font_descriptor.feature_settings == [
            {CONFIG.FEATURE_TYPE_IDENTIFIER: 33, CONFIG.FEATURE_SELECTOR_IDENTIFIER: 0}
        ]
        assert font.active_opentype_features() == {}

    def test_font_with_sf_pro_features_keeps_size_and_weight(self, system_font_path):
        base = system_font(20, CONFIG.weight("light"))
        font = base.system_font_with_sf_pro_features({SFProFeature.SLASHED_0})
        assert font.point_size == 20
        assert font.weight == -0.4
        assert font.active_opentype_features() == {"cv08": 1}

    def test_missing_system_font(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG.SYSTEM_FONT_ENV, str(tmp_path / "nope.ttf"))
        with pytest.raises(SystemFontNotFoundError):
            system_font(12)

    def test_bad_size_for_system_font(self, system_font_path):
        with pytest.raises(SystemFontNotFoundError):
            system_font(0)
