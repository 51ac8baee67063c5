import pytest

from typographic_features.config import CONFIG
from typographic_features.descriptor import FontDescriptor, merge_feature_settings
from typographic_features.features import FontAttributes, FontFeatures, SFProFeature


@pytest.fixture
def descriptor():
    return FontDescriptor.with_file("/fonts/Example.ttf", weight=0.4)


def test_with_file(descriptor):
    assert str(descriptor.font_path) == "/fonts/Example.ttf"
    assert descriptor.traits == {CONFIG.WEIGHT_TRAIT: 0.4}
    assert descriptor.feature_settings == []


def test_descriptor_is_immutable(descriptor):
    with pytest.raises(AttributeError):
        descriptor.extra = 1

    attributes = descriptor.attributes
    attributes[CONFIG.FONT_URL_ATTRIBUTE] = "/elsewhere.ttf"
    assert str(descriptor.font_path) == "/fonts/Example.ttf"


def test_equal_descriptors_hash_alike(descriptor):
    atts = FontAttributes()
    atts.sf_pro_open_4()
    first = descriptor.adding_font_attributes(atts)
    second = FontDescriptor(first.attributes)

    assert first == second
    assert hash(first) == hash(second)
    assert len({descriptor, first, second}) == 2


def test_adding_attributes_leaves_input_untouched(descriptor):
    atts = FontAttributes()
    atts.sf_pro_slashed_0()
    augmented = descriptor.adding_font_attributes(atts)

    assert descriptor.feature_settings == []
    assert augmented.feature_settings == [
        {CONFIG.OPENTYPE_FEATURE_TAG: "cv08", CONFIG.OPENTYPE_FEATURE_VALUE: 1}
    ]
    assert augmented.font_path == descriptor.font_path


def test_empty_request_is_equivalent(descriptor):
    assert descriptor.adding_font_attributes(FontAttributes()) == descriptor
    assert descriptor.adding_font_features(FontFeatures()) == descriptor


def test_applying_twice_equals_applying_once(descriptor):
    def request():
        atts = FontAttributes()
        atts.add_sf_pro_features({SFProFeature.OPEN_4, SFProFeature.CALCULATOR})
        return atts

    once = descriptor.adding_font_attributes(request())
    twice = once.adding_font_attributes(request())
    assert twice == once


def test_later_request_replaces_same_tag(descriptor):
    on = FontAttributes()
    on.tabular_figures(True)
    on.sf_pro_open_4()
    off = FontAttributes()
    off.tabular_figures(False)

    result = descriptor.adding_font_attributes(on).adding_font_attributes(off)
    assert result.feature_settings == [
        {CONFIG.OPENTYPE_FEATURE_TAG: "cv02", CONFIG.OPENTYPE_FEATURE_VALUE: 1},
        {CONFIG.OPENTYPE_FEATURE_TAG: "tnum", CONFIG.OPENTYPE_FEATURE_VALUE: 0},
    ]


def test_features_and_attributes_compose(descriptor):
    features = FontFeatures()
    features.number_spacing_mono_digit()
    atts = FontAttributes()
    atts.alternate_half_widths(True)

    result = descriptor.adding_font_features(features).adding_font_attributes(atts)
    assert result.feature_settings == [
        {CONFIG.FEATURE_TYPE_IDENTIFIER: 6, CONFIG.FEATURE_SELECTOR_IDENTIFIER: 0},
        {CONFIG.OPENTYPE_FEATURE_TAG: "halt", CONFIG.OPENTYPE_FEATURE_VALUE: 1},
    ]


def test_legacy_settings_replace_by_type(descriptor):
    first = FontFeatures()
    first.case_sensitive(True)
    second = FontFeatures()
    second.case_sensitive(False)

    result = descriptor.adding_font_features(first).adding_font_features(second)
    assert result.feature_settings == [
        {CONFIG.FEATURE_TYPE_IDENTIFIER: 33, CONFIG.FEATURE_SELECTOR_IDENTIFIER: 1}
    ]


def test_other_attributes_are_replaced(descriptor):
    result = descriptor.adding_attributes({CONFIG.FONT_SIZE_ATTRIBUTE: 18})
    assert result.object_for_key(CONFIG.FONT_SIZE_ATTRIBUTE) == 18
    assert descriptor.object_for_key(CONFIG.FONT_SIZE_ATTRIBUTE) is None


def test_merge_keeps_identical_setting_in_place():
    tnum = {CONFIG.OPENTYPE_FEATURE_TAG: "tnum", CONFIG.OPENTYPE_FEATURE_VALUE: 1}
    cv08 = {CONFIG.OPENTYPE_FEATURE_TAG: "cv08", CONFIG.OPENTYPE_FEATURE_VALUE: 1}
    assert merge_feature_settings([tnum, cv08], [tnum]) == [tnum, cv08]
