import io
import sys

import pytest
from rich.console import Console

from typographic_features.config import CONFIG
from typographic_features.demo import (
    FEATURE_LABELS,
    SAMPLE_FEATURES,
    SAMPLE_LABEL,
    FeatureDemoController,
)
from typographic_features.features import SFProFeature
from typographic_features.results import ResultLevel


@pytest.fixture
def report():
    return io.StringIO()


@pytest.fixture
def controller(system_font_path, report):
    controller = FeatureDemoController(point_size=15, report_stream=report)
    controller.view_did_load()
    return controller


def test_every_label_is_declared_once():
    identifiers = [identifier for identifier, _, _ in FEATURE_LABELS]
    assert len(identifiers) == len(set(identifiers)) == 10
    assert SAMPLE_LABEL not in identifiers


def test_sample_features():
    assert SFProFeature.MONOSPACED_DIGIT in SAMPLE_FEATURES
    assert SFProFeature.TAILED_LOWERCASE_L not in SAMPLE_FEATURES
    assert len(SAMPLE_FEATURES) == 11


def test_view_did_load_pins_monospaced_digits(controller):
    assert controller.sample_label.font.active_opentype_features() == {"tnum": 1}
    assert controller.labels["sf_0"].font.active_opentype_features() == {}


def test_switch_on(controller, report):
    result = controller.switch_sf_features(True)

    assert result.messages[-1].level == ResultLevel.SUCCESS
    active = result.data
    assert active["sf_0"] == {"cv08": 1}
    assert active["sf_4"] == {"cv02": 1}
    assert active["sf_colon"] == {"cv04": 1}
    assert active["sf_a"] == {"cv07": 1}
    assert active["sf_openCurrencies"] == {"ss04": 1}
    assert active["sf_69"] == {}
    assert active[SAMPLE_LABEL] == {
        "tnum": 1,
        "cv02": 1,
        "cv08": 1,
        "cv04": 1,
        "cv07": 1,
        "ss04": 1,
    }
    assert "---------------------------" in report.getvalue()


def test_switch_on_requests_half_width_alternates(controller):
    controller.switch_sf_features(True)
    settings = controller.sample_label.font.font_descriptor.feature_settings
    assert settings[-1] == {
        CONFIG.OPENTYPE_FEATURE_TAG: "halt",
        CONFIG.OPENTYPE_FEATURE_VALUE: 1,
    }
    assert len(settings) == 12


def test_switch_on_warns_about_missing_variants(controller):
    result = controller.switch_sf_features(True)
    warnings = [m for m in result.messages if m.level == ResultLevel.WARNING]
    assert len(warnings) == 1
    assert "sf_69" in warnings[0].details
    assert "sf_0" not in warnings[0].details.split(", ")


def test_switch_on_is_idempotent(controller):
    controller.switch_sf_features(True)
    first = {k: l.font.font_descriptor for k, l in controller.labels.items()}
    controller.switch_sf_features(True)
    second = {k: l.font.font_descriptor for k, l in controller.labels.items()}
    assert first == second


def test_switch_off_restores_defaults(controller):
    controller.switch_sf_features(True)
    result = controller.switch_sf_features(False)

    assert not controller.is_on
    assert not result.has_warnings()
    for identifier, _, _ in FEATURE_LABELS:
        assert controller.labels[identifier].font.font_descriptor.feature_settings == []
    assert result.data[SAMPLE_LABEL] == {"tnum": 1}


def test_labels_keep_size(controller):
    controller.switch_sf_features(True)
    assert {l.font.point_size for l in controller.labels.values()} == {15}


def test_cli_main(system_font_path, monkeypatch, capsys):
    import typographic_features_demo

    monkeypatch.setattr(sys, "argv", ["typographic_features_demo.py", "--off"])
    assert typographic_features_demo.main() == 0
    assert "Feature selectors:" in capsys.readouterr().out


def test_cli_without_system_font(tmp_path, monkeypatch):
    import typographic_features_demo

    monkeypatch.setenv(CONFIG.SYSTEM_FONT_ENV, str(tmp_path / "missing.ttf"))
    monkeypatch.setattr(sys, "argv", ["typographic_features_demo.py"])
    assert typographic_features_demo.main() == 1


def test_switch_messages_render_as_status_lines(controller):
    result = controller.switch_sf_features(True)
    out = io.StringIO()
    result.emit_all(target=Console(file=out, width=200))
    lines = out.getvalue().splitlines()
    assert lines[0].startswith("[WARN] Font lacks the requested glyph variants")
    assert lines[1].strip().startswith("→ sf_69")
    assert lines[-1] == "[DONE] SF Pro features switched on"
