from __future__ import annotations

from domain_scoring.config import Settings, load_settings


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "nope.yaml")
    assert settings == Settings()
    assert settings.trends.source == "none"
    assert settings.trends.ttl_seconds == 600
    assert settings.scoring.bulk_limit == 500


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_loads_sections(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "trends:\n"
        "  source: file\n"
        "  file_path: trends.json\n"
        "  ttl_seconds: 60\n"
        "scoring:\n"
        "  good_score: 50\n"
        "trademark:\n"
        "  extra_brands: [Zentrova, acme]\n"
        "valuation:\n"
        "  comps_path: comps.yaml\n",
        encoding="utf-8",
    )
    settings = load_settings(str(path))
    assert settings.trends.source == "file"
    assert settings.trends.file_path == "trends.json"
    assert settings.trends.ttl_seconds == 60
    assert settings.trends.stale_hours == 24
    assert settings.scoring.good_score == 50
    assert settings.scoring.excellent_score == 80
    assert settings.trademark.extra_brands == ["zentrova", "acme"]
    assert settings.valuation.comps_path == "comps.yaml"


def test_null_sections_use_defaults():
    settings = Settings.from_dict({"trends": None, "trademark": {"extra_brands": None}})
    assert settings == Settings()
