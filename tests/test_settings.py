import json
from palmon.system.settings import Settings, SettingsData


def test_defaults_when_missing(tmp_path):
    s = Settings.load(tmp_path / "none.json")
    assert s.data == SettingsData()
    assert s.data.pacing == 1.0


def test_normalize_bad_values(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"text_speed": 9, "log_level": "LOUD", "wild_count": 0,
                                "rng_seed": "abc", "legacy": True}))
    s = Settings.load(path)
    assert s.data.text_speed == 2
    assert s.data.log_level == "INFO"
    assert s.data.wild_count == 5
    assert s.data.rng_seed is None


def test_parse_failure_falls_back(tmp_path):
    path = tmp_path / "s.json"
    path.write_text("{not json")
    s = Settings.load(path)
    assert s.data == SettingsData()


def test_update_persists_and_notifies(tmp_path):
    path = tmp_path / "s.json"
    s = Settings(SettingsData(), path)
    seen = []
    s.on_change(lambda d: seen.append(d.text_speed))
    s.update(text_speed=3, rng_seed=12)
    assert seen == [3]
    reloaded = Settings.load(path)
    assert reloaded.data.text_speed == 3
    assert reloaded.data.rng_seed == 12
    assert reloaded.data.pacing == 1.5
