import json

from perlin2d import config


def test_bundled_presets_load():
    presets = config.load_presets()
    assert {"terrain", "caves", "ores", "clouds"} <= set(presets)
    for settings in presets.values():
        assert isinstance(settings["scale"], tuple)
        assert settings["octaves"] >= 1


def test_load_presets_from_custom_path(tmp_path):
    path = tmp_path / "presets.json"
    path.write_text(json.dumps({"hills": {"octaves": 2, "scale": [10, 20]}}))
    presets = config.load_presets(str(path))
    assert presets == {"hills": {"octaves": 2, "scale": (10, 20)}}


def test_permutation_size_is_power_of_two():
    size = config.PERMUTATION_SIZE
    assert size > 0 and size & (size - 1) == 0
