"""Tests for the preset configuration system."""

import pytest
import yaml

from passphrases.casing import CasingStyle
from passphrases.generator import GenerationOptions


def test_load_bundled_preset():
    """Loading a bundled preset by name returns a dict."""
    from passphrases.config import load_preset

    preset = load_preset("default")
    assert preset == {"words": 4, "separator": "-", "casing": "lowercase"}


def test_bundled_presets_build_valid_options():
    """Every bundled preset converts to GenerationOptions."""
    from passphrases.config import list_presets, load_preset, options_from_config

    for name in list_presets():
        options = options_from_config(load_preset(name))
        assert isinstance(options, GenerationOptions)


def test_load_missing_preset_raises():
    """Loading a nonexistent preset raises FileNotFoundError."""
    from passphrases.config import load_preset

    with pytest.raises(FileNotFoundError, match="nonexistent"):
        load_preset("nonexistent")


def test_merge_preset_with_overrides():
    """CLI overrides take precedence over preset values."""
    from passphrases.config import merge_config

    preset = {"words": 6, "separator": "."}
    overrides = {"words": 3}
    result = merge_config(preset, overrides)
    assert result["words"] == 3
    assert result["separator"] == "."


def test_merge_config_ignores_none_overrides():
    """None values in overrides don't replace preset values."""
    from passphrases.config import merge_config

    preset = {"words": 6, "separator": "."}
    overrides = {"words": None, "separator": None, "casing": None}
    assert merge_config(preset, overrides) == preset


def test_merge_config_keeps_empty_separator():
    """An empty-string override is a real value, not a missing one."""
    from passphrases.config import merge_config

    assert merge_config({"separator": "-"}, {"separator": ""})["separator"] == ""


def test_load_user_preset(tmp_path):
    """User directories are searched before the bundled presets."""
    from passphrases.config import load_preset

    preset_file = tmp_path / "default.yaml"
    preset_file.write_text(yaml.dump({"words": 7, "separator": "+"}))
    preset = load_preset("default", search_dirs=[tmp_path])
    assert preset["words"] == 7
    assert preset["separator"] == "+"


def test_load_empty_preset(tmp_path):
    from passphrases.config import load_preset

    (tmp_path / "blank.yaml").write_text("")
    assert load_preset("blank", search_dirs=[tmp_path]) == {}


def test_list_presets_includes_bundled():
    """list_presets returns the bundled preset names, sorted."""
    from passphrases.config import list_presets

    names = list_presets()
    assert names == sorted(names)
    for name in ("default", "memorable", "strong", "paranoid"):
        assert name in names


def test_list_presets_includes_user_dir(tmp_path):
    from passphrases.config import list_presets

    (tmp_path / "mine.yaml").write_text("words: 5\n")
    assert "mine" in list_presets(search_dirs=[tmp_path])


def test_options_from_config_full():
    from passphrases.config import options_from_config

    options = options_from_config({"words": 6, "separator": ".", "casing": "sentenceCase"})
    assert options == GenerationOptions(6, ".", CasingStyle.SENTENCE_CASE)


def test_options_from_config_defaults():
    from passphrases.config import options_from_config

    assert options_from_config({}) == GenerationOptions()


def test_options_from_config_accepts_enum():
    from passphrases.config import options_from_config

    options = options_from_config({"casing": CasingStyle.ALTERNATING})
    assert options.casing is CasingStyle.ALTERNATING


@pytest.mark.parametrize(
    "cfg",
    [
        {"words": "four"},
        {"words": True},
        {"separator": 5},
        {"casing": "shouting"},
        {"colour": "blue"},
    ],
)
def test_options_from_config_rejects_bad_values(cfg):
    from passphrases.config import options_from_config

    with pytest.raises(ValueError):
        options_from_config(cfg)


def test_cli_generate_preset_flag():
    """CLI generate subcommand accepts --preset flag."""
    from click.testing import CliRunner
    from passphrases.cli import cli

    runner = CliRunner()
    result = runner.invoke(cli, ["-q", "generate", "--preset", "paranoid", "--separator", " "])
    assert result.exit_code == 0
    words = result.output.strip().split(" ")
    assert len(words) == 10


@pytest.mark.parametrize("content,kind", [("- a\n- b\n", "list"), ("plain\n", "str"), ("7\n", "int")])
def test_load_preset_rejects_non_mapping(tmp_path, content, kind):
    from passphrases.config import load_preset

    (tmp_path / "odd.yaml").write_text(content)
    with pytest.raises(ValueError, match=f"must be a mapping, got {kind}"):
        load_preset("odd", search_dirs=[tmp_path])


def test_load_preset_rejects_invalid_yaml(tmp_path):
    from passphrases.config import load_preset

    (tmp_path / "bad.yaml").write_text("words: [unclosed\n")
    with pytest.raises(ValueError, match="not valid YAML"):
        load_preset("bad", search_dirs=[tmp_path])
