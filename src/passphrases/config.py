"""Generation presets: YAML loading, CLI override merging, conversion to options."""

from __future__ import annotations

from pathlib import Path

import yaml

from passphrases.casing import CasingStyle
from passphrases.generator import GenerationOptions


_BUNDLED_DIR = Path(__file__).parent / "presets"
_KNOWN_KEYS = {"words", "separator", "casing"}


def load_preset(name: str, search_dirs: list[Path] | None = None) -> dict:
    """Load a preset by name from user directories, then the bundled presets.

    Raises FileNotFoundError if no directory has it, and ValueError if the
    file is not valid YAML or its top level is not a mapping.
    """
    dirs = list(search_dirs or []) + [_BUNDLED_DIR]
    for d in dirs:
        path = Path(d) / f"{name}.yaml"
        if path.exists():
            with open(path, encoding="utf-8") as f:
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ValueError(f"Preset '{name}' ({path}) is not valid YAML: {e}") from e
            if data is None:
                return {}
            if not isinstance(data, dict):
                raise ValueError(
                    f"Preset '{name}' ({path}) must be a mapping, got {type(data).__name__}"
                )
            return data
    raise FileNotFoundError(
        f"Preset '{name}' not found. Searched: {', '.join(str(d) for d in dirs)}"
    )


def merge_config(preset: dict, overrides: dict) -> dict:
    """Merge preset config with CLI overrides. None values in overrides are ignored."""
    result = dict(preset)
    result.update({k: v for k, v in overrides.items() if v is not None})
    return result


def options_from_config(cfg: dict) -> GenerationOptions:
    """Build GenerationOptions from a preset-style dict.

    Missing keys fall back to the GenerationOptions defaults. Unknown keys or
    values of the wrong type raise ValueError.
    """
    unknown = set(cfg) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"Unknown preset keys: {', '.join(sorted(unknown))}")
    defaults = GenerationOptions()

    words = cfg.get("words", defaults.word_count)
    if isinstance(words, bool) or not isinstance(words, int):
        raise ValueError(f"'words' must be an integer, got {words!r}")

    separator = cfg.get("separator", defaults.separator)
    if not isinstance(separator, str):
        raise ValueError(f"'separator' must be a string, got {separator!r}")

    casing = cfg.get("casing", defaults.casing)
    if not isinstance(casing, CasingStyle):
        casing = CasingStyle.from_string(str(casing))

    return GenerationOptions(word_count=words, separator=separator, casing=casing)


def list_presets(search_dirs: list[Path] | None = None) -> list[str]:
    """List available preset names from bundled and user directories."""
    dirs = list(search_dirs or []) + [_BUNDLED_DIR]
    names = set()
    for d in map(Path, dirs):
        if d.is_dir():
            names.update(f.stem for f in d.glob("*.yaml"))
    return sorted(names)
