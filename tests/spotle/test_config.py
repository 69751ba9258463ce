import json

import pytest
from pydantic import ValidationError

from spotle.config import GameConfig, ThemeName, load_config
from spotle.mask import Mask


def test_defaults():
    config = GameConfig()
    assert config.secret == "world"
    assert (config.max_attempts, config.word_length) == (6, 5)
    assert config.theme == ThemeName.DARK
    assert config.build_mask() == Mask.default()


def test_secret_is_normalized():
    assert GameConfig(secret=" CRANE ").secret == "crane"


def test_invalid_configs():
    with pytest.raises(ValidationError):
        GameConfig(secret="cranes")
    with pytest.raises(ValidationError):
        GameConfig(max_attempts=0)
    with pytest.raises(ValidationError):
        GameConfig(max_attempts=2, mask=[[False] * 5])
    with pytest.raises(ValidationError):
        GameConfig(max_attempts=1, mask=[[False] * 4])
    with pytest.raises(ValidationError):
        GameConfig(theme="sepia")


def test_custom_mask():
    config = GameConfig(max_attempts=1, mask=[[True, False, False, False, True]])
    mask = config.build_mask()
    assert mask.is_masked(0, 0)
    assert not mask.is_masked(0, 1)
    assert mask.is_masked(0, 4)


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"secret": "cat", "word_length": 3, "max_attempts": 4, "theme": "light"}))

    config = load_config(str(path))
    assert config.secret == "cat"
    assert config.theme == ThemeName.LIGHT
    assert config.build_mask() == Mask.default(max_attempts=4, word_length=3)
