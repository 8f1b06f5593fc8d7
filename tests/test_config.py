import pytest

from PictoBase import CodecConfig


def test_defaults():
    config = CodecConfig()
    assert config.chunk_size == 64 * 1024
    assert config.wrap == 0
    assert config.verbose is False


def test_dict_round_trip():
    config = CodecConfig(chunk_size=10, wrap=76, verbose=True)
    assert config.to_dict() == {"chunk_size": 10, "wrap": 76, "verbose": True}
    assert CodecConfig.from_dict(config.to_dict()) == config


def test_from_dict_ignores_unknown_keys():
    config = CodecConfig.from_dict({"wrap": 3, "colour": "blue"})
    assert config.wrap == 3


@pytest.mark.parametrize("kwargs", [{"chunk_size": 0}, {"wrap": -1}])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        CodecConfig(**kwargs)
