from pathlib import Path

import pytest

pytest.importorskip("yaml")

from decoded_char.config import AppConfig, dump_default_config, load_config
from decoded_char.models import ErrorPolicy


def test_defaults() -> None:
    config = AppConfig()
    assert config.decoding.encoding == "utf-8"
    assert config.decoding.errors is ErrorPolicy.STRICT
    assert config.logging.normalized_level() == "INFO"


def test_dump_and_load_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "config.yaml"
    dump_default_config(target)
    assert load_config(target) == AppConfig()


def test_load_normalises_encoding(tmp_path: Path) -> None:
    target = tmp_path / "config.yaml"
    target.write_text("decoding:\n  encoding: UTF16LE\n  errors: replace\n", encoding="utf-8")
    config = load_config(target)
    assert config.decoding.encoding == "utf-16-le"
    assert config.decoding.errors is ErrorPolicy.REPLACE


def test_load_rejects_invalid_config(tmp_path: Path) -> None:
    target = tmp_path / "config.yaml"
    target.write_text("decoding:\n  encoding: latin-1\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(target)


def test_encoding_description_lists_supported_encodings() -> None:
    from decoded_char.config import DecodingConfig
    from decoded_char.utils.text import SUPPORTED_ENCODINGS

    description = DecodingConfig.model_fields["encoding"].description
    assert all(name in description for name in SUPPORTED_ENCODINGS)
