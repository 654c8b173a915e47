import pytest

from house_extractor.config import ExtractorConfig, load_extractor_config
from house_extractor.utils import get_counts, init_logging, log, logWarning


def test_defaults() -> None:
    config = ExtractorConfig()
    assert config.output_path == './output.lua'
    assert config.output_format == 'lua'
    assert config.log_path is None


def test_format_is_normalized() -> None:
    assert ExtractorConfig(output_format=' JSON ').output_format == 'json'


def test_unknown_format_rejected() -> None:
    with pytest.raises(ValueError):
        ExtractorConfig(output_format='xml')


def test_empty_output_rejected() -> None:
    with pytest.raises(ValueError):
        ExtractorConfig(output_path='')


def test_load_config_file(tmp_path) -> None:
    path = tmp_path / "extractor.ini"
    path.write_text(
        "[extractor]\n"
        "output = houses.json\n"
        "format = json\n"
        "log = extract.log\n"
    )
    config = load_extractor_config(path)
    assert config == ExtractorConfig('houses.json', 'json', 'extract.log')


def test_missing_keys_use_defaults(tmp_path) -> None:
    path = tmp_path / "extractor.ini"
    path.write_text("[extractor]\nformat = json\n")
    config = load_extractor_config(path)
    assert config.output_path == './output.lua'
    assert config.output_format == 'json'
    assert config.log_path is None


def test_unknown_key_warns(tmp_path) -> None:
    path = tmp_path / "extractor.ini"
    path.write_text("[extractor]\nthreads = 4\n")
    load_extractor_config(path)
    assert get_counts() == (0, 1)


def test_missing_section_warns(tmp_path) -> None:
    path = tmp_path / "extractor.ini"
    path.write_text("[other]\nkey = value\n")
    assert load_extractor_config(path) == ExtractorConfig()
    assert get_counts() == (0, 1)


def test_missing_config_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_extractor_config(tmp_path / "missing.ini")


def test_log_file_opened_after_console_logging_started(tmp_path) -> None:
    logWarning("logged before the file was known")
    log_path = tmp_path / "late.log"
    init_logging(log_path)
    log("after")

    text = log_path.read_text(encoding='utf-8')
    assert "Warning: logged before the file was known" in text
    assert "after" in text
