import pytest

from gadispatch.core.config import load_config, parse_config


def test_parse_config_with_tracking_id():
    cfg = parse_config({"dispatcher": {"tracking_id": "UA-1"}, "logging": {"level": "debug"}})

    assert cfg.dispatcher.tracking_id == "UA-1"
    assert cfg.logging.level == "DEBUG"


def test_missing_or_blank_tracking_id_means_unconfigured():
    assert parse_config({"dispatcher": {}}).dispatcher.tracking_id is None
    assert parse_config({"dispatcher": None}).dispatcher.tracking_id is None
    assert parse_config({"dispatcher": {"tracking_id": "  "}}).dispatcher.tracking_id is None


def test_logging_section_is_optional():
    cfg = parse_config({"dispatcher": {"tracking_id": 12345}})

    assert cfg.dispatcher.tracking_id == "12345"
    assert cfg.logging.level == "INFO"


def test_missing_dispatcher_section_raises():
    with pytest.raises(ValueError):
        parse_config({"logging": {"level": "INFO"}})


def test_load_config_from_yaml(tmp_path):
    p = tmp_path / "dispatcher.yaml"
    p.write_text("dispatcher:\n  tracking_id: UA-000000-1\nlogging:\n  level: WARNING\n")

    cfg = load_config(p)

    assert cfg.dispatcher.tracking_id == "UA-000000-1"
    assert cfg.logging.level == "WARNING"


def test_non_mapping_yaml_raises(tmp_path):
    p = tmp_path / "dispatcher.yaml"
    p.write_text("- just\n- a list\n")

    with pytest.raises(ValueError):
        load_config(p)
