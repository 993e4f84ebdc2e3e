import pytest

from gedtree.config import GTConfig, load_config
from gedtree.core.exceptions import ConfigFileError
from gedtree.layout.config import LayoutConfig


def test_load_config_reads_sections(tmp_path):
    path = tmp_path / "gedtree.yml"
    path.write_text(
        "debug: true\n"
        "logging:\n"
        "  level: DEBUG\n"
        "layout:\n"
        "  node_width: 80\n"
        "  mode: ancestor\n",
        encoding="utf-8",
    )

    cfg = load_config(path)

    assert cfg.debug is True
    assert cfg.logging["level"] == "DEBUG"
    assert cfg.paths == {}
    layout = LayoutConfig.from_mapping(cfg.layout)
    assert layout.node_width == 80
    assert layout.mode == "ancestor"
    assert layout.node_height == LayoutConfig().node_height


def test_missing_file_falls_back_to_defaults(tmp_path):
    cfg = load_config(tmp_path / "absent.yml")
    assert isinstance(cfg, GTConfig)
    assert cfg.layout == {}
    assert cfg.debug is False


def test_empty_file_is_empty_config(tmp_path):
    path = tmp_path / "gedtree.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path).logging == {}


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "gedtree.yml"
    path.write_text("layout: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigFileError):
        load_config(path)


def test_non_mapping_raises(tmp_path):
    path = tmp_path / "gedtree.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigFileError):
        load_config(path)


def test_project_paths_point_at_checkout():
    from gedtree.utils import default_config_path, mock_file_path, project_path

    assert default_config_path().is_file()
    assert mock_file_path("family.ged").is_file()
    assert project_path("/tmp/elsewhere").is_absolute()
