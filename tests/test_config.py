import datetime
import pytest
from huecanvas.config import CanvasParams, WatermarkParams, load_config, params_from_mapping
from huecanvas.colors import ColorRGB
from huecanvas.errors import ConfigError
from huecanvas.samples.color_schemes import COLOR_SCHEMES


def test_defaults_without_a_file():
    params = load_config()
    assert params == CanvasParams()
    assert params.width == params.height == 2000
    assert params.border_color == ColorRGB((255, 255, 255))
    assert params.border_width == 10
    assert (params.min_hue_rotate, params.max_hue_rotate) == (5, 15)
    assert params.scale_exponent == 3
    assert params.filename == "rgb128_triangle.png"
    assert params.watermark == WatermarkParams()


def test_missing_file_falls_back_to_defaults(tmp_path):
    assert load_config(tmp_path / "nope.yaml") == CanvasParams()


def test_partial_yaml_overrides(tmp_path):
    path = tmp_path / "canvas.yaml"
    path.write_text(
        "canvas:\n"
        "  width: 640\n"
        "color_scheme: 3\n"
        "border:\n"
        "  color: '#ff0000'\n"
        "hue_rotate:\n"
        "  max: 30\n"
        "watermark:\n"
        "  text: hello\n",
        encoding="utf-8",
    )
    params = load_config(path)
    assert params.width == 640
    assert params.height == 2000
    assert params.color_scheme == 3
    assert params.border_color == ColorRGB((255, 0, 0))
    assert params.border_width == 10
    assert params.max_hue_rotate == 30
    assert params.watermark.text == "hello"
    assert params.watermark.font_size == 16


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == CanvasParams()


def test_top_level_must_be_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize(
    "data",
    [
        {"size": {"min_width": 500, "max_width": 100}},
        {"hue_rotate": {"min": 0}},
        {"scale_exponent": -1},
        {"border": {"width": -2}},
        {"border": {"color": "not-a-color"}},
        {"canvas": {"width": "wide"}},
        {"export": {"reset_delay": -1}},
    ],
)
def test_invalid_values_raise_config_error(data):
    with pytest.raises(ConfigError):
        params_from_mapping(data)


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        CanvasParams(min_width=10, max_width=1)


def test_resolve_scheme_auto_uses_weekday():
    sunday = datetime.date(2026, 10, 18)
    assert CanvasParams().resolve_scheme(sunday) is COLOR_SCHEMES[0]
    assert CanvasParams().resolve_scheme(sunday + datetime.timedelta(days=3)) is COLOR_SCHEMES[3]


def test_resolve_scheme_by_index_and_name():
    assert CanvasParams(color_scheme=4).resolve_scheme() is COLOR_SCHEMES[4]
    assert CanvasParams(color_scheme="deep sea jewels").resolve_scheme() is COLOR_SCHEMES[2]
    assert CanvasParams(color_scheme="Primaries").resolve_scheme().top_left == ColorRGB((255, 0, 0))


@pytest.mark.parametrize("choice", [7, -1, "nope", True, False])
def test_resolve_scheme_rejects_unknown(choice):
    with pytest.raises(ConfigError):
        CanvasParams(color_scheme=choice).resolve_scheme()


def test_boolean_scheme_in_yaml_is_rejected(tmp_path):
    path = tmp_path / "canvas.yaml"
    path.write_text("color_scheme: true\n", encoding="utf-8")
    params = load_config(path)
    with pytest.raises(ConfigError):
        params.resolve_scheme()
