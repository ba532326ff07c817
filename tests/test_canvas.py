import pytest

from stealthprint.canvas import clamp_intensity, generate_canvas_noise_script


def test_canvas_noise_script():
    script = generate_canvas_noise_script(0.0001)
    assert "toDataURL" in script
    assert "getImageData" in script
    assert "NOISE_INTENSITY" in script


def test_intensity_embedded_as_given():
    script = generate_canvas_noise_script(0.0001)
    assert "const NOISE_INTENSITY = 0.0001;" in script


def test_small_intensity_has_no_exponent():
    script = generate_canvas_noise_script(0.00001)
    assert "const NOISE_INTENSITY = 0.00001;" in script
    assert "e-" not in script.split("NOISE_INTENSITY = ")[1].split(";")[0]


def test_large_intensity_clamped_in_script():
    script = generate_canvas_noise_script(0.5)
    assert "const NOISE_INTENSITY = 0.01;" in script


def test_negative_intensity_clamped_to_zero():
    script = generate_canvas_noise_script(-3.0)
    assert "const NOISE_INTENSITY = 0;" in script


@pytest.mark.parametrize(
    "value, expected",
    [(0.02, 0.01), (-1.0, 0.0), (0.005, 0.005), (0.0, 0.0), (0.01, 0.01)],
)
def test_clamp_intensity(value, expected):
    assert clamp_intensity(value) == expected


def test_clamp_keeps_nan():
    assert str(clamp_intensity(float("nan"))) == "nan"


def test_nan_intensity_written_as_nan():
    script = generate_canvas_noise_script(float("nan"))
    assert "const NOISE_INTENSITY = NaN;" in script


def test_script_overrides_offscreen_canvas():
    script = generate_canvas_noise_script(0.001)
    assert "OffscreenCanvas.prototype.convertToBlob" in script
    assert "CanvasRenderingContext2D.prototype.getImageData" in script
    assert "HTMLCanvasElement.prototype.toBlob" in script
    assert script.count("perturbCanvas(this)") == 3
    assert script.rstrip().endswith("})();")