"""Canvas fingerprint noise injection script."""

from __future__ import annotations

import math
from decimal import Decimal

MAX_NOISE_INTENSITY = 0.01

_HEADER = """
// Canvas fingerprint noise injection
(function() {
  'use strict';

  const NOISE_INTENSITY = %s;
  // One seed per page session keeps the noise stable for identical content
  const SESSION_SEED = Math.random() * 1000000;

  // Deterministic value in [0, 1) derived from a numeric seed
  function seededRandom(seed) {
    const s = Math.sin(seed) * 10000; return s - Math.floor(s);
  }

  // Shift the RGB channels of every visible pixel by a small amount
  function addNoiseToImageData(imageData, seed) {
    const px = imageData.data;
    for (let i = 0; i < px.length; i += 4) {
      if (px[i + 3] === 0) continue; // fully transparent: leave untouched
      const delta = (seededRandom(seed + i) - 0.5) * 2 * NOISE_INTENSITY * 255;
      for (let c = i; c < i + 3; c++) {
        px[c] = Math.max(0, Math.min(255, px[c] + delta));
      }
    }
    return imageData;
  }

  // Write noise into a canvas before its pixels are exported
  function perturbCanvas(canvas) {
    try {
      const ctx = canvas.getContext('2d');
      if (ctx && canvas.width > 0 && canvas.height > 0) {
        const snapshot = ctx.getImageData(0, 0, canvas.width, canvas.height);
        ctx.putImageData(addNoiseToImageData(snapshot, SESSION_SEED), 0, 0);
      }
    } catch (e) {
      // tainted canvas or no 2d context
    }
  }

"""

_EXPORT_WRAPPER = """{indent}const native_{method} = {owner}.prototype.{method};
{indent}{owner}.prototype.{method} = function({params}) {{
{indent}  perturbCanvas(this);
{indent}  return native_{method}.call(this, {params});
{indent}}};
"""

_READ_OVERRIDE = """
  // Noise on every pixel read
  const nativeGetImageData = CanvasRenderingContext2D.prototype.getImageData;
  CanvasRenderingContext2D.prototype.getImageData = function(sx, sy, sw, sh) {
    const read = nativeGetImageData.call(this, sx, sy, sw, sh);
    return addNoiseToImageData(read, SESSION_SEED + sx + sy);
  };
"""

_OFFSCREEN_OPEN = (
    "\n  if (typeof OffscreenCanvas !== 'undefined' && "
    "OffscreenCanvas.prototype.convertToBlob) {\n"
)


def _export_override(owner: str, method: str, params: str, indent: str = "  ") -> str:
    return _EXPORT_WRAPPER.format(indent=indent, owner=owner, method=method, params=params)


def clamp_intensity(intensity: float) -> float:
    """Limit a noise intensity to the range 0.0 to 0.01; NaN stays NaN."""
    intensity = float(intensity)
    if math.isnan(intensity):
        return intensity
    return min(max(intensity, 0.0), MAX_NOISE_INTENSITY)


def _format_number(value: float) -> str:
    """Plain decimal notation, without exponent or trailing zeros."""
    if math.isnan(value):
        return "NaN"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def generate_canvas_noise_script(intensity: float) -> str:
    """JavaScript that adds faint, per-session noise to canvas reads."""
    parts = [
        _HEADER % _format_number(clamp_intensity(intensity)),
        _export_override("HTMLCanvasElement", "toDataURL", "type, quality"),
        _export_override("HTMLCanvasElement", "toBlob", "callback, type, quality"),
        _READ_OVERRIDE,
        _OFFSCREEN_OPEN,
        _export_override("OffscreenCanvas", "convertToBlob", "options", indent="    "),
        "  }\n\n})();\n",
    ]
    return "".join(parts)