"""WebGL fingerprint spoofing configuration and script generation."""

from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass
from string import Template

from .canvas import clamp_intensity, generate_canvas_noise_script
from .jsutil import escape_js_string, stable_hash
from .profiles import FingerprintProfile
from .webgl_profiles import WebGLProfile

_U64_MASK = (1 << 64) - 1

_WEBGL_TEMPLATE = Template(
    """
// WebGL Fingerprint Spoofing
(function() {
    'use strict';

    const VENDOR = "$vendor";
    const RENDERER = "$renderer";
    const VERSION = "$version";
    const SHADING_LANG_VERSION = "$shading_lang_version";
    const MAX_TEXTURE_SIZE = $max_texture_size;
    const MAX_VIEWPORT_DIMS = [$max_viewport_0, $max_viewport_1];
    const MAX_VERTEX_ATTRIBS = $max_vertex_attribs;
    const MAX_VARYING_VECTORS = $max_varying_vectors;
    const MAX_VERTEX_UNIFORM_VECTORS = $max_vertex_uniform_vectors;
    const MAX_FRAGMENT_UNIFORM_VECTORS = $max_fragment_uniform_vectors;

    // Override getParameter for WebGL contexts
    const overrideGetParameter = function(target) {
        const originalGetParameter = target.prototype.getParameter;
        target.prototype.getParameter = function(parameter) {
            // UNMASKED_VENDOR_WEBGL
            if (parameter === 37445) {
                return VENDOR;
            }
            // UNMASKED_RENDERER_WEBGL
            if (parameter === 37446) {
                return RENDERER;
            }
            // VERSION
            if (parameter === 7938) {
                return VERSION;
            }
            // SHADING_LANGUAGE_VERSION
            if (parameter === 35724) {
                return SHADING_LANG_VERSION;
            }
            // MAX_TEXTURE_SIZE
            if (parameter === 3379) {
                return MAX_TEXTURE_SIZE;
            }
            // MAX_VIEWPORT_DIMS
            if (parameter === 3386) {
                return new Int32Array(MAX_VIEWPORT_DIMS);
            }
            // MAX_VERTEX_ATTRIBS
            if (parameter === 34921) {
                return MAX_VERTEX_ATTRIBS;
            }
            // MAX_VARYING_VECTORS
            if (parameter === 36348) {
                return MAX_VARYING_VECTORS;
            }
            // MAX_VERTEX_UNIFORM_VECTORS
            if (parameter === 36347) {
                return MAX_VERTEX_UNIFORM_VECTORS;
            }
            // MAX_FRAGMENT_UNIFORM_VECTORS
            if (parameter === 36349) {
                return MAX_FRAGMENT_UNIFORM_VECTORS;
            }
            return originalGetParameter.call(this, parameter);
        };
    };

    // Override getExtension to control WEBGL_debug_renderer_info
    const overrideGetExtension = function(target) {
        const originalGetExtension = target.prototype.getExtension;
        target.prototype.getExtension = function(name) {
            if (name === 'WEBGL_debug_renderer_info') {
                // Return a fake extension object
                return {
                    UNMASKED_VENDOR_WEBGL: 37445,
                    UNMASKED_RENDERER_WEBGL: 37446
                };
            }
            return originalGetExtension.call(this, name);
        };
    };

    // Override getSupportedExtensions
    const overrideGetSupportedExtensions = function(target) {
        const originalGetSupportedExtensions = target.prototype.getSupportedExtensions;
        target.prototype.getSupportedExtensions = function() {
            const extensions = originalGetSupportedExtensions.call(this) || [];
            // Ensure WEBGL_debug_renderer_info is in the list
            if (!extensions.includes('WEBGL_debug_renderer_info')) {
                extensions.push('WEBGL_debug_renderer_info');
            }
            return extensions;
        };
    };

    // Apply overrides to WebGLRenderingContext
    if (typeof WebGLRenderingContext !== 'undefined') {
        overrideGetParameter(WebGLRenderingContext);
        overrideGetExtension(WebGLRenderingContext);
        overrideGetSupportedExtensions(WebGLRenderingContext);
    }

    // Apply overrides to WebGL2RenderingContext
    if (typeof WebGL2RenderingContext !== 'undefined') {
        overrideGetParameter(WebGL2RenderingContext);
        overrideGetExtension(WebGL2RenderingContext);
        overrideGetSupportedExtensions(WebGL2RenderingContext);
    }

    // Override getContext to intercept context creation
    const originalGetContext = HTMLCanvasElement.prototype.getContext;
    HTMLCanvasElement.prototype.getContext = function(type, attributes) {
        const context = originalGetContext.call(this, type, attributes);
        // Context is already patched via prototype
        return context;
    };

    // Also override OffscreenCanvas if available
    if (typeof OffscreenCanvas !== 'undefined') {
        const originalOffscreenGetContext = OffscreenCanvas.prototype.getContext;
        OffscreenCanvas.prototype.getContext = function(type, attributes) {
            const context = originalOffscreenGetContext.call(this, type, attributes);
            return context;
        };
    }

})();

$canvas_noise_script
"""
)


@dataclass
class WebGLConfig:
    """The WebGL identity and limits a page should observe."""

    vendor: str
    renderer: str
    version: str = "WebGL 1.0 (OpenGL ES 2.0 Chromium)"
    shading_language_version: str = "WebGL GLSL ES 1.0 (OpenGL ES GLSL ES 1.0 Chromium)"
    max_texture_size: int = 16384
    max_viewport_dims: tuple[int, int] = (16384, 16384)
    max_vertex_attribs: int = 16
    max_varying_vectors: int = 30
    max_vertex_uniform_vectors: int = 4096
    max_fragment_uniform_vectors: int = 1024
    enable_canvas_noise: bool = True
    canvas_noise_intensity: float = 0.0001
    profile: WebGLProfile | None = None

    @classmethod
    def from_profile(cls, profile: WebGLProfile) -> WebGLConfig:
        """Configuration matching a predefined GPU profile."""
        limits = profile.limits()
        return cls(
            vendor=profile.vendor(),
            renderer=profile.renderer(),
            max_texture_size=limits.max_texture_size,
            max_viewport_dims=limits.max_viewport_dims,
            max_vertex_attribs=limits.max_vertex_attribs,
            profile=profile,
        )

    @classmethod
    def nvidia_gtx_1080(cls) -> WebGLConfig:
        return cls.from_profile(WebGLProfile.NVIDIA_GTX_1080)

    @classmethod
    def nvidia_gtx_1660(cls) -> WebGLConfig:
        return cls.from_profile(WebGLProfile.NVIDIA_GTX_1660)

    @classmethod
    def nvidia_rtx_3060(cls) -> WebGLConfig:
        return cls.from_profile(WebGLProfile.NVIDIA_RTX_3060)

    @classmethod
    def nvidia_rtx_3080(cls) -> WebGLConfig:
        return cls.from_profile(WebGLProfile.NVIDIA_RTX_3080)

    @classmethod
    def nvidia_rtx_4090(cls) -> WebGLConfig:
        return cls.from_profile(WebGLProfile.NVIDIA_RTX_4090)

    @classmethod
    def amd_rx_580(cls) -> WebGLConfig:
        return cls.from_profile(WebGLProfile.AMD_RX_580)

    @classmethod
    def amd_rx_6700_xt(cls) -> WebGLConfig:
        return cls.from_profile(WebGLProfile.AMD_RX_6700_XT)

    @classmethod
    def intel_uhd_630(cls) -> WebGLConfig:
        return cls.from_profile(WebGLProfile.INTEL_UHD_630)

    @classmethod
    def intel_iris_xe(cls) -> WebGLConfig:
        return cls.from_profile(WebGLProfile.INTEL_IRIS_XE)

    @classmethod
    def apple_m1(cls) -> WebGLConfig:
        return cls.from_profile(WebGLProfile.APPLE_M1)

    @classmethod
    def apple_m2(cls) -> WebGLConfig:
        return cls.from_profile(WebGLProfile.APPLE_M2)

    @classmethod
    def random(cls) -> WebGLConfig:
        """A common desktop GPU chosen from the clock."""
        seed = time.time_ns() & _U64_MASK
        profiles = WebGLProfile.common_desktop()
        return cls.from_profile(profiles[seed % len(profiles)])

    @classmethod
    def consistent(cls, seed: str) -> WebGLConfig:
        """The same common desktop GPU every time for the same ``seed``."""
        profiles = WebGLProfile.common_desktop()
        return cls.from_profile(profiles[stable_hash(seed) % len(profiles)])

    @classmethod
    def for_profile(cls, fp_profile: FingerprintProfile) -> WebGLConfig:
        """A GPU plausible for the operating system of a fingerprint profile."""
        if fp_profile in (
            FingerprintProfile.MAC_CHROME,
            FingerprintProfile.MAC_SAFARI,
            FingerprintProfile.MAC_FIREFOX,
        ):
            return cls.apple_m1()
        if fp_profile in (FingerprintProfile.LINUX_CHROME, FingerprintProfile.LINUX_FIREFOX):
            return cls.nvidia_rtx_3060()
        return cls.random()

    def get_js_override_script(self) -> str:
        """JavaScript overriding WebGL parameters, plus canvas noise if enabled."""
        noise = (
            generate_canvas_noise_script(self.canvas_noise_intensity)
            if self.enable_canvas_noise
            else ""
        )
        width, height = self.max_viewport_dims
        return _WEBGL_TEMPLATE.substitute(
            vendor=escape_js_string(self.vendor),
            renderer=escape_js_string(self.renderer),
            version=escape_js_string(self.version),
            shading_lang_version=escape_js_string(self.shading_language_version),
            max_texture_size=self.max_texture_size,
            max_viewport_0=width,
            max_viewport_1=height,
            max_vertex_attribs=self.max_vertex_attribs,
            max_varying_vectors=self.max_varying_vectors,
            max_vertex_uniform_vectors=self.max_vertex_uniform_vectors,
            max_fragment_uniform_vectors=self.max_fragment_uniform_vectors,
            canvas_noise_script=noise,
        )

    def with_canvas_noise(self, enabled: bool, intensity: float) -> WebGLConfig:
        """A copy with canvas noise switched and its intensity clamped."""
        return dataclasses.replace(
            self,
            enable_canvas_noise=enabled,
            canvas_noise_intensity=clamp_intensity(intensity),
        )


class WebGLConfigBuilder:
    """Chainable customisation of a WebGL configuration."""

    def __init__(self, config: WebGLConfig | None = None) -> None:
        if config is None:
            config = WebGLConfig.nvidia_gtx_1660()
        self._config = dataclasses.replace(config)

    @classmethod
    def from_profile(cls, profile: WebGLProfile) -> WebGLConfigBuilder:
        return cls(WebGLConfig.from_profile(profile))

    def vendor(self, vendor: str) -> WebGLConfigBuilder:
        self._config.vendor = vendor
        return self

    def renderer(self, renderer: str) -> WebGLConfigBuilder:
        self._config.renderer = renderer
        return self

    def version(self, version: str) -> WebGLConfigBuilder:
        self._config.version = version
        return self

    def shading_language_version(self, version: str) -> WebGLConfigBuilder:
        self._config.shading_language_version = version
        return self

    def max_texture_size(self, size: int) -> WebGLConfigBuilder:
        self._config.max_texture_size = size
        return self

    def max_viewport_dims(self, width: int, height: int) -> WebGLConfigBuilder:
        self._config.max_viewport_dims = (width, height)
        return self

    def canvas_noise(self, enabled: bool, intensity: float) -> WebGLConfigBuilder:
        """Switch canvas noise; the intensity is clamped to 0.0..0.01."""
        self._config.enable_canvas_noise = enabled
        self._config.canvas_noise_intensity = clamp_intensity(intensity)
        return self

    def build(self) -> WebGLConfig:
        """Return a copy of the configuration built so far."""
        return dataclasses.replace(self._config)