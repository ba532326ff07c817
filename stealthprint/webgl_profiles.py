"""Predefined GPU profiles for WebGL spoofing."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class WebGLLimits(NamedTuple):
    """Capability limits a GPU reports through WebGL."""

    max_texture_size: int
    max_viewport_dims: tuple[int, int]
    max_vertex_attribs: int


class WebGLProfile(Enum):
    """Common GPUs whose WebGL identity can be reported."""

    NVIDIA_GTX_1080 = "nvidia_gtx_1080"
    NVIDIA_GTX_1660 = "nvidia_gtx_1660"
    NVIDIA_RTX_3060 = "nvidia_rtx_3060"
    NVIDIA_RTX_3080 = "nvidia_rtx_3080"
    NVIDIA_RTX_4070 = "nvidia_rtx_4070"
    NVIDIA_RTX_4090 = "nvidia_rtx_4090"
    AMD_RX_580 = "amd_rx_580"
    AMD_RX_6700_XT = "amd_rx_6700_xt"
    AMD_RX_7900_XT = "amd_rx_7900_xt"
    INTEL_UHD_620 = "intel_uhd_620"
    INTEL_UHD_630 = "intel_uhd_630"
    INTEL_UHD_770 = "intel_uhd_770"
    INTEL_IRIS_XE = "intel_iris_xe"
    INTEL_ARC_A770 = "intel_arc_a770"
    APPLE_M1 = "apple_m1"
    APPLE_M2 = "apple_m2"
    APPLE_M3 = "apple_m3"
    SWIFTSHADER = "swiftshader"
    ANGLE_DIRECT3D11 = "angle_direct3d11"

    @classmethod
    def all(cls) -> list[WebGLProfile]:
        """Every profile, in declaration order."""
        return list(cls)

    @classmethod
    def common_desktop(cls) -> list[WebGLProfile]:
        """The profiles most often seen on desktops."""
        return [
            cls.NVIDIA_GTX_1660,
            cls.NVIDIA_RTX_3060,
            cls.NVIDIA_RTX_3080,
            cls.AMD_RX_6700_XT,
            cls.INTEL_UHD_630,
            cls.INTEL_IRIS_XE,
        ]

    def vendor(self) -> str:
        """The unmasked WebGL vendor string."""
        return _VENDORS[self]

    def renderer(self) -> str:
        """The unmasked WebGL renderer string."""
        return _RENDERERS[self]

    def limits(self) -> WebGLLimits:
        """Texture, viewport and vertex-attribute limits for this GPU."""
        if self in (WebGLProfile.SWIFTSHADER, WebGLProfile.ANGLE_DIRECT3D11):
            return WebGLLimits(8192, (8192, 8192), 16)
        if self.name.startswith("NVIDIA_"):
            return WebGLLimits(16384, (32767, 32767), 16)
        return WebGLLimits(16384, (16384, 16384), 16)


_W = WebGLProfile

_VENDORS = {
    **{p: "NVIDIA Corporation" for p in _W if p.name.startswith("NVIDIA_")},
    **{p: "AMD" for p in _W if p.name.startswith("AMD_")},
    **{p: "Intel Inc." for p in _W if p.name.startswith("INTEL_")},
    **{p: "Apple Inc." for p in _W if p.name.startswith("APPLE_")},
    _W.SWIFTSHADER: "Google Inc. (Google)",
    _W.ANGLE_DIRECT3D11: "Google Inc. (NVIDIA)",
}


def _d3d11(vendor: str, device: str) -> str:
    return f"ANGLE ({vendor}, {device} Direct3D11 vs_5_0 ps_5_0, D3D11)"


_RENDERERS = {
    _W.NVIDIA_GTX_1080: _d3d11("NVIDIA", "NVIDIA GeForce GTX 1080"),
    _W.NVIDIA_GTX_1660: _d3d11("NVIDIA", "NVIDIA GeForce GTX 1660 SUPER"),
    _W.NVIDIA_RTX_3060: _d3d11("NVIDIA", "NVIDIA GeForce RTX 3060"),
    _W.NVIDIA_RTX_3080: _d3d11("NVIDIA", "NVIDIA GeForce RTX 3080"),
    _W.NVIDIA_RTX_4070: _d3d11("NVIDIA", "NVIDIA GeForce RTX 4070"),
    _W.NVIDIA_RTX_4090: _d3d11("NVIDIA", "NVIDIA GeForce RTX 4090"),
    _W.AMD_RX_580: _d3d11("AMD", "AMD Radeon RX 580 Series"),
    _W.AMD_RX_6700_XT: _d3d11("AMD", "AMD Radeon RX 6700 XT"),
    _W.AMD_RX_7900_XT: _d3d11("AMD", "AMD Radeon RX 7900 XT"),
    _W.INTEL_UHD_620: _d3d11("Intel", "Intel(R) UHD Graphics 620"),
    _W.INTEL_UHD_630: _d3d11("Intel", "Intel(R) UHD Graphics 630"),
    _W.INTEL_UHD_770: _d3d11("Intel", "Intel(R) UHD Graphics 770"),
    _W.INTEL_IRIS_XE: _d3d11("Intel", "Intel(R) Iris(R) Xe Graphics"),
    _W.INTEL_ARC_A770: _d3d11("Intel", "Intel(R) Arc(TM) A770 Graphics"),
    _W.APPLE_M1: "Apple M1",
    _W.APPLE_M2: "Apple M2",
    _W.APPLE_M3: "Apple M3",
    _W.SWIFTSHADER: (
        "ANGLE (Google, Vulkan 1.1.0 (SwiftShader Device (Subzero) (0x0000C0DE)), "
        "SwiftShader driver)"
    ),
    _W.ANGLE_DIRECT3D11: _d3d11("NVIDIA", "NVIDIA GeForce GTX 1060 6GB"),
}