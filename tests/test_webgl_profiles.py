from stealthprint.webgl_profiles import WebGLLimits, WebGLProfile


def test_all_lists_every_member_in_order():
    assert WebGLProfile.all() == list(WebGLProfile)


def test_common_desktop_is_subset_of_all():
    common = WebGLProfile.common_desktop()
    assert set(common) <= set(WebGLProfile.all())
    assert len(set(common)) == len(common)
    assert common[0] is WebGLProfile.NVIDIA_GTX_1660


def test_every_profile_has_strings_and_limits():
    profiles = WebGLProfile.all()
    assert len(profiles) == 19
    for profile in profiles:
        assert len(profile.vendor()) > 0
        assert len(profile.renderer()) > 0
        limits = profile.limits()
        assert limits.max_texture_size >= 4096
        assert limits.max_vertex_attribs == 16


def test_renderers_are_unique():
    renderers = [profile.renderer() for profile in WebGLProfile.all()]
    assert len(set(renderers)) == 19


def test_nvidia_vendor_and_renderer():
    profile = WebGLProfile.NVIDIA_RTX_3060
    assert profile.vendor() == "NVIDIA Corporation"
    assert profile.renderer() == (
        "ANGLE (NVIDIA, NVIDIA GeForce RTX 3060 Direct3D11 vs_5_0 ps_5_0, D3D11)"
    )


def test_apple_and_software_profiles():
    assert WebGLProfile.APPLE_M1.renderer() == "Apple M1"
    assert WebGLProfile.APPLE_M2.vendor() == "Apple Inc."
    assert WebGLProfile.SWIFTSHADER.vendor() == "Google Inc. (Google)"
    assert WebGLProfile.ANGLE_DIRECT3D11.vendor() == "Google Inc. (NVIDIA)"
    assert "SwiftShader" in WebGLProfile.SWIFTSHADER.renderer()


def test_vendor_families():
    assert WebGLProfile.AMD_RX_7900_XT.vendor() == "AMD"
    assert WebGLProfile.INTEL_ARC_A770.vendor() == "Intel Inc."
    assert "RX 7900 XT" in WebGLProfile.AMD_RX_7900_XT.renderer()


def test_limits_by_family():
    assert WebGLProfile.NVIDIA_RTX_4090.limits() == WebGLLimits(16384, (32767, 32767), 16)
    assert WebGLProfile.AMD_RX_580.limits() == WebGLLimits(16384, (16384, 16384), 16)
    assert WebGLProfile.APPLE_M3.limits().max_viewport_dims == (16384, 16384)
    assert WebGLProfile.SWIFTSHADER.limits() == WebGLLimits(8192, (8192, 8192), 16)
    assert WebGLProfile.ANGLE_DIRECT3D11.limits() == WebGLProfile.SWIFTSHADER.limits()