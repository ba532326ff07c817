"""Plugin and MIME type descriptions reported through ``navigator``."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass

from .jsutil import escape_js_string

_PDF = "Portable Document Format"
_INTERNAL_PDF = "internal-pdf-viewer"


@dataclass(frozen=True)
class MimeTypeInfo:
    """A MIME type as reported by ``navigator.mimeTypes``."""

    mime_type: str
    description: str
    suffixes: str

    @classmethod
    def pdf(cls) -> MimeTypeInfo:
        """``application/pdf``."""
        return cls("application/pdf", _PDF, "pdf")

    @classmethod
    def x_pdf(cls) -> MimeTypeInfo:
        """``application/x-pdf``."""
        return cls("application/x-pdf", _PDF, "pdf")

    @classmethod
    def text_pdf(cls) -> MimeTypeInfo:
        """``text/pdf``."""
        return cls("text/pdf", _PDF, "pdf")


@dataclass(frozen=True)
class PluginInfo:
    """A browser plugin together with the MIME types it handles."""

    name: str
    description: str
    filename: str
    version: str | None = None
    mime_types: tuple[MimeTypeInfo, ...] = ()

    def with_mime_type(self, mime_type: MimeTypeInfo) -> PluginInfo:
        """A copy that also handles ``mime_type``."""
        return dataclasses.replace(self, mime_types=(*self.mime_types, mime_type))

    def with_version(self, version: str) -> PluginInfo:
        """A copy carrying ``version``."""
        return dataclasses.replace(self, version=version)

    @classmethod
    def chrome_pdf_viewer(cls) -> PluginInfo:
        return cls("Chrome PDF Viewer", _PDF, _INTERNAL_PDF).with_mime_type(MimeTypeInfo.pdf())

    @classmethod
    def chromium_pdf_viewer(cls) -> PluginInfo:
        return cls("Chromium PDF Viewer", _PDF, _INTERNAL_PDF).with_mime_type(
            MimeTypeInfo.pdf()
        )

    @classmethod
    def native_client(cls) -> PluginInfo:
        return cls("Native Client", "", "internal-nacl-plugin")


def default_chrome_plugins() -> list[PluginInfo]:
    """The PDF plugins a current Chromium-based browser reports."""
    pdf = MimeTypeInfo.pdf()
    return [
        PluginInfo("PDF Viewer", _PDF, _INTERNAL_PDF).with_mime_type(pdf),
        PluginInfo.chrome_pdf_viewer(),
        PluginInfo.chromium_pdf_viewer(),
        PluginInfo("Microsoft Edge PDF Viewer", _PDF, _INTERNAL_PDF).with_mime_type(pdf),
        PluginInfo("WebKit built-in PDF", _PDF, _INTERNAL_PDF).with_mime_type(pdf),
    ]


def _esc(text: str) -> str:
    return escape_js_string(text, single_quotes=True)


def _mime_type_json(mime_type: MimeTypeInfo) -> str:
    return '{"type":"%s","description":"%s","suffixes":"%s"}' % (
        _esc(mime_type.mime_type),
        _esc(mime_type.description),
        _esc(mime_type.suffixes),
    )


def _plugin_json(plugin: PluginInfo) -> str:
    mime_types = ",".join(_mime_type_json(mt) for mt in plugin.mime_types)
    return '{"name":"%s","description":"%s","filename":"%s","mimeTypes":[%s]}' % (
        _esc(plugin.name),
        _esc(plugin.description),
        _esc(plugin.filename),
        mime_types,
    )


def plugins_to_json(plugins: Iterable[PluginInfo]) -> str:
    """A JavaScript array literal describing ``plugins`` and their MIME types."""
    return "[" + ",".join(_plugin_json(p) for p in plugins) + "]"