"""High-level rendering API.

Classes:
    RenderService: Renders text to monochrome canvases or colored lines,
        caching per-font baseline analysis.

Functions:
    render_text: One-shot rendering with a shared service instance.
"""

from .services import RenderService, ScaledFontMetrics, build_font_metrics, render_text

__all__ = ['RenderService', 'ScaledFontMetrics', 'build_font_metrics', 'render_text']
