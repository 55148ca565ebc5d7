"""
Placing external images at a fixed pixel size.

Registers the custom ``src_size`` source, which draws a texture centred on
the canvas at a given width and height in pixels and leaves the rest
transparent.
"""

from dataclasses import dataclass
from typing import Any, Optional

from hydrakit.config import DEFAULT_CANVAS, CanvasConfig
from hydrakit.core.chain import SRC, Chain, OperatorDefinition, OperatorInput, register_operator, solid, source

SRC_SIZE_GLSL = """
    vec2 st = _st;
    float normWidth = width / resolution.x;
    float normHeight = height / resolution.y;
    float left = 0.5 - normWidth * 0.5;
    float bottom = 0.5 - normHeight * 0.5;
    if (st.x >= left && st.x <= left + normWidth && st.y >= bottom && st.y <= bottom + normHeight) {
      return texture2D(tex, vec2((st.x - left) / normWidth, (st.y - bottom) / normHeight));
    }
    return vec4(0.0, 0.0, 0.0, 0.0);
"""

SRC_SIZE = register_operator(
    OperatorDefinition(
        name="src_size",
        type=SRC,
        inputs=(
            OperatorInput("tex", "sampler2D", None),
            OperatorInput("width", "float", 400.0),
            OperatorInput("height", "float", 300.0),
        ),
        glsl=SRC_SIZE_GLSL,
    )
)


@dataclass
class Texture:
    width: int
    height: int


@dataclass
class ExternalSource:
    """An engine input slot (``s0``..``s3``) and the texture loaded into it, if any."""
    name: str
    texture: Optional[Texture] = None


def src_size(tex: ExternalSource, width: Any = 400.0, height: Any = 300.0) -> Chain:
    return source("src_size", tex, width, height)


def _transparent() -> Chain:
    return solid(0, 0, 0, 0)


def src_scale(src: ExternalSource, scale: Any = 1.0) -> Chain:
    """
    Show ``src`` at ``scale`` times its native size, centred.

    ``scale`` may be a zero-argument function, in which case width and
    height follow it every frame. A slot with no texture gives a
    transparent chain.
    """
    tex = src.texture if src else None
    if tex is None:
        return _transparent()

    if callable(scale):
        return src_size(
            src,
            lambda: tex.width * scale(),
            lambda: tex.height * scale(),
        )
    return src_size(src, tex.width * scale, tex.height * scale)


def src_fit(
    src: ExternalSource,
    max_width: Optional[float] = None,
    max_height: Optional[float] = None,
    canvas: Optional[CanvasConfig] = None,
) -> Chain:
    """
    Show ``src`` as large as fits in the box, keeping its aspect ratio.

    Args:
        src: Source slot to display.
        max_width: Box width in pixels; canvas width by default.
        max_height: Box height in pixels; canvas height by default.
        canvas: Canvas dimensions used for the defaults.
    """
    tex = src.texture if src else None
    if tex is None:
        return _transparent()

    canvas = canvas or DEFAULT_CANVAS
    max_width = canvas.width if max_width is None else max_width
    max_height = canvas.height if max_height is None else max_height

    aspect = tex.width / tex.height
    if aspect > max_width / max_height:
        # Wider than the box: fit to width
        width, height = max_width, max_width / aspect
    else:
        width, height = max_height * aspect, max_height
    return src_size(src, width, height)
