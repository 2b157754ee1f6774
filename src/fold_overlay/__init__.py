"""fold-overlay: shaded, nested backgrounds for folded regions of a text editor."""

__version__ = "0.1.0"

from fold_overlay.model import (  # noqa: E402
    PLAIN_MODE,
    DocumentLine,
    FoldedRegion,
    Rectangle,
    SyntaxMode,
    TextDocument,
    ViewportState,
)
from fold_overlay.render import FoldOverlayRenderer, render_preview_svg  # noqa: E402

__all__ = [
    "PLAIN_MODE",
    "DocumentLine",
    "FoldOverlayRenderer",
    "FoldedRegion",
    "Rectangle",
    "SyntaxMode",
    "TextDocument",
    "ViewportState",
    "__version__",
    "render_preview_svg",
]
