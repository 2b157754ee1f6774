#!/usr/bin/env python3
"""Batch render the example documents with every theme and a few zoom levels.

Outputs go to /tmp/fold_overlay_renders/.

Usage:
    python scripts/render_gallery.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from fold_overlay.model import TextDocument  # noqa: E402
from fold_overlay.render.preview import render_preview_svg  # noqa: E402
from fold_overlay.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/fold_overlay_renders")
EXAMPLES_DIR = project_root / "examples"

# (example file, folds outermost first)
CASES = [
    (EXAMPLES_DIR / "inventory.txt", [(4, 13), (8, 13), (10, 12)]),
]
ZOOMS = [1.0, 1.5, 2.0]


def render_case(
    path: Path, folds: list[tuple[int, int]], theme_name: str, zoom: float, output_dir: Path
) -> tuple[str, list[str]]:
    """Render one document/theme/zoom combination to SVG (and optionally PNG).

    Returns (name, list_of_issues).
    """
    name = f"{path.stem}_{theme_name}_x{zoom:g}"
    issues: list[str] = []

    try:
        document = TextDocument(path.read_text())
        regions = [document.fold(start, end) for start, end in folds]
    except (OSError, IndexError) as e:
        return name, [f"INPUT ERROR: {e}"]

    svg_str = render_preview_svg(document, regions, THEMES[theme_name], zoom=zoom)
    svg_path = output_dir / f"{name}.svg"
    svg_path.write_text(svg_str)

    # Try PNG conversion via cairosvg (optional)
    try:
        import cairosvg

        png_path = output_dir / f"{name}.png"
        cairosvg.svg2png(bytestring=svg_str.encode(), write_to=str(png_path), scale=2)
    except ImportError:
        issues.append("cairosvg not available, skipping PNG")
    except Exception as e:
        issues.append(f"PNG conversion error: {e}")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render fold overlay previews")
    parser.add_argument(
        "--theme", choices=sorted(THEMES), action="append",
        help="Theme to render (repeatable, default: all)",
    )
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    theme_names = args.theme or list(THEMES)

    jobs = [(path, folds, t, z) for path, folds in CASES for t in theme_names for z in ZOOMS]
    print(f"Rendering {len(jobs)} previews to {OUTPUT_DIR}/")
    print()

    any_errors = False
    for path, folds, theme_name, zoom in jobs:
        name, issues = render_case(path, folds, theme_name, zoom, OUTPUT_DIR)
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<40}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
