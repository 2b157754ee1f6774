"""CLI for fold-overlay."""

from __future__ import annotations

from pathlib import Path

import click

from fold_overlay import __version__
from fold_overlay.layout.constants import CHAR_WIDTH, LINE_HEIGHT
from fold_overlay.layout.regions import resolve_region_geometry, resolve_syntax_mode
from fold_overlay.layout.text import MonospaceLayoutService
from fold_overlay.log import setup_default_logging
from fold_overlay.model import FoldedRegion, TextDocument
from fold_overlay.render import render_preview_svg
from fold_overlay.render.color import brightness, fold_palette, parse_color
from fold_overlay.render.preview import preview_viewport
from fold_overlay.themes import THEMES


def parse_fold_spec(value: str) -> tuple[int, int]:
    """Parse ``START:END`` (1-based, inclusive) into a pair of line numbers."""
    start, sep, end = value.partition(":")
    if not sep:
        raise ValueError(f"Fold '{value}' must look like START:END")
    try:
        first, last = int(start), int(end)
    except ValueError:
        raise ValueError(f"Fold '{value}' must use integer line numbers") from None
    if first > last:
        raise ValueError(f"Fold '{value}' ends before it starts")
    return first, last


def _fold_option_callback(ctx, param, values) -> list[tuple[int, int]]:
    try:
        return [parse_fold_spec(v) for v in values]
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


def _build_regions(document: TextDocument, folds: list[tuple[int, int]]) -> list[FoldedRegion]:
    regions = []
    for start, end in folds:
        try:
            regions.append(document.fold(start, end))
        except IndexError as e:
            raise click.BadParameter(f"{start}:{end}: {e}", param_hint="'--fold'")
    return regions


fold_option = click.option(
    "--fold", "folds", multiple=True, callback=_fold_option_callback,
    metavar="START:END",
    help="Folded line range, 1-based and inclusive. Repeat for nested folds, outermost first.",
)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """fold-overlay: Render nested background bands for folded text regions."""
    setup_default_logging("DEBUG" if verbose else "WARNING")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@fold_option
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Editor theme (default: dark)")
@click.option("--width", type=int, default=None, help="Viewport width in pixels")
@click.option("--height", type=int, default=None, help="Viewport height in pixels")
@click.option("--zoom", type=float, default=1.0, help="Zoom factor (default: 1.0)")
@click.option("--scroll-x", type=float, default=0.0, help="Horizontal scroll offset")
@click.option("--scroll-y", type=float, default=0.0, help="Vertical scroll offset")
@click.option("--char-width", type=float, default=CHAR_WIDTH,
              help=f"Character advance in pixels (default: {CHAR_WIDTH:g})")
@click.option("--line-height", type=float, default=LINE_HEIGHT,
              help=f"Line height in pixels (default: {LINE_HEIGHT:g})")
@click.option("--no-text", is_flag=True, help="Draw only the overlay, not the document text")
@click.option("--no-highlighting", is_flag=True, help="Lay lines out in plain mode")
def render(
    input_file: Path,
    output: Path | None,
    folds: list[tuple[int, int]],
    theme: str,
    width: int | None,
    height: int | None,
    zoom: float,
    scroll_x: float,
    scroll_y: float,
    char_width: float,
    line_height: float,
    no_text: bool,
    no_highlighting: bool,
) -> None:
    """Render a fold overlay preview of a text file to SVG."""
    document = TextDocument(input_file.read_text())
    regions = _build_regions(document, folds)

    svg = render_preview_svg(
        document, regions, THEMES[theme],
        zoom=zoom, width=width, height=height,
        scroll_x=scroll_x, scroll_y=scroll_y,
        char_width=char_width, line_height=line_height,
        show_text=not no_text,
        highlighting_enabled=not no_highlighting,
    )
    if not svg.endswith("\n"):
        svg += "\n"

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {document.line_count} lines, "
               f"{len(regions)} folded regions -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@fold_option
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Editor theme (default: dark)")
@click.option("--char-width", type=float, default=CHAR_WIDTH,
              help=f"Character advance in pixels (default: {CHAR_WIDTH:g})")
@click.option("--line-height", type=float, default=LINE_HEIGHT,
              help=f"Line height in pixels (default: {LINE_HEIGHT:g})")
def info(
    input_file: Path,
    folds: list[tuple[int, int]],
    theme: str,
    char_width: float,
    line_height: float,
) -> None:
    """Show the geometry and color of each folded region."""
    document = TextDocument(input_file.read_text())
    regions = _build_regions(document, folds)
    theme_obj = THEMES[theme]

    layouts = MonospaceLayoutService(document, char_width)
    viewport = preview_viewport(layouts, line_height)
    mode = resolve_syntax_mode(document)
    palette = fold_palette(theme_obj.background_color, len(regions))

    click.echo(f"Lines: {document.line_count}")
    click.echo(f"Theme: {theme_obj.name} "
               f"(brightness {brightness(parse_color(theme_obj.background_color)):.3f})")
    click.echo(f"Viewport: {viewport.width}x{viewport.height}")
    click.echo(f"Base fill: {palette[0].to_hex()}")
    click.echo(f"Regions: {len(regions)}")
    for i, region in enumerate(regions):
        geometry = resolve_region_geometry(region, i, document, layouts, mode, viewport)
        shadow = " (shadow)" if i == len(regions) - 1 else ""
        click.echo(f"  [{i}] lines {region.start_line.line_number}-"
                   f"{region.end_line.line_number}: "
                   f"x={geometry.x:g} y={geometry.y:g} "
                   f"w={geometry.width} h={geometry.height} "
                   f"{palette[i + 1].to_hex()}{shadow}")


@cli.command()
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Editor theme (default: dark)")
@click.option("--regions", "region_count", type=click.IntRange(min=0), default=3,
              help="Number of nested regions (default: 3)")
def colors(theme: str, region_count: int) -> None:
    """Print the nesting color ramp for a theme."""
    theme_obj = THEMES[theme]
    palette = fold_palette(theme_obj.background_color, region_count)
    click.echo(f"base  {palette[0].to_hex()}  L={palette[0].l:.4f}")
    for i, color in enumerate(palette[1:]):
        click.echo(f"[{i}]   {color.to_hex()}  L={color.l:.4f}")
