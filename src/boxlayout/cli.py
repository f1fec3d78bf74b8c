"""Click CLI wiring for flowing text files into boxes."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

import click

from .alignment import Alignment, parse_alignment, top
from .box import columns as columns_box
from .box import hsep, para
from .config_loader import ConfigError, load_config
from .datatypes import AppConfig
from .render import print_box

logger = logging.getLogger(__name__)

_ALIGN_HELP = "Line alignment: left, right, center (center1), center2, first or last."


def _alignment_option(value: Optional[str], fallback: Alignment) -> Alignment:
    if value is None:
        return fallback
    try:
        return parse_alignment(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--align") from None


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="TOML file providing [flow] and [columns] defaults.",
)
@click.option("--verbose", is_flag=True, help="Log layout diagnostics to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str], verbose: bool) -> None:
    """Lay out plain text as fixed-width paragraphs or columns."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if config_path is None:
        ctx.obj = AppConfig()
        return
    try:
        ctx.obj = load_config(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command("para")
@click.option("--width", type=click.IntRange(min=1), default=None, help="Line width (default from config).")
@click.option("--align", "align_name", default=None, help=_ALIGN_HELP)
@click.argument("source", type=click.File("r"), default="-")
@click.pass_obj
def para_command(config: AppConfig, width: Optional[int], align_name: Optional[str], source: TextIO) -> None:
    """Flow SOURCE (default stdin) into a single paragraph."""

    resolved_width = width if width is not None else config.flow.width
    alignment = _alignment_option(align_name, config.flow.align)
    box = para(alignment, resolved_width, source.read())
    logger.debug("Paragraph box is %d rows x %d cols", box.rows, box.cols)
    print_box(box)


@main.command("columns")
@click.option("--width", type=click.IntRange(min=1), default=None, help="Column width (default from config).")
@click.option("--height", type=click.IntRange(min=1), default=None, help="Lines per column.")
@click.option("--gap", type=click.IntRange(min=0), default=None, help="Blank columns between columns.")
@click.option("--align", "align_name", default=None, help=_ALIGN_HELP)
@click.argument("source", type=click.File("r"), default="-")
@click.pass_obj
def columns_command(
    config: AppConfig,
    width: Optional[int],
    height: Optional[int],
    gap: Optional[int],
    align_name: Optional[str],
    source: TextIO,
) -> None:
    """Flow SOURCE (default stdin) into side-by-side columns."""

    resolved_width = width if width is not None else config.flow.width
    resolved_height = height if height is not None else config.columns.height
    resolved_gap = gap if gap is not None else config.columns.gap
    alignment = _alignment_option(align_name, config.columns.align)
    boxes = columns_box(alignment, resolved_width, resolved_height, source.read())
    logger.debug("Flowed text into %d column(s)", len(boxes))
    print_box(hsep(resolved_gap, top, boxes))


if __name__ == "__main__":  # pragma: no cover
    main()
