"""scholartext CLI entrypoint."""

from __future__ import annotations

import json
from pathlib import Path

import click

from scholartext.insights import key_points, reading_time
from scholartext.parser.base import ClassifierSettings
from scholartext.parser.prose_parser import ProseParser
from scholartext.renderer.descriptors import article_descriptors, build_requirement_item, requirement_descriptor
from scholartext.renderer.html_renderer import HTMLRenderer
from scholartext.utils import get_logger, setup_logging

logger = get_logger("cli")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), required=True, help="Output file path")
@click.option(
    "--mode",
    type=click.Choice(["article", "requirements"], case_sensitive=False),
    default="article",
    show_default=True,
    help="Render a whole article or a list of requirement items",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["html", "json"], case_sensitive=False),
    default="html",
    show_default=True,
    help="HTML page or JSON block descriptors",
)
@click.option("--title", type=str, default=None, help="Page title (defaults to the input file name)")
@click.option("--no-artifact-repair", is_flag=True, help="Keep 'nest'/'stop'/'–bulletin' tokens as written")
@click.option("--title-split-min-words", type=int, default=None, help="Numbered items need more words than this to get a title/body split")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
def main(
    input_path: Path,
    output: Path,
    mode: str,
    output_format: str,
    title: str | None,
    no_artifact_repair: bool,
    title_split_min_words: int | None,
    log_level: str,
) -> None:
    """Classify loosely formatted scholarship text and render it."""
    setup_logging(log_level)

    overrides: dict[str, object] = {"repair_artifacts": not no_artifact_repair}
    if title_split_min_words is not None:
        overrides["title_split_min_words"] = title_split_min_words
    parser = ProseParser(ClassifierSettings(**overrides))
    raw = input_path.read_text(encoding="utf-8", errors="ignore")
    page_title = title or input_path.stem

    if mode.lower() == "requirements":
        requirements = _load_requirements(input_path, raw)
        items = [build_requirement_item(text, idx, parser) for idx, text in enumerate(requirements)]
        logger.info(f"Classified {len(items)} requirement items from {input_path}")
        if output_format.lower() == "json":
            rendered = json.dumps([requirement_descriptor(item) for item in items], ensure_ascii=False, indent=2)
        else:
            rendered = HTMLRenderer().render_requirements(items, title=page_title)
    else:
        blocks = parser.parse(raw)
        logger.info(f"Classified {len(blocks)} blocks from {input_path}")
        if output_format.lower() == "json":
            payload = {
                "title": page_title,
                "reading_time": reading_time(raw),
                "key_points": key_points(raw),
                "blocks": article_descriptors(blocks),
            }
            rendered = json.dumps(payload, ensure_ascii=False, indent=2)
        else:
            rendered = HTMLRenderer().render_article(
                blocks,
                title=page_title,
                reading_time=reading_time(raw),
                key_points=key_points(raw),
            )

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered, encoding="utf-8")

    click.echo(f"Rendered: {output}")


def _load_requirements(input_path: Path, raw: str) -> list[str]:
    if input_path.name.lower().endswith(".json"):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise click.ClickException(f"Invalid JSON in {input_path.name}: {exc}") from exc
        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            raise click.ClickException(f"{input_path.name} must contain a JSON array of strings")
        return data
    return [line.strip() for line in raw.splitlines() if line.strip()]


if __name__ == "__main__":  # pragma: no cover
    main()
