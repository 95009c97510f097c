"""CLI entry point for raml2html."""

import logging
from pathlib import Path

import click

from raml2html.config import default_config
from raml2html.exceptions import Raml2HtmlError
from raml2html.parser.detect import FilePath
from raml2html.pipeline import parse_with_config


@click.command()
@click.argument("args", nargs=-1, metavar="[RAML_FILE]")
@click.option("-i", "--input", "input_path", default=None, type=click.Path(path_type=Path), help="RAML input file.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="HTML output file. Defaults to stdout.")
@click.option("-t", "--template", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Jinja2 template file to use.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, args: tuple[str, ...], input_path: Path | None, output: Path | None, template: Path | None, verbose: bool):
    """Generate HTML documentation from a RAML file."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if input_path is None:
        if len(args) != 1:
            click.echo("Error: You need to specify the RAML input file", err=True)
            click.echo(ctx.get_help(), err=True)
            ctx.exit(1)
        input_path = Path(args[0])

    try:
        html = parse_with_config(FilePath(input_path), default_config(template))
    except Raml2HtmlError as e:
        click.echo(f"Error parsing: {e}", err=True)
        ctx.exit(e.exit_code)

    if output:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(html, encoding="utf-8")
        except OSError as e:
            click.echo(f"Error writing {output}: {e}", err=True)
            ctx.exit(1)
    else:
        click.echo(html, nl=False)
