"""CLI entry point for ngstubs."""

from pathlib import Path

import click

from ngstubs.config import GeneratorConfig
from ngstubs.errors import GeneratorError
from ngstubs.pipeline import generate


@click.command()
@click.option("-s", "--swagger-name", "swagger_path", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="OpenAPI/Swagger document (JSON or YAML).")
@click.option("-o", "--output-dir", default=".", type=click.Path(file_okay=False, path_type=Path), help="Directory to write interfaces/ and services/ into.")
@click.option("--overwrite", is_flag=True, help="Reuse service directories left by a previous run instead of failing.")
@click.option("--ext", "extension", default="ts", help="Extension of generated files.")
def main(swagger_path: Path, output_dir: Path, overwrite: bool, extension: str):
    """Generate TypeScript interfaces and Angular services from an OpenAPI document."""
    config = GeneratorConfig(
        input_path=swagger_path,
        output_dir=output_dir,
        extension=extension,
        overwrite=overwrite,
    )

    click.echo("Generating Interfaces and Services...")
    count = 0
    try:
        for path in generate(config):
            click.echo(f"  Generating: {path}")
            count += 1
    except GeneratorError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Generated {count} files in {output_dir}")
