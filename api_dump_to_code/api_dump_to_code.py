import logging
from pathlib import Path

import click

from .cli_utils import load_json_file, reconstruct_command_line
from .pipeline import ApiDumpParser, GeneratorConfig, OutputConfig, OutputMode, PipelineGenerator
from .pipeline.errors import ApiDumpToCodeError, SchemaLoadError

logger = logging.getLogger(__name__)


@click.command()
@click.option("--docs", "-d", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True), help="API documentation JSON")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--no-elevated", is_flag=True, default=False, help="Skip the elevated tier declarations")
@click.option("--no-enums", is_flag=True, default=False, help="Skip the enum declarations")
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite existing output files")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", type=click.Path(file_okay=False, resolve_path=True))
def api_dump_to_code(docs, config, no_elevated, no_enums, force, verbose, path, output):
    """Generate C# declarations from the API dump at PATH into the OUTPUT directory."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        parser = ApiDumpParser()
        dump = parser.parse(load_json_file(path))
        api_docs = parser.parse_docs(load_json_file(docs)) if docs is not None else {}
        logger.debug("Loaded %d classes and %d documentation entries", len(dump.classes), len(api_docs))

        if config is not None:
            raw_config = load_json_file(config)
            if not isinstance(raw_config, dict):
                raise SchemaLoadError(f"Config file {config} must contain a JSON object")
            config = GeneratorConfig.from_dict(raw_config)
        else:
            config = GeneratorConfig()

        # CLI flags override the config file
        if no_elevated:
            config.generate_elevated = False
        if no_enums:
            config.generate_enums = False

        output_config = OutputConfig(mode=OutputMode.FORCE if force else OutputMode.ERROR_IF_EXISTS)

        codegen = PipelineGenerator(dump, api_docs, config, command_line=reconstruct_command_line(api_dump_to_code))
        written = codegen.write(Path(output), output_config)
    except (ApiDumpToCodeError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e

    for file_path in written:
        click.echo(f"Generated {file_path}")
