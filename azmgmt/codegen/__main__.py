"""Generate Python modules from Azure OpenAPI specifications"""
import logging

import click

from azmgmt.codegen import openapi


@click.command()
@click.argument("openapi_root")
@click.argument("openapi_files")
@click.argument("output_dir", type=click.Path(file_okay=False))
@click.option("--root-package", default="azmgmt.mgmt", show_default=True, help="The package the output directory is imported as.")
@click.option("--log-level", default="INFO", show_default=True, type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
def main(openapi_root: str, openapi_files: str, output_dir: str, root_package: str, log_level: str):
	"""
	Generate modules for OPENAPI_FILES into OUTPUT_DIR

	OPENAPI_ROOT is the root of the specs repo, as a `file://` or `https://` url.
	OPENAPI_FILES is a comma-separated list of paths relative to that root.
	"""
	logging.basicConfig(level=log_level.upper(), format="%(asctime)s %(levelname)s %(name)s %(message)s")
	openapi.main(openapi_root, openapi_files, output_dir, root_package)


if __name__ == "__main__":
	main()  # pylint: disable=no-value-for-parameter
