from qdrant_collection_cli.cli import cli

cli()
