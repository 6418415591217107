from trackit.cli.main import cli

cli()
