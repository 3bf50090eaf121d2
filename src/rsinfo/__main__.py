from rsinfo.cli.main import cli

cli()
