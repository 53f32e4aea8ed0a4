from sectools.main import cli

cli()
