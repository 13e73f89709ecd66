from notichain.cli import cli

cli()
