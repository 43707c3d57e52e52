"""CLI subcommands for semvermatch."""
