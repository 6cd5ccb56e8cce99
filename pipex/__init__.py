"""Run commands chained by pipes between an input file and an output file, with here-document input."""

__version__ = "0.1.0"