"""Read and write individual parts of Office Open XML spreadsheet packages."""

__version__ = "0.1.0"