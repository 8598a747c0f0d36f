"""Daily commodity geomean collector for the Badan Pangan price panel."""

__version__ = "0.1.0"
