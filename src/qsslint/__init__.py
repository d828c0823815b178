"""qsslint - syntax and semantic checker for Qt style sheets."""

__version__ = "1.0"
