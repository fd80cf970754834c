"""mekbuilder -- scaffolds MekScript projects from a JSON description."""

__version__ = "0.1.0"
