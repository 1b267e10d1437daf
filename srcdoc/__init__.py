"""Extract javadoc style comments from source files into Markdown."""

__version__ = "0.1.0"
