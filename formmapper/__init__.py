"""Form Mapper: extract answers from saved Google Forms pages and map them to JSON."""

__version__ = "0.1.0"
