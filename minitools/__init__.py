"""Small command-line tools: greeter, unit converter, file organizer and to-do list."""

__version__ = "0.1.0"