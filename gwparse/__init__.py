"""Grammar elements that parse command lines and yield bash and fish completion candidates."""

__version__ = "0.1.0"