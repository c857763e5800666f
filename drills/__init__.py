"""Small programming drills: a function adapter, a reversing WSGI app, number streams and a toy robot."""

__version__ = "0.1.0"