"""myshell - a small interactive shell with builtins and PATH lookup"""

__version__ = "0.1.0"
