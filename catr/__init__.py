# catr/__init__.py
# Package metadata for catr

__version__ = "0.1.0"
