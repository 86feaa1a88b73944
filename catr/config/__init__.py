# catr/config/__init__.py
# Settings for catr
