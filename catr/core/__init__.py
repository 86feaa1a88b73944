# catr/core/__init__.py
# Pure core layer: types, numbering, exceptions & output registry
