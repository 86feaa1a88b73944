# catr/cli/__init__.py
# Command-line layer: Typer app, error decorators & output manager
