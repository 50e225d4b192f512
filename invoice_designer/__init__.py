"""Invoice template designer package initializer.

The package intentionally re-exports nothing; importing a subpackage pulls in
only the layer it needs.
"""
