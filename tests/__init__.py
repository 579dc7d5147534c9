"""
The root tests directory is a package so that shared factories can be imported as
`tests.helpers...`. Test subdirectories go without __init__.py files (PEP 420 namespace
packages), which keeps the tree free of empty files.
"""
