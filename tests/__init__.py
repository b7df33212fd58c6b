"""
Only the root tests directory carries an __init__.py; subdirectories are namespace packages
(PEP 420). This keeps pytest's package detection and import behavior consistent while test
module names stay unique across the tree.
"""
