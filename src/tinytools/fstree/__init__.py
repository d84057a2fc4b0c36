"""
Filesystem walking for the ftree and dirsize tools.
"""
