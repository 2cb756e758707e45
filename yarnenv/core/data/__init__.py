"""
Static data for the yarn CLI — constants with no resolution logic.

Usage::

    from yarnenv.core.data import constants

    constants.LOCKFILE_FILENAME   # "yarn.lock"
"""
