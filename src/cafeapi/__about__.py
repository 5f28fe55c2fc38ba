# Directly modelled on Donald Stufft's readme_renderer code:
# https://github.com/pypa/readme_renderer/blob/master/readme_renderer/__about__.py

__all__ = [
    "__title__",
    "__summary__",
    "__version__",
    "__author__",
    "__license__",
    "__copyright__",
]

__title__ = "CafeApi"
__summary__ = "A REST API to manage cafe items."

__version__ = "1.0.0"

__author__ = "Eric Lemoine"

__license__ = "BSD 3-Clause"
__copyright__ = f"Copyright 2023 {__author__}"
