"""Women's health calculator: fertility windows, due dates and weight gain.

Subpackages:
    calculator/: the calculation engine and its configuration
    models/    : immutable result records

Core modules:
    config        : environment settings
    logging_config: logging setup for host applications
"""

__version__ = "0.1.0"
