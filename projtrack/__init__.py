"""projtrack - a small command-line project tracker."""

__version__ = "0.1.0"
