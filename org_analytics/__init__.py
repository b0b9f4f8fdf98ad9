"""Employee hierarchy analytics: reporting tree construction, salary policy and reporting line checks."""

__version__ = "0.1.0"
