"""Screen logic for a terminal novel reader: search funnel, search and shelf screens, input widgets."""

__version__ = "0.1.0"