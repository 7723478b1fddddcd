"""sesh: declaratively launch tmux sessions from a YAML spec."""

__version__ = "0.1.0"
