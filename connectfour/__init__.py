"""Connect Four for the terminal, with reflex and minimax computer opponents."""

__version__ = "0.1.0"