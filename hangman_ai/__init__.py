"""hangmanAI: evaluate Hangman letter-guessing strategies over a dictionary."""

__version__ = "1.0.0"
