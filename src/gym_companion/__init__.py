"""gym-companion: identify gym machines from photos and plan exercises for them."""

__version__ = "0.1.0"
