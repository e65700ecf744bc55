"""Step and training tracker: distance, speed and calories from activity records."""

__version__ = "0.1.0"
__all__ = ["common", "spentcalories", "daysteps", "cli"]