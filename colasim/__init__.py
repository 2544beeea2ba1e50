"""Single-server queue simulation driven by a seeded congruential generator."""

__version__ = "0.1.0"
__all__ = ["lcgrand", "simulation"]