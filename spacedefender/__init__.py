"""Space defender: a small arcade shooter with meteors, bullets and ammo bonuses."""

__version__ = "0.1.0"
__all__ = ["__version__"]