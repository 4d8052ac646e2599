"""Interactive superposition of sinusoidal waves."""
__version__ = "0.1.0"
