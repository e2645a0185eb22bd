"""Floor plan layout engine for kitchen and bathroom cabinetry."""

__version__ = "0.1.0"
