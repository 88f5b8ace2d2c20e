"""Seismic first-break picking and survey parameter file handling."""

__version__ = "0.1.0"

__all__ = ["neunet", "outfbk", "p190", "relation", "shotpoints", "spp", "svsys", "weights"]