"""Minecraft skin loading and type detection, model geometry and UVs, walking animation and viewer state."""

__version__ = "0.1.0"