"""Containers for model geometry and texture coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CubeModelItem:
    """Vertex coordinates and triangle indices of one cube."""

    model: list[float] = field(default_factory=list)
    point: list[int] = field(default_factory=list)


@dataclass
class SteveModel:
    """Geometry of every part of a player model."""

    head: CubeModelItem = field(default_factory=CubeModelItem)
    body: CubeModelItem = field(default_factory=CubeModelItem)
    left_arm: CubeModelItem = field(default_factory=CubeModelItem)
    right_arm: CubeModelItem = field(default_factory=CubeModelItem)
    left_leg: CubeModelItem = field(default_factory=CubeModelItem)
    right_leg: CubeModelItem = field(default_factory=CubeModelItem)
    cape: CubeModelItem = field(default_factory=CubeModelItem)


@dataclass
class SteveTexture:
    """Texture coordinates of every part of a player model."""

    head: list[float] = field(default_factory=list)
    body: list[float] = field(default_factory=list)
    left_arm: list[float] = field(default_factory=list)
    right_arm: list[float] = field(default_factory=list)
    left_leg: list[float] = field(default_factory=list)
    right_leg: list[float] = field(default_factory=list)
    cape: list[float] = field(default_factory=list)