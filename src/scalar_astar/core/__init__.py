"""Core data models for the scalar A* search."""

from .data_models import Point, Action, FrontierEntry, distance

__all__ = [
    'Point',
    'Action',
    'FrontierEntry',
    'distance'
]
