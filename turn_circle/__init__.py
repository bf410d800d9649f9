"""
Turn Circle

Core modules:
- circle: the circular turn order (TurnCircle)
- events / event_sink: optional structured events for mutations and rounds
- trace: helpers for walking the circle round by round (no behavior changes)
"""
from turn_circle.circle import TurnCircle

__all__ = ["TurnCircle"]
