"""Core engine-domain exports."""

from .roadmap import RoadmapOrchestrator
from .sprint import SprintPlanner

__all__ = ["RoadmapOrchestrator", "SprintPlanner"]
