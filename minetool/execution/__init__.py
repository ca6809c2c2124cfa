"""
Execution components for minetool.

The sequential task pipeline and the chest retrieval orchestrator built on it.
"""

from .task_queue import TaskQueue
from .retrieval import ChestRetriever, RetrievalState

__all__ = ["TaskQueue", "ChestRetriever", "RetrievalState"]
