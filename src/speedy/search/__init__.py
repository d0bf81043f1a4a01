"""Concurrent tree-search engine."""

from speedy.search.coordinator import parallel_search
from speedy.search.runner import SearchTask, run_search
from speedy.search.walker import DirectoryWalker

__all__ = ["DirectoryWalker", "SearchTask", "parallel_search", "run_search"]
