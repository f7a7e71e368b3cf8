"""Configuration classes for graphwalk algorithms."""

from dataclasses import dataclass


@dataclass
class TraversalConfig:
    """Tunables shared by the traversal and path-enumeration algorithms."""

    # Interpreter frames reserved for callers when checking recursive DFS depth
    recursion_headroom: int = 50

    # Number of discovered simple paths that triggers the explosion warning
    simple_path_warning: int = 100_000

    def recursion_limit_for(self, vertex_count: int) -> int:
        """Frames to reserve for a recursive DFS ``vertex_count`` levels deep."""
        return vertex_count + self.recursion_headroom

    def fits_recursion_limit(self, vertex_count: int, limit: int) -> bool:
        """Return True if a recursion of ``vertex_count`` frames stays under ``limit``."""
        return self.recursion_limit_for(vertex_count) <= limit


# Global configuration instance
TRAVERSAL_CONFIG = TraversalConfig()
