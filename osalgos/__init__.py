"""Operating-system algorithms: CPU scheduling, page replacement, the banker's algorithm, minimum spanning trees and concurrency demos, with an ``osalgos`` command."""

__version__ = "0.1.0"
__all__ = ["bankers", "cli", "concurrency", "graphs", "paging", "scheduling"]