from .results_collector import ResultsCollector, write_result

__all__ = [
    "ResultsCollector",
    "write_result",
]
