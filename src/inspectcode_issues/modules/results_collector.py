import json
from pathlib import Path

from ..normalization.models import NormalizedResult
from ..utils.logger import logger


def write_result(result: NormalizedResult, filepath: Path) -> Path:
    """Write normalized result as JSON to an explicit path"""

    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)

    logger.debug(f"Saved normalized result to {filepath}")
    return filepath


class ResultsCollector:
    """Collect normalized results below an output directory"""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.normalized_dir = self.output_dir / "normalized"

        # Ensure directories exist
        self.normalized_dir.mkdir(parents=True, exist_ok=True)

    def save_normalized_result(self, result: NormalizedResult, name: str) -> Path:
        """Save normalized result under the given name"""
        return write_result(result, self.normalized_dir / f"{name}.json")

