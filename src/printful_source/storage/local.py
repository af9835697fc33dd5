"""Local filesystem helpers for downloaded assets."""

from pathlib import Path
from typing import Optional, Tuple, Union

from loguru import logger


def ensure_directory(name: Union[str, Path], base: Optional[Path] = None) -> Path:
    """Create ``base / name`` (cwd by default) if missing and return it. Idempotent."""
    directory = (base or Path.cwd()) / name
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created image directory {directory}")
    return directory


def summarize_directory(directory: Path) -> Tuple[int, int]:
    """
    Count the downloaded files directly inside ``directory``.

    Returns:
        (file count, total bytes); (0, 0) when the directory does not exist
    """
    files = [p for p in Path(directory).glob("*") if p.is_file()]
    return len(files), sum(p.stat().st_size for p in files)
