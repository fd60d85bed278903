import sys
from pathlib import Path


def pytest_configure() -> None:
    """Put `src/` on the path so `typedispatch` imports without installing."""
    src_dir = Path(__file__).resolve().parents[1] / "src"
    sys.path.insert(0, str(src_dir))
