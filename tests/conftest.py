import sys
from pathlib import Path

# Make the top-level packages under src/ (decoders, recovery, settings)
# importable without installing the project.
repo_root = Path(__file__).resolve().parents[1]
src_dir = repo_root / "src"
if src_dir.exists() and str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))
