# src/convene/utils/utils_paths.py

from pathlib import Path


def shorten_path_for_display(
    path: Path | str,
    *,
    cwd: Path | None = None,
    project_dir: Path | None = None,
) -> str:
    """Shorten an absolute path for log messages.

    Tries cwd and project_dir as anchors and keeps the shortest relative
    form; falls back to the absolute path.
    """
    path_obj = Path(path).resolve()

    candidates: list[str] = []
    for anchor in (cwd, project_dir):
        if anchor is None:
            continue
        try:
            rel = path_obj.relative_to(Path(anchor).resolve())
        except ValueError:
            continue
        candidates.append(str(rel) or ".")

    if candidates:
        return min(candidates, key=len)
    return str(path_obj)
