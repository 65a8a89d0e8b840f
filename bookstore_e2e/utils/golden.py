import json
from pathlib import Path
from typing import List, Union


def load_titles(directory: Union[str, Path], name: str) -> List[str]:
    """Load an ordered list of expected book titles from <directory>/<name>.json."""
    path = Path(directory) / f"{name}.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list) or not all(isinstance(t, str) for t in data):
        raise ValueError(f"{path} must contain a JSON list of strings")
    return data
