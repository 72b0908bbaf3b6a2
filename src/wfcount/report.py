
from __future__ import annotations
import json
import sys
from typing import Dict, List, Optional, TextIO

def format_entry(word: str, count: int) -> str:
    return f"{word} => {count:d}"

def _items(freq: Dict[str, int], sort: bool):
    # mapping order carries no meaning; sorting is only for stable output
    return sorted(freq.items()) if sort else freq.items()

def format_lines(freq: Dict[str, int], sort: bool = False) -> List[str]:
    return [format_entry(w, c) for w, c in _items(freq, sort)]

def print_frequencies(freq: Dict[str, int], sort: bool = False, stream: Optional[TextIO] = None) -> int:
    """Write one `word => count` line per entry. Returns the number of lines."""
    out = stream if stream is not None else sys.stdout
    lines = format_lines(freq, sort=sort)
    for line in lines:
        print(line, file=out)
    return len(lines)

def to_json(freq: Dict[str, int], sort: bool = False) -> str:
    return json.dumps(
        {
            "total": sum(freq.values()),
            "unique": len(freq),
            "frequencies": dict(_items(freq, sort)),
        },
        indent=2,
    )
