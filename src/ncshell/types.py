import time
from dataclasses import dataclass, field


@dataclass
class Geometry:
    total_rows: int
    total_cols: int
    output_rows: int
    output_cols: int


@dataclass
class CommandLine:
    text: str  # trimmed submitted line
    name: str
    args: list[str] = field(default_factory=list)


def ts_str(t: float) -> str:
    lt = time.localtime(t)
    return time.strftime("%H:%M:%S", lt)
