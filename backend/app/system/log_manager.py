import os
from collections import deque


def tail_file(filepath: str, lines: int = 100) -> str:
    """
    Meniru 'tail -n <lines>': ambil baris terakhir dari file log.
    Dibaca langsung dari Python, tidak lewat shell.
    """
    with open(filepath, "r", encoding="utf-8", errors="ignore") as f:
        last_lines = deque(f, maxlen=lines)

    return "".join(last_lines)


def log_exists(filepath: str) -> bool:
    return os.path.isfile(filepath)
