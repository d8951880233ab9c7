import re

from app.system.command_runner import CommandRunner

UNKNOWN = "Unknown"

LOAD_PATTERN = re.compile(r"load average: (.*)")


def _column(parts, index):
    return parts[index] if len(parts) > index else UNKNOWN


def _read(runner: CommandRunner, command: str) -> str:
    result = runner.run(command, privileged=False)
    return result.output if result.success else ""


def parse_cpu_model(cpuinfo: str) -> str:
    for line in cpuinfo.splitlines():
        if "model name" in line and ":" in line:
            return line.split(":", 1)[1].strip() or UNKNOWN
    return UNKNOWN


def parse_memory(free_output: str) -> dict:
    # Baris "Mem:  total  used  free ..." dari `free -m`
    parts = []
    for line in free_output.splitlines():
        if line.startswith("Mem:"):
            parts = line.split()
            break
    return {
        "memory_total": _column(parts, 1),
        "memory_used": _column(parts, 2),
        "memory_free": _column(parts, 3),
    }


def parse_disk(df_output: str) -> dict:
    # Baris terakhir dari `df -h /`: Filesystem Size Used Avail Use% Mounted
    lines = [line for line in df_output.splitlines() if line.strip()]
    parts = lines[-1].split() if len(lines) > 1 else []
    return {
        "disk_total": _column(parts, 1),
        "disk_used": _column(parts, 2),
        "disk_free": _column(parts, 3),
    }


def parse_load(uptime_output: str) -> str:
    match = LOAD_PATTERN.search(uptime_output)
    return match.group(1).strip() if match else UNKNOWN


def get_system_info(runner: CommandRunner) -> dict:
    """Info server versi command Linux: cpuinfo, free, df, uptime."""
    info = {"cpu": parse_cpu_model(_read(runner, "cat /proc/cpuinfo"))}
    info.update(parse_memory(_read(runner, "free -m")))
    info.update(parse_disk(_read(runner, "df -h /")))
    info["uptime"] = _read(runner, "uptime -p").strip() or UNKNOWN
    info["load"] = parse_load(_read(runner, "uptime"))
    return info
