import os
from shlex import quote

from app.system.command_runner import CommandRunner


def get_service_status(runner: CommandRunner, service: str) -> str:
    # Cuma baca status, gak perlu sudo
    result = runner.run(f"systemctl is-active {quote(service)}", privileged=False)
    return "Running" if result.output.strip() == "active" else "Stopped"


def get_services(runner: CommandRunner, services):
    """services: list of (label, unit systemd)."""
    return [
        {
            "name": name,
            "service": unit,
            "status": get_service_status(runner, unit),
        }
        for name, unit in services
    ]


def get_php_versions(versions, fpm_dir: str = "/usr/sbin"):
    php_versions = []
    for version in versions:
        installed = os.path.exists(os.path.join(fpm_dir, f"php-fpm{version}"))
        php_versions.append({
            "version": version,
            "status": "Installed" if installed else "Not Installed",
        })
    return php_versions
