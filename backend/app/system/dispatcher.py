import logging
import os
from dataclasses import dataclass
from datetime import datetime
from shlex import quote

from app.core.exceptions import (
    ActionError,
    ExternalCommandFailure,
    InvalidParameter,
    MissingParameter,
    ResourceNotFound,
    ResourceUnreadable,
    UnknownAction,
)
from app.system.command_runner import CommandRunner
from app.system.log_manager import log_exists, tail_file

logger = logging.getLogger(__name__)

# --- TEMPLATE COMMAND ---
# Semua {placeholder} diisi dengan nilai yang sudah di-quote.
SITE_CONFIG_COMMAND = "/usr/bin/bash {script} {domain} {php_version}"
PHP_SWITCH_COMMAND = "/usr/bin/bash {script} {domain} {php_version}"
REMOVE_NGINX_CONFIG_COMMAND = "rm -f {enabled} {available}"
APACHE_DISABLE_COMMAND = "a2dissite {conf}"
REMOVE_APACHE_CONFIG_COMMAND = "rm -f {available}"
REMOVE_SITE_FILES_COMMAND = "rm -rf {site_dir}"
RELOAD_COMMAND = "systemctl reload {service}"
RESTART_COMMAND = "systemctl restart {service}"
MKDIR_COMMAND = "mkdir -p {path}"
BACKUP_COMMAND = "tar -czf {archive} -C {site_dir} public_html"

BACKUP_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"

LOG_FILES = {
    "nginx_access": "access.log",
    "nginx_error": "error.log",
    "apache_access": "apache-access.log",
    "apache_error": "apache-error.log",
}

# action -> (parameter wajib, pesan kalau ada yang kosong)
REQUIRED_PARAMS = {
    "add_website": (("domain", "php_version"), "Domain and PHP version are required"),
    "switch_php": (("domain", "php_version"), "Domain and PHP version are required"),
    "remove_website": (("domain",), "Domain is required"),
    "restart_service": (("service",), "Service name is required"),
    "backup_website": (("domain",), "Domain is required"),
    "view_logs": (("domain", "log_type"), "Domain and log type are required"),
}


@dataclass
class ActionResult:
    success: bool
    output: str


def render(template: str, **params) -> str:
    """Isi template command. Setiap nilai di-quote supaya tetap satu argumen shell."""
    return template.format(**{key: quote(str(value)) for key, value in params.items()})


class ActionDispatcher:
    """
    Memetakan action dari operator ke command eksternal.

    Tidak ada rollback: kalau satu langkah gagal, langkah berikutnya tetap jalan
    (lihat remove_website). Semua error dilaporkan sebagai ActionResult, bukan exception.
    """

    def __init__(
            self,
            runner: CommandRunner,
            sites_root: str = "/sites",
            nginx_dir: str = "/etc/nginx",
            apache_dir: str = "/etc/apache2",
            site_config_script: str = "/path/to/site_config.sh",
            php_switcher_script: str = "/path/to/php_switcher.sh",
            log_lines: int = 100,
            clock=datetime.now,
    ):
        self.runner = runner
        self.sites_root = sites_root
        self.nginx_dir = nginx_dir
        self.apache_dir = apache_dir
        self.site_config_script = site_config_script
        self.php_switcher_script = php_switcher_script
        self.log_lines = log_lines
        self.clock = clock

        self._handlers = {
            "add_website": self.add_website,
            "switch_php": self.switch_php,
            "remove_website": self.remove_website,
            "restart_service": self.restart_service,
            "backup_website": self.backup_website,
            "view_logs": self.view_logs,
        }

    def dispatch(self, action: str, params: dict = None) -> ActionResult:
        params = params or {}
        handler = self._handlers.get(action)

        try:
            if handler is None:
                raise UnknownAction(f"Unknown action: {action}")

            required, message = REQUIRED_PARAMS[action]
            values = self._require(params, required, message)
            return handler(**values, params=params)

        except ActionError as e:
            logger.warning("Action '%s' failed: %s", action, e)
            return ActionResult(success=False, output=str(e))

    # --- HELPERS ---

    @staticmethod
    def _require(params: dict, names, message: str) -> dict:
        values = {}
        for name in names:
            value = params.get(name)
            if value is None or not str(value).strip():
                raise MissingParameter(message)
            values[name] = str(value).strip()
        return values

    def site_dir(self, domain: str) -> str:
        # Domain harus langsung jadi anak dari sites_root, gak boleh keluar folder
        if domain in (".", "..") or any(ch in domain for ch in ("/", "\\", "\x00")):
            raise InvalidParameter(f"Invalid domain: {domain}")
        return os.path.join(self.sites_root, domain)

    def _run(self, command: str, privileged: bool = True):
        result = self.runner.run(command, privileged=privileged)
        if not result.success:
            raise ExternalCommandFailure(command, result.exit_code, result.output)
        return result

    # --- ACTIONS ---

    def add_website(self, domain: str, php_version: str, params: dict) -> ActionResult:
        self.site_dir(domain)
        command = render(SITE_CONFIG_COMMAND, script=self.site_config_script,
                         domain=domain, php_version=php_version)
        result = self._run(command)
        return ActionResult(success=True, output=result.output)

    def switch_php(self, domain: str, php_version: str, params: dict) -> ActionResult:
        self.site_dir(domain)
        command = render(PHP_SWITCH_COMMAND, script=self.php_switcher_script,
                         domain=domain, php_version=php_version)
        result = self._run(command)
        return ActionResult(success=True, output=result.output)

    def remove_website(self, domain: str, params: dict) -> ActionResult:
        site_dir = self.site_dir(domain)
        conf = f"{domain}.conf"

        steps = [
            # Nginx config
            render(REMOVE_NGINX_CONFIG_COMMAND,
                   enabled=os.path.join(self.nginx_dir, "sites-enabled", conf),
                   available=os.path.join(self.nginx_dir, "sites-available", conf)),
            # Apache config
            render(APACHE_DISABLE_COMMAND, conf=conf),
            render(REMOVE_APACHE_CONFIG_COMMAND,
                   available=os.path.join(self.apache_dir, "sites-available", conf)),
        ]
        for command in steps:
            self._run_step(command)

        if params.get("remove_files") == "yes":
            result = self.runner.run(render(REMOVE_SITE_FILES_COMMAND, site_dir=site_dir), privileged=True)
            action_result = ActionResult(success=result.success, output=result.output)
        else:
            action_result = ActionResult(
                success=True,
                output=f"Website {domain} configurations removed. Website files were NOT deleted.",
            )

        # Reload kedua web server apapun hasil langkah sebelumnya
        self._run_step(render(RELOAD_COMMAND, service="nginx"))
        self._run_step(render(RELOAD_COMMAND, service="apache2"))

        return action_result

    def _run_step(self, command: str):
        result = self.runner.run(command, privileged=True)
        if not result.success:
            logger.warning("Step failed (continuing): %s -> %s", command, result.output)
        return result

    def restart_service(self, service: str, params: dict) -> ActionResult:
        result = self._run(render(RESTART_COMMAND, service=service))
        return ActionResult(success=True, output=result.output)

    def backup_website(self, domain: str, params: dict) -> ActionResult:
        site_dir = self.site_dir(domain)
        backup_dir = os.path.join(site_dir, "backup")
        timestamp = self.clock().strftime(BACKUP_TIMESTAMP_FORMAT)
        backup_file = os.path.join(backup_dir, f"{domain}-{timestamp}.tar.gz")

        # Buat folder backup kalau belum ada
        self._run_step(render(MKDIR_COMMAND, path=backup_dir))

        self._run(render(BACKUP_COMMAND, archive=backup_file, site_dir=site_dir))
        logger.info("Backup created: %s", backup_file)
        return ActionResult(success=True, output=f"Backup created: {backup_file}")

    def view_logs(self, domain: str, log_type: str, params: dict) -> ActionResult:
        site_dir = self.site_dir(domain)
        filename = LOG_FILES.get(log_type)
        if filename is None:
            raise InvalidParameter(f"Unknown log type: {log_type}")

        log_file = os.path.join(site_dir, "logs", filename)
        if not log_exists(log_file):
            raise ResourceNotFound(f"Log file {log_file} does not exist")

        # File bisa milik root (640) atau hilang karena logrotate setelah dicek
        try:
            content = tail_file(log_file, self.log_lines)
        except OSError as e:
            raise ResourceUnreadable(f"Cannot read log file {log_file}: {e.strerror or e}")

        return ActionResult(success=True, output=content)
