from app.core import config
from app.system.command_runner import CommandRunner
from app.system.dispatcher import ActionDispatcher


def get_runner() -> CommandRunner:
    return CommandRunner(use_sudo=config.USE_SUDO)


def get_dispatcher() -> ActionDispatcher:
    return ActionDispatcher(
        runner=get_runner(),
        sites_root=config.SITES_ROOT,
        nginx_dir=config.NGINX_DIR,
        apache_dir=config.APACHE_DIR,
        site_config_script=config.SITE_CONFIG_SCRIPT,
        php_switcher_script=config.PHP_SWITCHER_SCRIPT,
        log_lines=config.LOG_LINES,
    )
