import os
from dotenv import load_dotenv

load_dotenv()


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _get_list(name: str, default: str) -> list:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


# --- DATABASE & AUTH ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./serverpanel.db")
SECRET_KEY = os.getenv("SECRET_KEY", "UNSAFE_DEFAULT_KEY_CHANGE_THIS")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 30))

FIRST_SUPERUSER = os.getenv("FIRST_SUPERUSER", "admin")
FIRST_SUPERUSER_PASSWORD = os.getenv("FIRST_SUPERUSER_PASSWORD", "changeme")
FIRST_SUPERUSER_EMAIL = os.getenv("FIRST_SUPERUSER_EMAIL", "admin@example.com")

# --- SERVER LAYOUT ---
# Satu folder per website: /sites/<domain>/{public_html,logs,backup}
SITES_ROOT = os.getenv("SITES_ROOT", "/sites")
NGINX_DIR = os.getenv("NGINX_DIR", "/etc/nginx")
APACHE_DIR = os.getenv("APACHE_DIR", "/etc/apache2")

SITE_CONFIG_SCRIPT = os.getenv("SITE_CONFIG_SCRIPT", "/path/to/site_config.sh")
PHP_SWITCHER_SCRIPT = os.getenv("PHP_SWITCHER_SCRIPT", "/path/to/php_switcher.sh")

PHP_VERSIONS = _get_list("PHP_VERSIONS", "7.4,8.0,8.1,8.2")
PHP_FPM_DIR = os.getenv("PHP_FPM_DIR", "/usr/sbin")

# Command yang mengubah state server dijalankan lewat sudo
USE_SUDO = _get_bool("USE_SUDO", True)
LOG_LINES = int(os.getenv("LOG_LINES", 100))

# --- HTTP ---
CORS_ORIGINS = _get_list("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
RATE_LIMIT_ENABLED = _get_bool("RATE_LIMIT_ENABLED", True)
LOGIN_RATE_LIMIT = os.getenv("LOGIN_RATE_LIMIT", "5/minute")

# --- LOGGING ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")


def build_services(php_versions=None):
    """Daftar service yang dipantau di dashboard: (label, nama unit systemd)."""
    versions = PHP_VERSIONS if php_versions is None else php_versions
    services = [
        ("Nginx", "nginx"),
        ("Apache", "apache2"),
        ("MySQL", "mysql"),
    ]
    for version in versions:
        services.append((f"PHP-FPM {version}", f"php{version}-fpm"))
    services.append(("Fail2Ban", "fail2ban"))
    return services
