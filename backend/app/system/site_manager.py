import os
import re

# fastcgi_pass unix:/run/php/php8.1-fpm.sock;
PHP_SOCKET_PATTERN = re.compile(r"php([0-9]\.[0-9])-fpm\.sock")

PHP_VERSION_FILE = "php_version.txt"


def detect_php_version(site_path: str, domain: str, nginx_dir: str = "/etc/nginx") -> str:
    """
    Versi PHP sebuah website:
    1. Isi file php_version.txt di folder website (kalau ada)
    2. Socket php-fpm di config Nginx sites-available/<domain>.conf
    3. "Unknown"
    """
    version_file = os.path.join(site_path, PHP_VERSION_FILE)
    if os.path.isfile(version_file):
        with open(version_file, "r", encoding="utf-8", errors="ignore") as f:
            return f.read().strip()

    nginx_config = os.path.join(nginx_dir, "sites-available", f"{domain}.conf")
    if os.path.isfile(nginx_config):
        with open(nginx_config, "r", encoding="utf-8", errors="ignore") as f:
            match = PHP_SOCKET_PATTERN.search(f.read())
        if match:
            return match.group(1)

    return "Unknown"


def get_websites(sites_root: str = "/sites", nginx_dir: str = "/etc/nginx"):
    """Satu folder di sites_root = satu website."""
    websites = []
    if not os.path.isdir(sites_root):
        return websites

    for domain in sorted(os.listdir(sites_root)):
        site_path = os.path.join(sites_root, domain)
        if not os.path.isdir(site_path):
            continue

        websites.append({
            "domain": domain,
            "php_version": detect_php_version(site_path, domain, nginx_dir),
            "public_html": os.path.join(site_path, "public_html"),
            "logs_dir": os.path.join(site_path, "logs"),
        })

    return websites
