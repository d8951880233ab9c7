import logging
import shlex
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    exit_code: int
    output: str

    @property
    def success(self) -> bool:
        return self.exit_code == 0


class CommandRunner:
    """
    Satu-satunya pintu ke command eksternal.

    Command diterima sebagai string yang argumennya sudah di-quote (shlex.quote),
    lalu dipecah lagi dengan shlex.split dan dijalankan TANPA shell. Jadi setiap
    parameter tetap satu argumen walaupun isinya "; rm -rf /".
    """

    def __init__(self, use_sudo: bool = True, sudo_binary: str = "sudo"):
        self.use_sudo = use_sudo
        self.sudo_binary = sudo_binary

    def build_argv(self, command: str, privileged: bool = False) -> list:
        argv = shlex.split(command)
        if privileged and self.use_sudo:
            argv = [self.sudo_binary] + argv
        return argv

    def run(self, command: str, privileged: bool = False) -> CommandResult:
        """Jalankan command sampai selesai. stdout & stderr digabung jadi satu output."""
        argv = self.build_argv(command, privileged)

        logger.info("Executing: %s", shlex.join(argv))
        try:
            # Output script/tar kadang bukan UTF-8 valid, byte rusak diganti saja
            proc = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            # Binary gak ketemu / gak bisa dieksekusi, samakan dengan exit code shell
            logger.error("Cannot execute %s: %s", argv[0], e)
            return CommandResult(127, str(e))

        if proc.returncode != 0:
            logger.warning("Command exited with %s: %s", proc.returncode, shlex.join(argv))

        return CommandResult(proc.returncode, proc.stdout.rstrip("\n"))
