"""Windows Explorer context menu integration, driven from WSL.

Entries are added with ``reg.exe`` when WSL interop is available; otherwise
a ``.reg`` file is generated for the user to import from Windows.
"""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from ..core.utils import get_logger

LOGGER = get_logger("pdfile.shell")

MENU_NAME = "PDFile"
EXTENSIONS = (".pdf",)
SHELL_ROOT = "Software\\Classes\\SystemFileAssociations"
INTEROP_FLAG = Path("/proc/sys/fs/binfmt_misc/WSLInterop")
REG_HEADER = "Windows Registry Editor Version 5.00"


@dataclass(frozen=True)
class MenuEntry:
    verb: str
    label: str


# Commands that can run on a single file with defaults only.
MENU_ENTRIES = (
    MenuEntry("to-word", "Convert to Word"),
    MenuEntry("insert-date", "Insert Date"),
)

LEGACY_ENTRY_NAMES = (
    "PicLet",
    "piclet",
    "Remove Background",
    "Remove BG",
    "remove-bg",
    "Make Icon",
    "makeicon",
)

_QUIET_ERRORS = ("exec format error", "not found", "unable to find")


@dataclass(frozen=True)
class RegistrationResult:
    extension: str
    tool_name: str
    success: bool


def is_wsl() -> bool:
    return sys.platform.startswith("linux") and (
        "WSL_DISTRO_NAME" in os.environ or "WSLENV" in os.environ
    )


def is_wsl_interop_enabled() -> bool:
    return INTEROP_FLAG.exists()


def menu_key(extension: str, hive: str = "HKCU") -> str:
    return f"{hive}\\{SHELL_ROOT}\\{extension}\\shell\\{MENU_NAME}"


def menu_command(verb: str) -> str:
    return f'wsl.exe pdfile {verb} "%1" --yes'


def _run_reg(args: Sequence[str], action: str) -> bool:
    command = ["reg.exe", *args]
    LOGGER.debug("Executing command: %s", " ".join(command))
    try:
        subprocess.run(command, stdout=subprocess.PIPE, stderr=subprocess.PIPE, check=True, text=True)
    except subprocess.CalledProcessError as exc:
        message = (exc.stderr or exc.stdout or "").strip()
        if not any(token in message.lower() for token in _QUIET_ERRORS):
            LOGGER.error("Failed to %s registry key: %s", action, message)
        return False
    except OSError as exc:
        LOGGER.debug("reg.exe unavailable: %s", exc)
        return False
    return True


def add_registry_key(key: str, value_name: str, value: str, value_type: str = "REG_SZ") -> bool:
    name_args = ["/v", value_name] if value_name else ["/ve"]
    return _run_reg(["add", key, *name_args, "/t", value_type, "/d", value, "/f"], "add")


def delete_registry_key(key: str) -> bool:
    return _run_reg(["delete", key, "/f"], "delete")


def register_all_tools() -> list[RegistrationResult]:
    results: list[RegistrationResult] = []
    for extension in EXTENSIONS:
        base = menu_key(extension)
        add_registry_key(base, "MUIVerb", MENU_NAME)
        add_registry_key(base, "SubCommands", "")
        for entry in MENU_ENTRIES:
            entry_key = f"{base}\\shell\\{entry.verb}"
            label_ok = add_registry_key(entry_key, "MUIVerb", entry.label)
            add_registry_key(entry_key, "MultiSelectModel", "Player")
            command_ok = add_registry_key(f"{entry_key}\\command", "", menu_command(entry.verb))
            results.append(RegistrationResult(extension, entry.label, label_ok and command_ok))
    return results


def unregister_all_tools() -> list[RegistrationResult]:
    results: list[RegistrationResult] = []
    for extension in EXTENSIONS:
        base = menu_key(extension)
        for entry in MENU_ENTRIES:
            entry_key = f"{base}\\shell\\{entry.verb}"
            delete_registry_key(f"{entry_key}\\command")
            results.append(RegistrationResult(extension, entry.label, delete_registry_key(entry_key)))
        delete_registry_key(f"{base}\\shell")
        delete_registry_key(base)
    return results


def cleanup_legacy_entries() -> list[str]:
    removed: list[str] = []
    for extension in EXTENSIONS:
        shell_base = f"HKCU\\{SHELL_ROOT}\\{extension}\\shell"
        for name in LEGACY_ENTRY_NAMES:
            key = f"{shell_base}\\{name}"
            delete_registry_key(f"{key}\\command")
            if delete_registry_key(key):
                removed.append(f"{extension} -> {name}")
    return removed


def escape_reg_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def generate_reg_content() -> str:
    lines = [REG_HEADER, ""]
    for extension in EXTENSIONS:
        base = menu_key(extension, hive="HKEY_CURRENT_USER")
        lines += [f"[{base}]", f'"MUIVerb"="{MENU_NAME}"', '"SubCommands"=""', ""]
        for entry in MENU_ENTRIES:
            entry_key = f"{base}\\shell\\{entry.verb}"
            lines += [
                f"[{entry_key}]",
                f'"MUIVerb"="{escape_reg_value(entry.label)}"',
                '"MultiSelectModel"="Player"',
                "",
                f"[{entry_key}\\command]",
                f'@="{escape_reg_value(menu_command(entry.verb))}"',
                "",
            ]
    return "\r\n".join(lines)


def generate_uninstall_reg_content() -> str:
    lines = [REG_HEADER, ""]
    for extension in EXTENSIONS:
        lines += [f"[-{menu_key(extension, hive='HKEY_CURRENT_USER')}]", ""]
        shell_base = f"HKEY_CURRENT_USER\\{SHELL_ROOT}\\{extension}\\shell"
        lines += [f"[-{shell_base}\\{name}]" for name in LEGACY_ENTRY_NAMES]
        lines.append("")
    return "\r\n".join(lines)


def write_reg_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content.encode("utf-8"))
    return path


__all__ = [
    "MenuEntry",
    "RegistrationResult",
    "MENU_ENTRIES",
    "is_wsl",
    "is_wsl_interop_enabled",
    "menu_key",
    "menu_command",
    "add_registry_key",
    "delete_registry_key",
    "register_all_tools",
    "unregister_all_tools",
    "cleanup_legacy_entries",
    "escape_reg_value",
    "generate_reg_content",
    "generate_uninstall_reg_content",
    "write_reg_file",
]
