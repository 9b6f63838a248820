"""CLI helpers for installing and removing the Explorer context menu."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction
from pathlib import Path

from ...config import PdfileConfig, get_config_path
from ...core.paths import wsl_to_windows
from ...shell import registry as shell

INSTALL_REG_NAME = "pdfile-install.reg"
UNINSTALL_REG_NAME = "pdfile-uninstall.reg"


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    install = subparsers.add_parser("install", help="Add the Windows right-click menu")
    install.set_defaults(handler=handle_install)
    uninstall = subparsers.add_parser("uninstall", help="Remove the Windows right-click menu")
    uninstall.set_defaults(handler=handle_uninstall)


def _reg_file_location(name: str) -> Path:
    return get_config_path().parent / name


def _print_reg_instructions(path: Path) -> None:
    windows_path = wsl_to_windows(str(path))
    print("Generated registry file:")
    print(f"  {windows_path}")
    print("To apply it, either:")
    print("  1. Double-click the .reg file in Windows Explorer")
    print(f'  2. Run in elevated PowerShell: reg import "{windows_path}"')


def _report(results: list[shell.RegistrationResult], verb: str) -> int:
    failed = [result for result in results if not result.success]
    for result in results:
        mark = "ok" if result.success else "failed"
        print(f"  {result.extension} -> {result.tool_name}: {mark}")
    if failed:
        print(f"{len(failed)} context menu entr{'y' if len(failed) == 1 else 'ies'} could not be {verb}.")
        return 1
    return 0


def handle_install(args, settings: PdfileConfig) -> int:
    if not shell.is_wsl():
        print('Not running in WSL. Registry integration skipped.')
        print('Run "pdfile install" from WSL to add the context menu.')
        return 0

    if not shell.is_wsl_interop_enabled():
        print("WSL interop not available. Generating registry file...")
        path = shell.write_reg_file(_reg_file_location(INSTALL_REG_NAME), shell.generate_reg_content())
        _print_reg_instructions(path)
        return 0

    shell.unregister_all_tools()
    code = _report(shell.register_all_tools(), "installed")
    if code == 0:
        print('Right-click any PDF file in Windows Explorer and select "PDFile".')
    return code


def handle_uninstall(args, settings: PdfileConfig) -> int:
    if not shell.is_wsl():
        print("Not running in WSL. Nothing to remove.")
        return 0

    if not shell.is_wsl_interop_enabled():
        print("WSL interop not available. Generating registry file...")
        path = shell.write_reg_file(
            _reg_file_location(UNINSTALL_REG_NAME), shell.generate_uninstall_reg_content()
        )
        _print_reg_instructions(path)
        return 0

    code = _report(shell.unregister_all_tools(), "removed")
    for name in shell.cleanup_legacy_entries():
        print(f"  removed legacy entry {name}")
    return code
