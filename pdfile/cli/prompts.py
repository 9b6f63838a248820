"""Minimal line prompts for options left off the command line."""

from __future__ import annotations


class Cancelled(Exception):
    """Raised when the user leaves a required prompt empty."""


def ask(message: str) -> str:
    try:
        return input(f"{message} ").strip()
    except EOFError:
        return ""


def ask_required(message: str) -> str:
    answer = ask(message)
    if not answer:
        raise Cancelled()
    return answer


__all__ = ["Cancelled", "ask", "ask_required"]
