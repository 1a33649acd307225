"""
Operator-facing console: prompts and the interactive menu.
"""
from regconsole.cli.menu import MenuChoice, RegistrantMenu
from regconsole.cli.prompts import Prompter

__all__ = ["MenuChoice", "Prompter", "RegistrantMenu"]
