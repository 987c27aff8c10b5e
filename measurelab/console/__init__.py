"""
Terminal boundary: prompting, token reading and number formatting.
"""
from measurelab.console.formatting import choice_prompt, format_number
from measurelab.console.terminal import INVALID_NUMBER_MESSAGE, Terminal

__all__ = ["INVALID_NUMBER_MESSAGE", "Terminal", "choice_prompt", "format_number"]
