from __future__ import annotations
import re
from typing import List, Tuple

COMMENT_MARK = "//"

SYMBOL_PUNCT = "_.$:"
DEC_RE = re.compile(r"[0-9]+")

def split_lines(text: str) -> List[str]:
    """Split on LF only, dropping a trailing CR; form feeds and other separators stay in the line"""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]

def strip_comment(line: str) -> str:
    """Remove everything from the first '//' and trim whitespace"""
    code, _, _ = line.partition(COMMENT_MARK)
    return code.strip()

def is_symbol_char(ch: str) -> bool:
    return ch.isalpha() or ch.isdecimal() or ch in SYMBOL_PUNCT

def is_symbol(text: str) -> bool:
    """Letters, decimal digits, '_', '.', '$' and ':'; never a leading digit"""
    if not text or text[0].isdecimal():
        return False
    return all(is_symbol_char(ch) for ch in text)

def is_decimal(text: str) -> bool:
    return DEC_RE.fullmatch(text) is not None

def split_c_fields(text: str) -> Tuple[str, str, str, bool, bool]:
    """Split 'dest=comp;jump' on the first '=' and then on the first ';'.

    Returns (dest, comp, jump, has_eq, has_semi) with every field trimmed.
    """
    if "=" in text:
        dest, _, rest = text.partition("=")
        has_eq = True
    else:
        dest, rest, has_eq = "", text, False
    comp, sep, jump = rest.partition(";")
    return dest.strip(), comp.strip(), jump.strip(), has_eq, bool(sep)
