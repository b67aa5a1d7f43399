from __future__ import annotations
import os
from typing import Iterable, List, TextIO
from .utils import to_bin16
from .encoding import Encoded
from .diagnostics import error, WriteError

def to_bin_lines(words: Iterable[Encoded]) -> List[str]:
    return [to_bin16(w.word) for w in words]

def write_bin(words: Iterable[Encoded], stream: TextIO) -> None:
    """Write one 16-digit binary line per word; any sink failure raises WriteError."""
    for w in words:
        line = to_bin16(w.word) + "\n"
        try:
            n = stream.write(line)
        except (OSError, ValueError) as ex:
            raise WriteError(error(f"no se pudo escribir la instrucción {w.pc}: {ex}", line=w.line)) from ex
        if n is not None and n != len(line):
            raise WriteError(error(f"escritura incompleta de la instrucción {w.pc}: "
                                   f"{n} de {len(line)} caracteres", line=w.line))

def write_bin_file(words: Iterable[Encoded], path: str) -> None:
    """Write to '<path>.tmp' and move it over 'path' only when every line is written."""
    tmp = path + ".tmp"
    try:
        f = open(tmp, "w", encoding="utf-8")
    except OSError as ex:
        raise WriteError(error(f"no se pudo crear {path}: {ex}", file=path)) from ex
    try:
        with f:
            write_bin(words, f)
        os.replace(tmp, path)
    except OSError as ex:
        os.unlink(tmp)
        raise WriteError(error(f"no se pudo escribir {path}: {ex}", file=path)) from ex
    except WriteError:
        os.unlink(tmp)
        raise
