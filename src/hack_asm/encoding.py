# src/hack_asm/encoding.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Union

from .ast import AInstruction, CInstruction, Label, Node
from .isa import (
    C_PREFIX, COMP_BY_BITS, DEST_BY_BITS, JUMP_BY_BITS,
    comp_bits, dest_bits, jump_bits,
)
from .utils import is_unsigned_nbit, split_bits
from .diagnostics import error, UnknownMnemonicError

# ---------------- Resultados de codificación ----------------

@dataclass(frozen=True)
class Encoded:
    word: int     # u16
    pc: int       # dirección de esta instrucción
    line: Optional[int]

@dataclass(frozen=True)
class EncodeResult:
    words: List[Encoded]

# ---------------- Helpers de empaquetado de bits ----------------

def _pack_C(a: int, c: int, d: int, j: int) -> int:
    return ((C_PREFIX & 0x7) << 13 |
            (a & 0x1)        << 12 |
            (c & 0x3F)       << 6  |
            (d & 0x7)        << 3  |
            (j & 0x7))

def _unknown(field: str, value: str, ins: Union[CInstruction, int],
             line: Optional[int]) -> UnknownMnemonicError:
    where = render(ins) if isinstance(ins, CInstruction) else format(ins, "016b")
    return UnknownMnemonicError(
        error(f"{field} desconocido '{value}' en '{where}'", line=line),
        field, value)

# ---------------- Codificador ----------------

def encode_a(ins: AInstruction) -> int:
    """Palabra de una A-instrucción: el valor en 15 bits con el bit 15 a 0."""
    if ins.value is None:
        raise ValueError(f"A-instrucción sin resolver: @{ins.literal}")
    if not is_unsigned_nbit(ins.value, 15):
        raise ValueError(f"Valor de A-instrucción fuera de rango: {ins.value}")
    return ins.value

def encode_c(ins: CInstruction) -> int:
    """Palabra de una C-instrucción: 111 a cccccc ddd jjj."""
    try:
        comp = comp_bits(ins.comp)
    except KeyError:
        raise _unknown("comp", ins.comp, ins, ins.line) from None
    try:
        d = dest_bits(ins.dest)
    except KeyError:
        raise _unknown("dest", ins.dest, ins, ins.line) from None
    try:
        j = jump_bits(ins.jump)
    except KeyError:
        raise _unknown("jump", ins.jump, ins, ins.line) from None
    return _pack_C(comp.a, comp.c, d, j)

def encode(nodes: List[Node]) -> EncodeResult:
    """Codifica las instrucciones en orden; las etiquetas no generan palabra.

    Las A-instrucciones simbólicas deben venir resueltas (second_pass).
    """
    words: List[Encoded] = []
    pc = 0
    for n in nodes:
        if isinstance(n, Label):
            continue
        if isinstance(n, AInstruction):
            word = encode_a(n)
        elif isinstance(n, CInstruction):
            word = encode_c(n)
        else:
            raise TypeError(f"Nodo desconocido: {n!r}")
        words.append(Encoded(word=word, pc=pc, line=n.line))
        pc += 1
    return EncodeResult(words=words)

# ---------------- Decodificador ----------------

def decode(word: int) -> Union[AInstruction, CInstruction]:
    """Inverso de encode_a/encode_c usando las tablas fijas.

    Bit 15 a 0 -> A-instrucción numérica; si no, C-instrucción con prefijo 111.
    """
    if not is_unsigned_nbit(word, 16):
        raise ValueError(f"Palabra fuera de 16 bits: {word}")
    if word >> 15 == 0:
        return AInstruction(literal=str(word), value=word)

    prefix, a, c, d, j = split_bits(word, ((15, 13), (12, 12), (11, 6), (5, 3), (2, 0)))
    if prefix != C_PREFIX:
        raise _unknown("prefijo", format(prefix, "03b"), word, None)
    comp = COMP_BY_BITS.get((a, c))
    if comp is None:
        raise _unknown("comp", format(a << 6 | c, "07b"), word, None)
    return CInstruction(dest=DEST_BY_BITS.get(d, ""), comp=comp, jump=JUMP_BY_BITS.get(j, ""))

def render(ins: Union[AInstruction, CInstruction]) -> str:
    """Texto ensamblador canónico de una instrucción."""
    if isinstance(ins, AInstruction):
        return f"@{ins.literal}"
    text = ins.comp
    if ins.dest:
        text = f"{ins.dest}={text}"
    if ins.jump:
        text = f"{text};{ins.jump}"
    return text
