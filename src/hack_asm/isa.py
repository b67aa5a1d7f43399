'''
tablas fijas de la CPU Hack (comp, dest, jump)
'''

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping

@dataclass(frozen=True)
class CompSpec:
    """Bits de control de la ALU para un mnemónico comp.

    - a: 0 opera con el registro A, 1 con la memoria M
    - c: 6 bits de control (zx nx zy ny f no)
    """
    a: int
    c: int

# Prefijo de toda C-instrucción (bits 15..13)
C_PREFIX = 0b111

_COMP: Dict[str, CompSpec] = {}

def _add(mnemonic: str, a: int, c: int):
    _COMP[mnemonic] = CompSpec(a, c)

# a=0 (constantes, D y A)
_add("0",   0, 0b101010)
_add("1",   0, 0b111111)
_add("-1",  0, 0b111010)
_add("D",   0, 0b001100)
_add("A",   0, 0b110000)
_add("!D",  0, 0b001101)
_add("!A",  0, 0b110001)
_add("-D",  0, 0b001111)
_add("-A",  0, 0b110011)
_add("D+1", 0, 0b011111)
_add("A+1", 0, 0b110111)
_add("D-1", 0, 0b001110)
_add("A-1", 0, 0b110010)
_add("D+A", 0, 0b000010)
_add("D-A", 0, 0b010011)
_add("A-D", 0, 0b000111)
_add("D&A", 0, 0b000000)
_add("D|A", 0, 0b010101)

# a=1 (mismas operaciones con M en lugar de A)
_add("M",   1, 0b110000)
_add("!M",  1, 0b110001)
_add("-M",  1, 0b110011)
_add("M+1", 1, 0b110111)
_add("M-1", 1, 0b110010)
_add("D+M", 1, 0b000010)
_add("D-M", 1, 0b010011)
_add("M-D", 1, 0b000111)
_add("D&M", 1, 0b000000)
_add("D|M", 1, 0b010101)

# Combinaciones exactas de destino (no se componen letra a letra)
_DEST: Dict[str, int] = {
    "M":   0b001,
    "D":   0b010,
    "MD":  0b011,
    "A":   0b100,
    "AM":  0b101,
    "AD":  0b110,
    "AMD": 0b111,
}

_JUMP: Dict[str, int] = {
    "JGT": 0b001,
    "JEQ": 0b010,
    "JGE": 0b011,
    "JLT": 0b100,
    "JNE": 0b101,
    "JLE": 0b110,
    "JMP": 0b111,
}

# Vistas de sólo lectura: las tablas no cambian después de importar el módulo
COMP: Mapping[str, CompSpec] = MappingProxyType(_COMP)
DEST: Mapping[str, int] = MappingProxyType(_DEST)
JUMP: Mapping[str, int] = MappingProxyType(_JUMP)

# Tablas inversas para decodificar
COMP_BY_BITS: Mapping[tuple, str] = MappingProxyType({(s.a, s.c): m for m, s in _COMP.items()})
DEST_BY_BITS: Mapping[int, str] = MappingProxyType({v: k for k, v in _DEST.items()})
JUMP_BY_BITS: Mapping[int, str] = MappingProxyType({v: k for k, v in _JUMP.items()})

def comp_bits(mnemonic: str) -> CompSpec:
    """Devuelve a-bit y c-bits de un mnemónico comp."""
    if mnemonic not in COMP:
        raise KeyError(f"comp desconocido: {mnemonic}")
    return COMP[mnemonic]

def dest_bits(mnemonic: str) -> int:
    """Devuelve los 3 d-bits; dest vacío -> 000."""
    if not mnemonic:
        return 0
    if mnemonic not in DEST:
        raise KeyError(f"dest desconocido: {mnemonic}")
    return DEST[mnemonic]

def jump_bits(mnemonic: str) -> int:
    """Devuelve los 3 j-bits; jump vacío -> 000."""
    if not mnemonic:
        return 0
    if mnemonic not in JUMP:
        raise KeyError(f"jump desconocido: {mnemonic}")
    return JUMP[mnemonic]
