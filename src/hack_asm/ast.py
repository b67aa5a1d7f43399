'''
dataclases del programa (AInstruction, CInstruction, Label)
'''

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Union

# ---- Nodos a nivel de fuente ----
# 'line' no participa en la igualdad: dos nodos son iguales si codifican lo mismo.

@dataclass(frozen=True)
class AInstruction:
    """A-instrucción '@valor': constante de 15 bits o símbolo.

    'value' es el valor numérico; para símbolos queda en None hasta la pasada 2.
    """
    literal: str
    is_symbol: bool = False
    value: Optional[int] = None
    line: Optional[int] = field(default=None, compare=False)

@dataclass(frozen=True)
class CInstruction:
    """C-instrucción 'dest=comp;jump' (dest y jump opcionales)."""
    dest: str = ""
    comp: str = ""
    jump: str = ""
    line: Optional[int] = field(default=None, compare=False)

@dataclass(frozen=True)
class Label:
    """Pseudo-instrucción '(NOMBRE)'; no se codifica."""
    literal: str
    line: Optional[int] = field(default=None, compare=False)

Node = Union[AInstruction, CInstruction, Label]
