'''
símbolos predefinidos de la CPU Hack
'''

from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Mapping

_PREDEFINED: Dict[str, int] = {
    "SP": 0, "LCL": 1, "ARG": 2, "THIS": 3, "THAT": 4,
    **{f"R{i}": i for i in range(16)},
    "SCREEN": 16384, "KBD": 24576,
}

PREDEFINED_SYMBOLS: Mapping[str, int] = MappingProxyType(_PREDEFINED)

# Máximo valor de una constante de A-instrucción (15 bits sin signo)
A_MAX = (1 << 15) - 1

# Primera dirección de RAM para variables
VARIABLE_BASE = 16

def is_predefined(name: str) -> bool:
    """Indica si el nombre es un símbolo reservado de la CPU."""
    return name in PREDEFINED_SYMBOLS
