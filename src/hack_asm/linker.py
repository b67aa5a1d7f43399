# src/hack_asm/linker.py
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Union

from .ast import AInstruction, CInstruction, Label, Node
from .symbols import PREDEFINED_SYMBOLS, VARIABLE_BASE, A_MAX, is_predefined
from .diagnostics import error, DuplicateLabelError, ReservedSymbolError, AddressOverflowError

logger = logging.getLogger(__name__)

# ---------- Resultados de las pasadas ----------

@dataclass(frozen=True)
class LinkResult:
    symtab: Dict[str, int]
    program_size: int          # número de instrucciones codificables
    labels: Dict[str, int]     # sólo las etiquetas del usuario

@dataclass(frozen=True)
class ResolveResult:
    nodes: List[Union[AInstruction, CInstruction]]
    symtab: Dict[str, int]
    variables: Dict[str, int]  # en orden de primer uso

# ---------- Pasada 1 (etiquetas) ----------

def first_pass(nodes: List[Node], *, filename: Optional[str] = None) -> LinkResult:
    """Asigna a cada etiqueta el número de instrucciones que la preceden.

    Las etiquetas no consumen dirección. Al terminar se añaden los símbolos
    predefinidos; nunca se sobrescriben porque una etiqueta con nombre
    reservado se rechaza.
    """
    symtab: Dict[str, int] = {}
    pc = 0
    for n in nodes:
        if isinstance(n, Label):
            name = n.literal
            if name in symtab:
                raise DuplicateLabelError(
                    error(f"Etiqueta redefinida: {name}", line=n.line, file=filename,
                          hint=f"declarada antes con dirección {symtab[name]}"),
                    name)
            if is_predefined(name):
                raise ReservedSymbolError(
                    error(f"'{name}' es un símbolo predefinido y no puede usarse como etiqueta",
                          line=n.line, file=filename),
                    name)
            if pc > A_MAX:
                raise AddressOverflowError(
                    error(f"La etiqueta {name} apunta a {pc}, fuera de 15 bits (0..{A_MAX})",
                          line=n.line, file=filename),
                    name)
            symtab[name] = pc
        else:
            pc += 1

    labels = dict(symtab)
    symtab.update(PREDEFINED_SYMBOLS)
    logger.debug("pasada 1: %d instrucciones, %d etiquetas", pc, len(labels))
    return LinkResult(symtab=symtab, program_size=pc, labels=labels)

# ---------- Pasada 2 (variables) ----------

def second_pass(
    nodes: List[Node],
    symtab: Dict[str, int],
    *,
    variable_base: int = VARIABLE_BASE,
    filename: Optional[str] = None,
) -> ResolveResult:
    """Resuelve los símbolos de las A-instrucciones.

    Un símbolo ausente de la tabla es una variable nueva: recibe la siguiente
    dirección libre desde 'variable_base', en orden de primer uso. Devuelve
    las instrucciones codificables (sin etiquetas) con 'value' ya resuelto;
    la lista de entrada no se modifica y 'symtab' se amplía en su lugar.
    """
    out: List[Union[AInstruction, CInstruction]] = []
    variables: Dict[str, int] = {}
    next_var = variable_base
    for n in nodes:
        if isinstance(n, Label):
            continue
        if isinstance(n, AInstruction) and n.is_symbol:
            addr = symtab.get(n.literal)
            if addr is None:
                if next_var > A_MAX:
                    raise AddressOverflowError(
                        error(f"Sin direcciones libres para la variable {n.literal}",
                              line=n.line, file=filename,
                              hint=f"las variables ocupan {variable_base}..{A_MAX}"),
                        n.literal)
                addr = next_var
                symtab[n.literal] = addr
                variables[n.literal] = addr
                next_var += 1
            out.append(replace(n, value=addr))
            continue
        out.append(n)

    logger.debug("pasada 2: %d variables", len(variables))
    return ResolveResult(nodes=out, symtab=symtab, variables=variables)
