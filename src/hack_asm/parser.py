# src/hack_asm/parser.py
from __future__ import annotations
from typing import List, Optional

from .lexer import split_lines, strip_comment, is_symbol, is_decimal, split_c_fields
from .ast import AInstruction, CInstruction, Label, Node
from .symbols import A_MAX
from .diagnostics import error, ParseError

SYMBOL_HINT = ("un símbolo es una secuencia de letras, dígitos, '_', '.', '$' y ':' "
               "que no empieza por dígito")

def _fail(message: str, text: str, *, line: Optional[int], filename: Optional[str],
          hint: Optional[str] = None) -> ParseError:
    return ParseError(error(f"{message}: '{text}'", line=line, file=filename, hint=hint))

def parse_a_instruction(text: str, *, line: Optional[int] = None,
                        filename: Optional[str] = None) -> AInstruction:
    """Parsea '@constante' o '@símbolo'. El texto ya viene sin comentarios."""
    if len(text) < 2 or text[0] != "@":
        raise _fail("A-instrucción inválida: '@' debe ir seguido de una constante o símbolo",
                    text, line=line, filename=filename)
    lit = text[1:]

    # un dígito inicial indica constante; los símbolos nunca empiezan por dígito
    if lit[0].isdecimal():
        if not is_decimal(lit):
            raise _fail("A-instrucción inválida: se esperaba una constante decimal sin signo",
                        text, line=line, filename=filename, hint=SYMBOL_HINT)
        value = int(lit)
        if value > A_MAX:
            raise _fail(f"A-instrucción inválida: la constante no cabe en 15 bits (0..{A_MAX})",
                        text, line=line, filename=filename)
        return AInstruction(literal=lit, value=value, line=line)

    if not is_symbol(lit):
        raise _fail("A-instrucción inválida: el literal contiene caracteres ilegales",
                    text, line=line, filename=filename, hint=SYMBOL_HINT)
    return AInstruction(literal=lit, is_symbol=True, line=line)

def parse_label(text: str, *, line: Optional[int] = None,
                filename: Optional[str] = None) -> Label:
    """Parsea '(NOMBRE)'."""
    if len(text) < 3:
        raise _fail("Etiqueta inválida: debe declarar un símbolo entre paréntesis",
                    text, line=line, filename=filename)
    if text[0] != "(":
        raise _fail("Etiqueta inválida: falta '(' inicial", text, line=line, filename=filename)
    if text[-1] != ")":
        raise _fail("Etiqueta inválida: falta ')' final", text, line=line, filename=filename)
    name = text[1:-1]
    if not is_symbol(name):
        raise _fail("Etiqueta inválida: el nombre contiene caracteres ilegales",
                    text, line=line, filename=filename, hint=SYMBOL_HINT)
    return Label(literal=name, line=line)

def parse_c_instruction(text: str, *, line: Optional[int] = None,
                        filename: Optional[str] = None) -> CInstruction:
    """Parsea 'dest=comp;jump'.

    Sólo se valida la forma; los mnemónicos se comprueban al codificar.
    Reglas:
      - comp es obligatorio.
      - Se exige '=' o ';' (dest o jump pueden omitirse, pero no ambos).
      - Si aparece '=' dest no puede ser vacío; si aparece ';' jump tampoco.
    """
    dest, comp, jump, has_eq, has_semi = split_c_fields(text)
    if not comp:
        raise _fail("C-instrucción inválida: falta el campo comp", text, line=line, filename=filename)
    if not has_eq and not has_semi:
        raise _fail("C-instrucción inválida: se esperaba 'dest=comp', 'comp;jump' o 'dest=comp;jump'",
                    text, line=line, filename=filename)
    if has_eq and not dest:
        raise _fail("C-instrucción inválida: campo dest vacío antes de '='",
                    text, line=line, filename=filename)
    if has_semi and not jump:
        raise _fail("C-instrucción inválida: campo jump vacío después de ';'",
                    text, line=line, filename=filename)
    return CInstruction(dest=dest, comp=comp, jump=jump, line=line)

def parse(text: str, *, filename: Optional[str] = None) -> List[Node]:
    """
    Devuelve la lista ordenada de nodos:
      - AInstruction(literal, is_symbol, value)
      - CInstruction(dest, comp, jump)
      - Label(literal)

    Reglas:
      - Comentarios: '//' hasta fin de línea; líneas vacías se ignoran.
      - '@...' -> A-instrucción; '(...)' -> etiqueta; resto -> C-instrucción.
      - El primer error lanza ParseError con archivo, línea y texto.
    """
    nodes: List[Node] = []
    for lineno, raw in enumerate(split_lines(text), start=1):
        core = strip_comment(raw)
        if not core:
            continue
        if core[0] == "@":
            nodes.append(parse_a_instruction(core, line=lineno, filename=filename))
        elif core[0] == "(":
            nodes.append(parse_label(core, line=lineno, filename=filename))
        else:
            nodes.append(parse_c_instruction(core, line=lineno, filename=filename))
    return nodes
