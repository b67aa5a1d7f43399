'''
clase Diagnostic, helpers y jerarquía de errores del ensamblador
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Todo diagnóstico es un error fatal, con ubicación opcional (archivo y línea)
    y un mensaje de ayuda (pista) para orientar la corrección.
    """
    message: str
    line: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
        if loc:
            loc += ": "
        core = f"ERROR: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic(message, line, hint, file)

# ---- Errores fatales ----
# Cualquier error aborta el ensamblado completo; el diagnóstico viaja con la excepción.

class AssemblerError(Exception):
    """Base de todos los errores del ensamblador."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic

class ParseError(AssemblerError):
    """Línea con sintaxis inválida (A-instrucción, etiqueta o C-instrucción)."""

class DuplicateLabelError(AssemblerError):
    """Etiqueta declarada más de una vez."""

    def __init__(self, diagnostic: Diagnostic, symbol: str):
        super().__init__(diagnostic)
        self.symbol = symbol

class ReservedSymbolError(AssemblerError):
    """Etiqueta que coincide con un símbolo predefinido (R0, SP, SCREEN, ...)."""

    def __init__(self, diagnostic: Diagnostic, symbol: str):
        super().__init__(diagnostic)
        self.symbol = symbol

class UnknownMnemonicError(AssemblerError):
    """Valor de comp/dest/jump que no está en su tabla."""

    def __init__(self, diagnostic: Diagnostic, field: str, value: str):
        super().__init__(diagnostic)
        self.field = field
        self.value = value

class WriteError(AssemblerError):
    """Fallo al escribir en el destino de salida."""

class AddressOverflowError(AssemblerError):
    """No quedan direcciones de 15 bits para una variable nueva."""

    def __init__(self, diagnostic: Diagnostic, symbol: str):
        super().__init__(diagnostic)
        self.symbol = symbol
