from __future__ import annotations
import argparse, logging, os
from dataclasses import dataclass
from typing import List, TextIO

from .ast import Node
from .parser import parse
from .linker import first_pass, second_pass, LinkResult, ResolveResult
from .encoding import encode, decode, render, EncodeResult
from .writers import write_bin, write_bin_file
from .utils import to_bin16
from .diagnostics import AssemblerError, WriteError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class AssemblyResult:
    nodes: List[Node]          # salida del parser, con etiquetas
    link: LinkResult           # pasada 1
    resolved: ResolveResult    # pasada 2
    enc: EncodeResult

def assemble_text(text: str, *, filename: str | None = None) -> AssemblyResult:
    """Parsea, hace PASADA 1, PASADA 2 y codifica, estrictamente en ese orden.
    El primer error lanza una subclase de AssemblerError."""
    nodes = parse(text, filename=filename)
    link = first_pass(nodes, filename=filename)
    resolved = second_pass(nodes, link.symtab, filename=filename)
    enc = encode(resolved.nodes)
    logger.debug("%s: %d palabras", filename or "<texto>", len(enc.words))
    return AssemblyResult(nodes=nodes, link=link, resolved=resolved, enc=enc)

def assemble(src: TextIO, dst: TextIO, *, filename: str | None = None) -> AssemblyResult:
    """Lee todo 'src', ensambla y sólo entonces escribe una línea por instrucción en 'dst'."""
    result = assemble_text(src.read(), filename=filename)
    write_bin(result.enc.words, dst)
    return result

def listing_lines(result: AssemblyResult) -> List[str]:
    """Una línea 'pc  palabra  fuente  ; decodificado' por instrucción."""
    out = []
    for w, ins in zip(result.enc.words, result.resolved.nodes):
        out.append(f"{w.pc:5d}  {to_bin16(w.word)}  {render(ins):<16} ; {render(decode(w.word))}")
    return out

def output_path(source: str) -> str:
    """'prog.asm' -> 'prog.hack'; cualquier otra extensión es un error."""
    stem, ext = os.path.splitext(source)
    if ext != ".asm":
        raise ValueError(f"se esperaba un archivo con extensión '.asm', no {source!r}")
    return stem + ".hack"

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="hack-asm", description="Hack two-pass assembler")
    ap.add_argument("source", help="archivo .asm de entrada")
    ap.add_argument("-o", "--output", help="archivo de salida (por defecto: <source>.hack)")
    ap.add_argument("--symbols", action="store_true",
                    help="mostrar etiquetas y variables resueltas")
    ap.add_argument("--listing", action="store_true",
                    help="mostrar cada instrucción con su palabra y su decodificación")
    ap.add_argument("-v", "--verbose", action="store_true", help="logging detallado")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s: %(message)s")

    try:
        out_path = args.output or output_path(args.source)
        with open(args.source, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, ValueError) as ex:
        logger.error("no pude leer %s: %s", args.source, ex)
        return 2

    try:
        result = assemble_text(text, filename=args.source)
    except AssemblerError as ex:
        logger.error("%s", ex.diagnostic)
        return 1

    if args.symbols:
        for name, addr in result.link.labels.items():
            logger.info("etiqueta  %-20s %5d", name, addr)
        for name, addr in result.resolved.variables.items():
            logger.info("variable  %-20s %5d", name, addr)
    if args.listing:
        for line in listing_lines(result):
            logger.info("%s", line)

    try:
        write_bin_file(result.enc.words, out_path)
    except WriteError as ex:
        logger.error("%s", ex.diagnostic)
        return 3

    logger.info("OK: %d instrucciones → %s", len(result.enc.words), out_path)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
