import pytest
from hack_asm.parser import parse
from hack_asm.linker import first_pass, second_pass
from hack_asm.encoding import encode, encode_a, encode_c, decode, render
from hack_asm.ast import AInstruction, CInstruction, Label
from hack_asm.isa import COMP, DEST, JUMP
from hack_asm.utils import to_bin16
from hack_asm.diagnostics import UnknownMnemonicError

def _pipe(src: str):
    nodes = parse(src, filename="<mem>")
    link = first_pass(nodes)
    res = second_pass(nodes, link.symtab)
    return encode(res.nodes)

@pytest.mark.parametrize("n", [0, 1, 5, 16384, 32767])
def test_a_instruction_is_plain_value(n):
    bits = to_bin16(encode_a(AInstruction(str(n), value=n)))
    assert bits == format(n, "016b")
    assert bits[0] == "0"

def test_unresolved_symbol_is_rejected():
    with pytest.raises(ValueError):
        encode_a(AInstruction("x", is_symbol=True))

@pytest.mark.parametrize("ins, want", [
    (CInstruction(dest="D", comp="A"),     "1110110000010000"),
    (CInstruction(dest="D", comp="D+A"),   "1110000010010000"),
    (CInstruction(dest="M", comp="D"),     "1110001100001000"),
    (CInstruction(comp="0", jump="JMP"),   "1110101010000111"),
    (CInstruction(dest="MD", comp="M-1"),  "1111110010011000"),
    (CInstruction(comp="D", jump="JGT"),   "1110001100000001"),
])
def test_c_instruction_bits(ins, want):
    assert to_bin16(encode_c(ins)) == want

@pytest.mark.parametrize("ins, field, value", [
    (CInstruction(dest="D", comp="D*A"), "comp", "D*A"),
    (CInstruction(dest="DM", comp="A"), "dest", "DM"),
    (CInstruction(comp="0", jump="JUMP"), "jump", "JUMP"),
    (CInstruction(dest="d", comp="m"), "comp", "m"),
])
def test_unknown_mnemonic(ins, field, value):
    with pytest.raises(UnknownMnemonicError) as exc:
        encode_c(ins)
    assert exc.value.field == field and exc.value.value == value
    assert value in exc.value.diagnostic.message

def test_labels_produce_no_words():
    enc = encode([Label("INFINITE_LOOP"), CInstruction(dest="D", comp="A")])
    assert [to_bin16(w.word) for w in enc.words] == ["1110110000010000"]
    assert enc.words[0].pc == 0

def test_encode_keeps_pc_and_line():
    enc = _pipe("@2\n(L)\nD=A\n")
    assert [(w.pc, w.line) for w in enc.words] == [(0, 1), (1, 3)]

def test_decode_roundtrip_all_combinations():
    for comp in COMP:
        for dest in ("",) + tuple(DEST):
            for jump in ("",) + tuple(JUMP):
                ins = CInstruction(dest=dest, comp=comp, jump=jump)
                assert decode(encode_c(ins)) == ins

def test_decode_a_and_render():
    assert decode(0b0000000000000101) == AInstruction("5", value=5)
    assert render(decode(0b1110001100001000)) == "M=D"
    assert render(CInstruction(dest="AM", comp="M+1", jump="JNE")) == "AM=M+1;JNE"
    assert render(AInstruction("LOOP", is_symbol=True, value=4)) == "@LOOP"

def test_decode_rejects_bad_words():
    with pytest.raises(UnknownMnemonicError):
        decode(0b1000000000000000)       # prefijo distinto de 111
    with pytest.raises(UnknownMnemonicError):
        decode(0b1110100000000000)       # c-bits sin mnemónico
    with pytest.raises(ValueError):
        decode(1 << 16)
