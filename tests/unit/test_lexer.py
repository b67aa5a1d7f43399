import pytest
from hack_asm.lexer import split_lines, strip_comment, is_symbol, is_decimal, split_c_fields

# --- strip_comment ---
@pytest.mark.parametrize("src, expected", [
    ("@2 // this is a comment", "@2"),
    ("// full comment", ""),
    ("   D=M   ", "D=M"),
    ("\tD=M", "D=M"),
    ("D;JLE ", "D;JLE"),
    ("M=D//pegado", "M=D"),
    ("", ""),
])
def test_strip_comment(src, expected):
    assert strip_comment(src) == expected

# --- is_symbol ---
@pytest.mark.parametrize("src, expected", [
    ("LOOP", True),
    ("_0.$:var", True),
    ("ponggame.run$if_end1", True),
    ("i", True),
    ("2Avar", False),
    ("var\\", False),
    ("INFINITE-LOOP", False),
    ("a b", False),
    ("", False),
])
def test_is_symbol(src, expected):
    assert is_symbol(src) == expected

@pytest.mark.parametrize("src, expected", [
    ("0", True), ("32767", True), ("-2", False), ("3.14", False),
    ("1_000", False), ("+5", False), ("", False),
])
def test_is_decimal(src, expected):
    assert is_decimal(src) == expected

# --- split_c_fields ---
@pytest.mark.parametrize("src, expected", [
    ("D=M", ("D", "M", "", True, False)),
    ("D;JEQ", ("", "D", "JEQ", False, True)),
    ("D ; JEQ", ("", "D", "JEQ", False, True)),
    ("AMD=D+1;JMP", ("AMD", "D+1", "JMP", True, True)),
    ("D", ("", "D", "", False, False)),
    ("D=", ("D", "", "", True, False)),
])
def test_split_c_fields(src, expected):
    assert split_c_fields(src) == expected

# --- split_lines ---
@pytest.mark.parametrize("src, expected", [
    ("@1\nD=A\n", ["@1", "D=A", ""]),
    ("@1\r\nD=A", ["@1", "D=A"]),
    ("@1\x0cD=A\n", ["@1\x0cD=A", ""]),
    ("@1\x85D=A", ["@1\x85D=A"]),
    ("M=D\u2028@2", ["M=D\u2028@2"]),
])
def test_split_lines_only_on_newline(src, expected):
    assert split_lines(src) == expected

@pytest.mark.parametrize("src", ["x²", "x½", "a\u2028b"])
def test_is_symbol_rejects_non_decimal_numerics(src):
    assert not is_symbol(src)

def test_is_symbol_accepts_unicode_letters():
    assert is_symbol("café") and is_symbol("π2")
