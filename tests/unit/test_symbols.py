import pytest
from hack_asm.symbols import PREDEFINED_SYMBOLS, VARIABLE_BASE, is_predefined

def test_predefined_values():
    assert PREDEFINED_SYMBOLS["SP"] == 0
    assert PREDEFINED_SYMBOLS["LCL"] == 1
    assert PREDEFINED_SYMBOLS["ARG"] == 2
    assert PREDEFINED_SYMBOLS["THIS"] == 3
    assert PREDEFINED_SYMBOLS["THAT"] == 4
    assert [PREDEFINED_SYMBOLS[f"R{i}"] for i in range(16)] == list(range(16))
    assert PREDEFINED_SYMBOLS["SCREEN"] == 16384
    assert PREDEFINED_SYMBOLS["KBD"] == 24576
    assert len(PREDEFINED_SYMBOLS) == 23

def test_variable_base_and_queries():
    assert VARIABLE_BASE == 16
    assert is_predefined("R15") and not is_predefined("R16")

def test_predefined_is_immutable():
    with pytest.raises(TypeError):
        PREDEFINED_SYMBOLS["R0"] = 99
