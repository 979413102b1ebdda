import pytest

from minilabs.expr_parser import CodeGenerator, Recognizer, main
from minilabs.expr_vars import TooManyVariablesError


def test_sum_worked_example():
    generator = CodeGenerator("a + b;")
    assert generator.statement() == ["V1 = a", "V2 = b", "V1 += V2", ""]
    assert generator.errors == []


def test_parenthesised_worked_example():
    output = CodeGenerator("(a+b)*c;").statement()
    assert output == ["V1 = a", "V2 = b", "V1 += V2", "V2 = c", "V1 *= V2", ""]


def test_each_statement_restarts_variables():
    generator = CodeGenerator("a;\nb;\n")
    output = generator.statement()
    assert output.count("") == 2
    assert "V1 = a" in output
    assert "V1 = b" in output
    assert generator.pool.in_use == 0


def test_missing_semicolon():
    generator = CodeGenerator("a")
    generator.statement()
    assert len(generator.errors) == 1
    assert "Missing semicolon on line" in generator.errors[0]


def test_unbalanced_parenthesis():
    generator = CodeGenerator("(a;")
    generator.statement()
    assert any("Parenthesis doesn't match" in e for e in generator.errors)


def test_recovery_skips_bad_tokens():
    generator = CodeGenerator("+ + a;")
    output = generator.statement()
    assert "V1 = a" in output
    assert sum("No first set value" in e for e in generator.errors) == 1


def test_deep_nesting_exhausts_variables():
    text = "a" + "+(a" * 7 + ")" * 7 + ";"
    with pytest.raises(TooManyVariablesError):
        CodeGenerator(text).statement()


def test_nesting_within_pool_size():
    text = "a" + "+(a" * 6 + ")" * 6 + ";"
    generator = CodeGenerator(text)
    output = generator.statement()
    assert generator.errors == []
    assert "V7 = a" in output


def test_recognizer_accepts_valid_input():
    assert Recognizer("(a+b)*c;\nx*y+z;\n").statement() == []


def test_recognizer_reports_missing_semicolon():
    errors = Recognizer("a").statement()
    assert any("Missing semicolon on line" in e for e in errors)


def test_recognizer_empty_input():
    errors = Recognizer("").statement()
    assert any("Number or id missing" in e for e in errors)


def test_recognizer_terminates_on_stray_token():
    errors = Recognizer("a ) ;").statement()
    assert any("Missing semicolon on line" in e for e in errors)
    assert any("Number or id missing" in e for e in errors)


def test_main_prints_code(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("a*b;\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "V1 *= V2" in out


def test_main_recognize_mode(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("a\n", encoding="utf-8")
    assert main(["--recognize", str(path)]) == 0
    assert "Missing semicolon on line" in capsys.readouterr().err


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1