import pytest

from rsp.errors import RspArityError, RspTypeError


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(string/concat "foo" "bar")', "foobar"),
        ('(string/concat "a" "b" "c")', "abc"),
        ("(string/concat)", ""),
        ('(string/len "hello")', 5.0),
        ('(string/len "")', 0.0),
        ('(string/len "héllo")', 5.0),
        ('(string/trim "  padded \\n")', "padded"),
        ('(string/to-upper "MiXed")', "MIXED"),
        ('(string/to-lower "MiXed")', "mixed"),
        ('(string/reverse "abc")', "cba"),
        ('(string/format "Hello %s" "World")', "Hello World"),
        ('(string/format "%s + %s = %s" 1 2 (+ 1 2))', "1 + 2 = 3"),
        ('(string/format "no placeholders")', "no placeholders"),
        ('(string/format "%s" 1 2 3)', "1"),
        ('(string/format "x=%s" 2.5)', "x=2.5"),
        ('(string/format "%s %s %s" true nil \'sym)', "true nil sym"),
        ('(string/format "[%s]" "quoted?")', "[quoted?]"),
    ]
)
def test_string_builtins(itp, source, expected):
    assert itp.eval(source) == expected


def test_len_returns_number(itp):
    assert isinstance(itp.eval('(string/len "abc")'), float)


def test_results_compose(itp):
    code = '(string/to-upper (string/concat (string/reverse "olleh") " " "world"))'
    assert itp.eval(code) == "HELLO WORLD"


@pytest.mark.parametrize(
    "source",
    [
        "(string/len 5)",
        '(string/concat "a" 1)',
        "(string/to-upper nil)",
        "(string/reverse 'abc)",
        "(string/format 1)",
    ]
)
def test_string_type_errors(itp, source):
    with pytest.raises(RspTypeError) as info:
        itp.eval(source)
    assert info.value.expected == "String"


@pytest.mark.parametrize(
    "source",
    ['(string/len "a" "b")', "(string/trim)", "(string/format)", '(string/format "%s and %s" 1)'],
)
def test_string_arity_errors(itp, source):
    with pytest.raises(RspArityError):
        itp.eval(source)


def test_format_shortfall_reports_counts(itp):
    with pytest.raises(RspArityError) as info:
        itp.eval('(string/format "%s and %s" 1)')
    assert info.value.callee == "string/format"
    assert info.value.expected == 3
    assert info.value.actual == 2
