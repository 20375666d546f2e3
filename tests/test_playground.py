import pytest

from optifier import playground
from optifier.partial import try_from_partial


def test_main_reports_missing_field(capsys):
    assert playground.main([]) == 1
    err = capsys.readouterr().err
    assert "Field 'field_string' is missing" in err


def test_main_prints_merged_value(capsys):
    playground.main([])
    err = capsys.readouterr().err
    assert "field_i32=42" in err
    assert "field_option_string='field_option_string'" in err
    assert "field_string=None" in err


def test_demo_type_converts_when_complete():
    complete = playground.TestType.Partial(
        field_i32=42, field_string="Hello world"
    ).into_complete()
    assert complete == playground.TestType(
        field_i32=42, field_string="Hello world", field_option_string=None
    )


def test_demo_type_error_variants():
    variants = set(playground.TestType.PartialError.variants)
    assert variants == {"FieldI32Missing", "FieldStringMissing"}
    with pytest.raises(playground.TestType.PartialError.FieldI32Missing):
        try_from_partial(playground.TestType, playground.TestType.Partial())
    with pytest.raises(playground.TestType.PartialError.FieldStringMissing):
        try_from_partial(
            playground.TestType, playground.TestType.Partial(field_i32=1)
        )


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        playground.main(["--help"])
    assert excinfo.value.code == 0
    assert "optifier-playground" in capsys.readouterr().out