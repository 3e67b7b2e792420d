import pytest

from geodesy.minimal import (
    BUILTIN_ADAPTORS,
    BadParamError,
    GeodesyError,
    Minimal,
    NotFoundError,
)


def test_builtin_adaptors_are_registered():
    ctx = Minimal()
    assert ctx.get_resource("geo:in") == "adapt from=neuf_deg"
    assert ctx.get_resource("neu:out") == "adapt to=neuf"
    for name, definition in BUILTIN_ADAPTORS:
        assert ctx.get_resource(name) == definition


def test_without_builtin_adaptors():
    ctx = Minimal(builtin_adaptors=False)
    with pytest.raises(NotFoundError) as info:
        ctx.get_resource("geo:in")
    assert info.value.name == "geo:in"


def test_register_and_get_resource():
    ctx = Minimal()
    ctx.register_resource("stupid:way", "addone | addone | addone inv")
    assert ctx.get_resource("stupid:way") == "addone | addone | addone inv"
    ctx.register_resource("stupid:way", "addone")
    assert ctx.get_resource("stupid:way") == "addone"


def test_missing_resource():
    ctx = Minimal()
    with pytest.raises(NotFoundError):
        ctx.get_resource("foo:bar")
    with pytest.raises(GeodesyError):
        ctx.get_resource("foo")
    with pytest.raises(LookupError):
        ctx.get_resource("baz")


def test_register_and_get_op():
    ctx = Minimal()

    def add42(*args):
        return args

    ctx.register_op("add42", add42)
    assert ctx.get_op("add42") is add42


def test_missing_op():
    ctx = Minimal()
    with pytest.raises(NotFoundError) as info:
        ctx.get_op("aargh")
    assert info.value.name == "aargh"
    assert "aargh" in str(info.value)


def test_globals():
    ctx = Minimal()
    g = ctx.globals()
    assert g == {"ellps": "GRS80"}
    g["ellps"] = "intl"
    assert ctx.globals()["ellps"] == "GRS80"


def test_get_blob(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    folder = tmp_path / "geodesy" / "bin"
    folder.mkdir(parents=True)
    (folder / "sample.bin").write_bytes(b"\x01\x02\x03")
    ctx = Minimal()
    assert ctx.get_blob("sample.bin") == b"\x01\x02\x03"


def test_get_blob_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    ctx = Minimal()
    with pytest.raises(GeodesyError):
        ctx.get_blob("missing.bin")


def test_get_grid_not_supported():
    ctx = Minimal()
    with pytest.raises(GeodesyError, match="not supported"):
        ctx.get_grid("test.geoid")


def test_bad_param_error_fields():
    err = BadParamError("needing prefix:suffix format", "foo")
    assert err.parameter == "needing prefix:suffix format"
    assert err.value == "foo"
    assert isinstance(err, ValueError)