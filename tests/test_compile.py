import pytest


def test_compile():
    # Make sure test-only dependencies aren't needed by the package
    import geogrid.coordinates
    import geogrid.datums
    import geogrid.dms
    import geogrid.mgrs
    import geogrid.transform
    import geogrid.utm
    import geogrid.vector

    assert geogrid.utm.Utm is geogrid.Utm


def test_public_api():
    import geogrid

    for name in geogrid.__all__:
        assert hasattr(geogrid, name)

    with pytest.raises(AttributeError):
        getattr(geogrid, 'not_a_real_function')


def test_typed_marker():
    from pathlib import Path

    import geogrid

    assert (Path(geogrid.__file__).parent / 'py.typed').is_file()
