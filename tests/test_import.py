"""Test basic imports from the package."""


def test_main_import():
    """Test that the main package imports successfully."""
    import stellar_txnbuild
    assert stellar_txnbuild.__version__ == "0.1.0"
    assert hasattr(stellar_txnbuild, 'SetOptions')
    assert hasattr(stellar_txnbuild, 'SetOptionsBuilder')
    assert hasattr(stellar_txnbuild, 'build_set_options')


def test_public_names_resolve():
    """Every name in __all__ is importable."""
    import stellar_txnbuild
    for name in stellar_txnbuild.__all__:
        assert hasattr(stellar_txnbuild, name), name


def test_flag_constants():
    """Flag constants are plain integers usable in bitmasks."""
    from stellar_txnbuild import AuthImmutable, AuthRequired, AuthRevocable
    assert AuthRequired | AuthRevocable | AuthImmutable == 7


def test_codec_import():
    """Test codec module imports."""
    import stellar_txnbuild.codec as codec
    assert hasattr(codec, 'XdrWriter')
    assert hasattr(codec, 'decode_operation')


def test_runtime_import():
    """Test runtime module imports."""
    import stellar_txnbuild.runtime as runtime
    assert hasattr(runtime, 'AddressCodec')
    assert hasattr(runtime, 'EncodingError')
