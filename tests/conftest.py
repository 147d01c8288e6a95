#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import pathlib

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def open_handle(tmp_path: pathlib.Path):
    """Open binary file handle, closed on teardown."""
    file_path = tmp_path / "data.bin"
    file_path.write_bytes(b"0123456789")
    f = open(file_path, "rb")
    yield f
    f.close()


@pytest.fixture
def debug_caplog(caplog):
    """caplog capturing DEBUG records from numerus loggers."""
    caplog.set_level(logging.DEBUG, logger="numerus")
    return caplog


class Opaque:
    """Plain object with no numeric interpretation."""


@pytest.fixture
def opaque():
    return Opaque()
