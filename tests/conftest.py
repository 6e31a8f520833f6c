import pytest

from attitudejax.config import DEFAULT_DTYPE, set_dtype


@pytest.fixture(autouse=True)
def _restore_default_dtype():
    """Run every test at the library's default precision.

    Tests that switch to float32 or the 16-bit types do so themselves; the
    default is put back afterwards so no test inherits another's dtype.
    """
    set_dtype(DEFAULT_DTYPE)
    yield
    set_dtype(DEFAULT_DTYPE)
