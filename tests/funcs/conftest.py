import gc
import weakref

import pytest


class Referent:
    pass


@pytest.fixture
def dead_ref() -> weakref.ref[Referent]:
    """A weak reference whose referent has already been collected."""
    ref = weakref.ref(Referent())
    gc.collect()
    assert ref() is None
    return ref


@pytest.fixture
def live_ref():
    """A weak reference to an object kept alive for the duration of the test."""
    referent = Referent()
    yield weakref.ref(referent)
    del referent
