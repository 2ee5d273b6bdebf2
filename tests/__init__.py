import os


_BACKENDS = []


def _get_backends():
    global _BACKENDS
    _BACKENDS = [backend.lower() for backend in os.getenv("TEST_BACKENDS", "").split() if backend] or ["all"]


def should_skip(backend):
    """Determine whether tests against a live backend should be skipped.

    The in-process fake database is always exercised. Tests that reach a real
    service check this flag first.

    If the environment variable `TEST_BACKENDS` is unset or set to "all", all
    tests should be run.

    Otherwise, if a module's backend name is not in the space separated list,
    it should not be run.

    e.g.

    TEST_BACKENDS="all"

    TEST_BACKENDS="replit"

    TEST_BACKENDS="none"
    """
    if not _BACKENDS:
        _get_backends()
    if "all" in _BACKENDS:
        return False
    return backend.lower() not in _BACKENDS
