from eventforge.testing.fixtures import emitter  # noqa: F401
