"""
kblog – diagnostic logging for the knowledge-base toolkit.

Import path convention::

    from kblog.diagnostics import World, Level, Facility
    from kblog.diagnostics import StructlogForwarder
    from kblog.config import DiagnosticsSettings, load_diagnostics_settings
    from kblog.kernel.errors import DiagnosticError
"""

from kblog.diagnostics import Facility, Level, LogEvent, World, emit, emit_simple, fatal

__version__ = "0.1.0"
__all__ = [
    "Facility",
    "Level",
    "LogEvent",
    "World",
    "__version__",
    "emit",
    "emit_simple",
    "fatal",
]
