"""Logger lookup for ConciseMark modules.

Every module logs through ``get_logger(__name__)`` so all records land under
the ``concisemark`` namespace. The library never installs handlers; the
application decides where records go.

Levels used:
    WARNING  degraded output (unsupported mark, bad heading level, failed
             math typesetting, transform hook failure, dropped input)
    ERROR    front matter that could not be parsed
    DEBUG    lexer halts, before the parser reports them

To silence warnings from the library:

    logging.getLogger("concisemark").setLevel(logging.ERROR)
"""

from __future__ import annotations

import logging

NAMESPACE = "concisemark"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, moved under ``concisemark.`` if needed.

    Example:
        >>> get_logger("mymodule").name
        'concisemark.mymodule'
        >>> get_logger("concisemark.meta").name
        'concisemark.meta'
    """
    if name != NAMESPACE and not name.startswith(NAMESPACE + "."):
        name = f"{NAMESPACE}.{name}"
    return logging.getLogger(name)
