from __future__ import annotations

import logging

_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def setup_logging(verbose: bool) -> None:
    """Route library logs to stderr.

    Quiet mode still shows ccm_client warnings (missing keys falling back to
    their default) and errors; verbose adds set confirmations and wire logs.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("ccm_client").setLevel(logging.INFO if verbose else logging.WARNING)
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
