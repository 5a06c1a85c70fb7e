import logging

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def setup_logger(verbose: bool = False, journal: bool = False) -> None:
    """Configure the sdprovision logger.

    Logs go to stderr, or to the systemd journal when ``journal`` is set.
    The journal handler needs the optional ``systemd-python`` package.
    Only warnings and errors are shown unless ``verbose`` is set.
    """
    app_logger = logging.getLogger('sdprovision')
    app_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if app_logger.handlers:
        return

    if journal:
        from systemd.journal import JournalHandler

        handler: logging.Handler = JournalHandler(
            SYSLOG_IDENTIFIER='sdprovision',
        )
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    app_logger.addHandler(handler)
